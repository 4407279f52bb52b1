"""
Build Configuration

Holds the SDK levels, library version and publishing group consumed by the
build. A configuration is constructed once with load_build_configuration()
and handed to whatever needs it; there is no module-level instance.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping

from .models import VersionInfo

logger = logging.getLogger(__name__)


DEFAULT_VERSION_INFO: Mapping[str, Any] = MappingProxyType({
    'compile_sdk_version': 34,
    'target_sdk_version': 34,
    'sample_target_sdk_version': 34,
    'min_sdk_version': 21,
    'major_version': 6,
    'minor_version': 5,
    'patch_version': 0,
    'publishing_group_id': 'io.getstream',
})


@dataclass(frozen=True)
class BuildConfiguration:
    """Read-only build configuration shared by every build step."""

    version_info: VersionInfo

    def get(self, field: str) -> Any:
        """Get a field by camelCase or snake_case name.

        Raises:
            UnknownFieldException: If the name is not a configuration field
        """
        return self.version_info.get(field)

    def __getattr__(self, name: str) -> Any:
        # Only reached for names the dataclass itself does not define
        if name.startswith('_') or name == 'version_info':
            raise AttributeError(name)
        if name in VersionInfo.attribute_names():
            return getattr(self.version_info, name)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def sdk_arguments(self) -> Dict[str, int]:
        """SDK levels passed to the compiler toolchain."""
        return {
            'compileSdk': self.version_info.compile_sdk_version,
            'targetSdk': self.version_info.target_sdk_version,
            'minSdk': self.version_info.min_sdk_version,
        }

    def publication_coordinates(self, snapshot: bool = False) -> Dict[str, str]:
        """Group and version used when publishing the library."""
        if snapshot:
            version = self.version_info.development_version_string
        else:
            version = self.version_info.release_version_string
        return {
            'group': self.version_info.publishing_group_id,
            'version': version,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a flat dictionary keyed by camelCase field name."""
        return self.version_info.to_dict()


def load_build_configuration(**overrides: Any) -> BuildConfiguration:
    """Build a configuration from the default values.

    Args:
        **overrides: Field values replacing the defaults, keyed by camelCase
            or snake_case field name

    Returns:
        A new BuildConfiguration instance

    Raises:
        UnknownFieldException: If an override names an unknown or derived field
        pydantic.ValidationError: If a value breaks a field constraint
    """
    values = dict(DEFAULT_VERSION_INFO)
    for key, value in overrides.items():
        values[VersionInfo.resolve_attribute(key, stored_only=True)] = value

    config = BuildConfiguration(version_info=VersionInfo(**values))

    if overrides:
        logger.debug(f"Applied build configuration overrides: {sorted(overrides)}")
    logger.debug(
        f"Loaded build configuration {config.version_info.release_version_string} "
        f"for {config.version_info.publishing_group_id}"
    )
    return config
