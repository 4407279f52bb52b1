"""
Pydantic models for the build configuration record.
"""
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt, computed_field
from pydantic.alias_generators import to_camel

from .exceptions import UnknownFieldException


class VersionInfo(BaseModel):
    """SDK levels, version triple and publishing group for a library build.

    Values are stored exactly as given (strict mode, no coercion) and the
    record cannot be modified after construction. The release and
    development version strings are computed from the triple on access.
    """
    model_config = ConfigDict(frozen=True, strict=True, extra='forbid')

    compile_sdk_version: PositiveInt
    target_sdk_version: PositiveInt
    sample_target_sdk_version: PositiveInt
    min_sdk_version: PositiveInt
    major_version: NonNegativeInt
    minor_version: NonNegativeInt
    patch_version: NonNegativeInt
    publishing_group_id: str = Field(min_length=1)

    @computed_field
    @property
    def release_version_string(self) -> str:
        """Version published for a release build, e.g. ``6.5.0``."""
        return f"{self.major_version}.{self.minor_version}.{self.patch_version}"

    @computed_field
    @property
    def development_version_string(self) -> str:
        """Snapshot version of the next patch, e.g. ``6.5.1-SNAPSHOT``."""
        return f"{self.major_version}.{self.minor_version}.{self.patch_version + 1}-SNAPSHOT"

    @classmethod
    def attribute_names(cls) -> List[str]:
        """Python attribute names of every readable field, stored fields first."""
        return list(cls.model_fields) + list(cls.model_computed_fields)

    @classmethod
    def field_names(cls) -> List[str]:
        """Every readable field in camelCase spelling."""
        return [to_camel(name) for name in cls.attribute_names()]

    @classmethod
    def resolve_attribute(cls, field: str, stored_only: bool = False) -> str:
        """Map a camelCase or snake_case field name to its attribute name.

        With stored_only, derived fields count as unknown since they cannot
        be supplied as input.
        """
        names = list(cls.model_fields) if stored_only else cls.attribute_names()
        if field in names:
            return field
        by_camel = {to_camel(name): name for name in names}
        if field in by_camel:
            return by_camel[field]
        raise UnknownFieldException(field, [to_camel(name) for name in names])

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VersionInfo':
        """Create VersionInfo from a mapping keyed by either spelling."""
        return cls(**{cls.resolve_attribute(key, stored_only=True): value for key, value in data.items()})

    def get(self, field: str) -> Any:
        """Return the value of a stored or derived field."""
        return getattr(self, self.resolve_attribute(field))

    def to_dict(self) -> Dict[str, Any]:
        """All fields, derived ones included, keyed by camelCase name."""
        return {to_camel(name): value for name, value in self.model_dump().items()}
