"""
Configuration Display Tasks

Print build configuration values for external build tooling.
"""

import sys
import logging

import yaml
from invoke import task

from stream_build.config.exceptions import ConfigException
from stream_build.config.settings import load_build_configuration
from stream_build.tasks import setup_logging

logger = logging.getLogger(__name__)


def _handle_config_error(e: ConfigException):
    """Handle configuration errors with built-in guidance."""
    print(e.guidance, file=sys.stderr)
    sys.exit(1)


@task(help={
    'snapshot': 'Report the development (SNAPSHOT) version as the publication version',
    'debug': 'Enable debug logging'
})
def show_config(ctx, snapshot=False, debug=False):
    """
    Show the build configuration.

    Outputs:
        stdout: YAML configuration (parseable)
        stderr: Diagnostic information
    """
    setup_logging(debug)
    config = load_build_configuration()
    coordinates = config.publication_coordinates(snapshot=snapshot)

    print(f"📦 Release version: {config.release_version_string}", file=sys.stderr)
    print(f"🚧 Development version: {config.development_version_string}", file=sys.stderr)
    print(f"🏷️  Group: {coordinates['group']}", file=sys.stderr)
    print(f"🚀 Publishing as: {coordinates['group']}:{coordinates['version']}", file=sys.stderr)

    yaml.dump(config.to_dict(), sys.stdout, default_flow_style=False, sort_keys=True)


@task(help={
    'field': 'Field name, camelCase or snake_case (e.g. minSdkVersion)',
    'debug': 'Enable debug logging'
})
def get_field(ctx, field, debug=False):
    """
    Print a single build configuration value.

    Examples:
        invoke -c stream_build get-field --field=releaseVersionString
        invoke -c stream_build get-field --field=min_sdk_version
    """
    setup_logging(debug)
    config = load_build_configuration()

    try:
        value = config.get(field)
    except ConfigException as e:
        _handle_config_error(e)

    logger.debug(f"Resolved {field} = {value!r}")
    print(value)
