"""
Build configuration for stream-build-config.
"""

from .exceptions import ConfigException, UnknownFieldException
from .models import VersionInfo
from .settings import BuildConfiguration, DEFAULT_VERSION_INFO, load_build_configuration
from .logging import bootstrap_logging, get_logger


__all__ = [
    'ConfigException',
    'UnknownFieldException',
    'VersionInfo',
    'BuildConfiguration',
    'DEFAULT_VERSION_INFO',
    'load_build_configuration',
    'bootstrap_logging',
    'get_logger'
]
