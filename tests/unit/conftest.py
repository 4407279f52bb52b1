"""
Unit test fixtures for stream-build-config.
"""

import pytest

from stream_build.config.settings import load_build_configuration


@pytest.fixture
def build_config():
    """A freshly constructed default build configuration."""
    return load_build_configuration()
