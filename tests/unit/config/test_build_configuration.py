"""
Tests for BuildConfiguration and load_build_configuration.
"""

import dataclasses
import logging

import pytest
from pydantic import ValidationError

from stream_build.config.exceptions import ConfigException, UnknownFieldException
from stream_build.config.settings import (
    BuildConfiguration,
    DEFAULT_VERSION_INFO,
    load_build_configuration,
)


def test_default_values(build_config):
    assert build_config.get('compileSdkVersion') == 34
    assert build_config.get('targetSdkVersion') == 34
    assert build_config.get('sampleTargetSdkVersion') == 34
    assert build_config.get('minSdkVersion') == 21
    assert build_config.get('majorVersion') == 6
    assert build_config.get('minorVersion') == 5
    assert build_config.get('patchVersion') == 0
    assert build_config.get('publishingGroupId') == "io.getstream"
    assert build_config.get('releaseVersionString') == "6.5.0"
    assert build_config.get('developmentVersionString') == "6.5.1-SNAPSHOT"


def test_attribute_shortcuts(build_config):
    assert build_config.release_version_string == "6.5.0"
    assert build_config.min_sdk_version == 21
    assert build_config.publishing_group_id == "io.getstream"


def test_unknown_attribute(build_config):
    with pytest.raises(AttributeError):
        build_config.version_name


def test_unknown_field_is_config_exception(build_config):
    with pytest.raises(ConfigException) as exc_info:
        build_config.get('snapshotVersionName')
    assert isinstance(exc_info.value, UnknownFieldException)
    assert exc_info.value.error_type == "unknown_field"


def test_frozen(build_config):
    with pytest.raises(dataclasses.FrozenInstanceError):
        build_config.version_info = None


def test_each_load_is_new_but_equal():
    first = load_build_configuration()
    second = load_build_configuration()
    assert first is not second
    assert first == second
    assert hash(first) == hash(second)


def test_defaults_not_mutated_by_overrides():
    load_build_configuration(patchVersion=3)
    assert DEFAULT_VERSION_INFO['patch_version'] == 0


def test_defaults_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_VERSION_INFO['patch_version'] = 9
    assert load_build_configuration().release_version_string == "6.5.0"


def test_overrides_both_spellings():
    config = load_build_configuration(majorVersion=7, minor_version=0, patchVersion=2)
    assert config.release_version_string == "7.0.2"
    assert config.development_version_string == "7.0.3-SNAPSHOT"
    assert config.min_sdk_version == 21


def test_override_unknown_field():
    with pytest.raises(UnknownFieldException):
        load_build_configuration(versionCode=1)


@pytest.mark.parametrize("field", ['releaseVersionString', 'development_version_string'])
def test_override_derived_field(field):
    with pytest.raises(UnknownFieldException):
        load_build_configuration(**{field: '9.9.9'})


def test_override_invalid_value():
    with pytest.raises(ValidationError):
        load_build_configuration(minSdkVersion=-21)


def test_sdk_arguments(build_config):
    assert build_config.sdk_arguments() == {
        'compileSdk': 34,
        'targetSdk': 34,
        'minSdk': 21,
    }


def test_publication_coordinates(build_config):
    assert build_config.publication_coordinates() == {
        'group': 'io.getstream',
        'version': '6.5.0',
    }
    assert build_config.publication_coordinates(snapshot=True) == {
        'group': 'io.getstream',
        'version': '6.5.1-SNAPSHOT',
    }


def test_to_dict_matches_record(build_config):
    assert build_config.to_dict() == build_config.version_info.to_dict()
    assert build_config.to_dict()['developmentVersionString'] == "6.5.1-SNAPSHOT"


def test_explicit_construction():
    config = load_build_configuration()
    rebuilt = BuildConfiguration(version_info=config.version_info)
    assert rebuilt == config


def test_load_logs_release_version(caplog):
    with caplog.at_level(logging.DEBUG, logger='stream_build.config.settings'):
        load_build_configuration(patchVersion=1)
    assert "6.5.1" in caplog.text
    assert "io.getstream" in caplog.text
