import pytest

from custom_events.config import EventSettings, THROW_ERRORS_ENV, build_settings_from_dict
from custom_events.exceptions import ConfigurationError


def test_event_settings_defaults():
    settings = EventSettings()
    assert settings.throw_errors is False


@pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
def test_from_env_truthy(value):
    assert EventSettings.from_env({THROW_ERRORS_ENV: value}).throw_errors is True


@pytest.mark.parametrize("value", ["0", "false", "No", "off", ""])
def test_from_env_falsy(value):
    assert EventSettings.from_env({THROW_ERRORS_ENV: value}).throw_errors is False


def test_from_env_missing_uses_default():
    assert EventSettings.from_env({}).throw_errors is False


def test_from_env_rejects_garbage():
    with pytest.raises(ConfigurationError):
        EventSettings.from_env({THROW_ERRORS_ENV: "maybe"})


def test_build_settings_rejects_unknown_keys():
    with pytest.raises(ConfigurationError):
        build_settings_from_dict({"throw_error": True})


def test_settings_are_frozen():
    settings = build_settings_from_dict({"throw_errors": True})
    with pytest.raises(Exception):
        settings.throw_errors = False
