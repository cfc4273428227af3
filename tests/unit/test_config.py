import pytest
from pokecli import config
from pokecli.config import ConfigurationError, Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Starts every test from the defaults, with nothing cached."""
    for name in ("POKEAPI_BASE_URL", "POKEAPI_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "_settings", None)


def test_defaults_without_environment():
    settings = Settings.from_env()

    assert settings.pokeapi_base_url == "https://pokeapi.co/api/v2"
    assert settings.pokeapi_timeout == 10.0
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("POKEAPI_BASE_URL", "http://localhost:8000/api/v2")
    monkeypatch.setenv("POKEAPI_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.pokeapi_base_url == "http://localhost:8000/api/v2"
    assert settings.pokeapi_timeout == 2.5
    assert settings.log_level == "debug"


@pytest.mark.parametrize("raw_timeout", ["abc", "", "0", "-1"])
def test_unusable_timeout_raises_configuration_error(monkeypatch, raw_timeout):
    monkeypatch.setenv("POKEAPI_TIMEOUT", raw_timeout)

    with pytest.raises(ConfigurationError) as excinfo:
        Settings.from_env()

    assert "POKEAPI_TIMEOUT" in str(excinfo.value)


def test_settings_are_read_once(monkeypatch):
    monkeypatch.setenv("POKEAPI_TIMEOUT", "3")
    first = get_settings()

    monkeypatch.setenv("POKEAPI_TIMEOUT", "7")

    assert get_settings() is first
    assert first.pokeapi_timeout == 3.0
