"""Tests for client configuration loading."""

import json

import pydantic
import pytest

from mackerel_client import config
from mackerel_client.restapi.client import DEFAULT_API_BASE


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Tests start without any Mackerel environment variables."""
    names = (config.API_KEY_ENV_VAR, config.API_BASE_ENV_VAR, config.CONFIG_ENV_VAR)
    for name in names:
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# ClientConfig
# ---------------------------------------------------------------------------


def test_defaults():
    """Only the API key is required."""
    cfg = config.ClientConfig(api_key="k")
    assert cfg.api_base == DEFAULT_API_BASE
    assert cfg.timeout == 30.0
    assert cfg.user_agent.startswith("mackerel-client-python/")


def test_api_key_is_secret():
    """The API key does not appear when the config is printed."""
    cfg = config.ClientConfig(api_key="very-secret")
    assert "very-secret" not in repr(cfg)
    assert cfg.api_key.get_secret_value() == "very-secret"


def test_empty_api_key_rejected():
    """An empty API key is a configuration error."""
    with pytest.raises(pydantic.ValidationError, match="api_key cannot be empty"):
        config.ClientConfig(api_key="")


def test_non_positive_timeout_rejected():
    """Timeouts must be positive."""
    with pytest.raises(pydantic.ValidationError):
        config.ClientConfig(api_key="k", timeout=0)


def test_log_level_is_normalized():
    """Level names are accepted in any case."""
    assert config.ClientConfig(api_key="k", log_level="debug").log_level == "DEBUG"


def test_unknown_log_level_rejected():
    """Only standard logging level names are accepted."""
    with pytest.raises(pydantic.ValidationError, match="unknown log level"):
        config.ClientConfig(api_key="k", log_level="chatty")


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def test_load_config_from_file(tmp_path):
    """A JSON file provides every setting."""
    path = tmp_path / "mackerel.json"
    path.write_text(
        json.dumps(
            {
                "api_key": "file-key",
                "api_base": "https://mackerel.example.com",
                "timeout": 5,
                "log_level": "DEBUG",
            }
        )
    )

    cfg = config.load_config(str(path))

    assert cfg.api_key.get_secret_value() == "file-key"
    assert cfg.api_base == "https://mackerel.example.com"
    assert cfg.timeout == 5.0
    assert cfg.log_level == "DEBUG"


def test_load_config_missing_file(tmp_path):
    """A missing file is reported as such."""
    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        config.load_config(str(tmp_path / "absent.json"))


def test_config_from_env(monkeypatch: pytest.MonkeyPatch):
    """MACKEREL_APIKEY and MACKEREL_APIBASE configure the client."""
    monkeypatch.setenv(config.API_KEY_ENV_VAR, "env-key")
    monkeypatch.setenv(config.API_BASE_ENV_VAR, "https://env.example.com")

    cfg = config.config_from_env()

    assert cfg.api_key.get_secret_value() == "env-key"
    assert cfg.api_base == "https://env.example.com"


def test_config_from_env_without_key():
    """Without MACKEREL_APIKEY the configuration is invalid."""
    with pytest.raises(pydantic.ValidationError):
        config.config_from_env()


def test_load_default_config_prefers_file(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """A config path in the environment takes precedence over env credentials."""
    path = tmp_path / "mackerel.json"
    path.write_text(json.dumps({"api_key": "file-key"}))
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(path))
    monkeypatch.setenv(config.API_KEY_ENV_VAR, "env-key")

    assert config.load_default_config().api_key.get_secret_value() == "file-key"


def test_load_default_config_falls_back_to_env(monkeypatch: pytest.MonkeyPatch):
    """Without a config path the environment credentials are used."""
    monkeypatch.setenv(config.API_KEY_ENV_VAR, "env-key")
    assert config.load_default_config().api_key.get_secret_value() == "env-key"
