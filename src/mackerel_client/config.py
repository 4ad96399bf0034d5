"""Configuration for the Mackerel API client."""

import json
import os
import pathlib

import pydantic

from .restapi.client import DEFAULT_API_BASE, DEFAULT_USER_AGENT, parse_log_level
from .restapi.transport import DEFAULT_TIMEOUT

CONFIG_ENV_VAR = "MACKEREL_CLIENT_CONFIG_PATH"
API_KEY_ENV_VAR = "MACKEREL_APIKEY"
API_BASE_ENV_VAR = "MACKEREL_APIBASE"


class ClientConfig(pydantic.BaseModel):
    """Configuration for the Mackerel API client."""

    model_config = pydantic.ConfigDict(frozen=True)

    api_key: pydantic.SecretStr = pydantic.Field(description="Mackerel API key")
    api_base: str = pydantic.Field(
        DEFAULT_API_BASE,
        description="Base URL for the Mackerel API",
        min_length=1,
    )
    user_agent: str = pydantic.Field(
        DEFAULT_USER_AGENT,
        description="User-Agent header sent with every request",
    )
    timeout: float = pydantic.Field(
        DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )
    log_level: str = pydantic.Field(
        "INFO",
        description="Minimum level of the events the client logs",
    )

    @pydantic.field_validator("api_key")
    @classmethod
    def _api_key_not_empty(cls, value: pydantic.SecretStr) -> pydantic.SecretStr:
        if not value.get_secret_value():
            msg = "api_key cannot be empty"
            raise ValueError(msg)
        return value

    @pydantic.field_validator("log_level")
    @classmethod
    def _log_level_known(cls, value: str) -> str:
        parse_log_level(value)
        return value.upper()


def load_config(config_path: str) -> ClientConfig:
    """Load configuration from JSON file."""
    path = pathlib.Path(config_path)
    if not path.exists():
        msg = f"Configuration file not found: {config_path}"
        raise FileNotFoundError(msg)

    with path.open("r") as f:
        data = json.load(f)

    return ClientConfig(**data)


def config_from_env() -> ClientConfig:
    """Build configuration from MACKEREL_APIKEY and MACKEREL_APIBASE."""
    data = {"api_key": os.environ.get(API_KEY_ENV_VAR, "")}
    if api_base := os.environ.get(API_BASE_ENV_VAR):
        data["api_base"] = api_base
    return ClientConfig(**data)


def load_default_config() -> ClientConfig:
    """Load the config file named by the environment, or fall back to env vars."""
    if config_path := os.environ.get(CONFIG_ENV_VAR):
        return load_config(config_path)
    return config_from_env()
