"""Configuration for the recipe importer.

Settings come from environment variables (the CLI loads a .env file first)
and are validated with a voluptuous schema.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Mapping

import voluptuous as vol
from pydantic import BaseModel, ConfigDict

from .const import (
    CONF_BACKOFF,
    CONF_MAX_RESPONSE_SIZE,
    CONF_MAX_RETRIES,
    CONF_REQUIRE_INGREDIENTS,
    CONF_REQUIRE_INSTRUCTIONS,
    CONF_TIMEOUT,
    CONF_USER_AGENT,
    DEFAULT_BACKOFF,
    DEFAULT_MAX_RESPONSE_SIZE,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
)
from .exceptions import ConfigError

_LOGGER = logging.getLogger(__name__)

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_TIMEOUT, default=DEFAULT_TIMEOUT): vol.All(
            vol.Coerce(float), vol.Range(min=0.1, max=120)),
        vol.Optional(CONF_MAX_RETRIES, default=DEFAULT_MAX_RETRIES): vol.All(
            vol.Coerce(int), vol.Range(min=0, max=10)),
        vol.Optional(CONF_BACKOFF, default=DEFAULT_BACKOFF): vol.All(
            vol.Coerce(float), vol.Range(min=0)),
        vol.Optional(CONF_MAX_RESPONSE_SIZE, default=DEFAULT_MAX_RESPONSE_SIZE): vol.All(
            vol.Coerce(int), vol.Range(min=1024)),
        vol.Optional(CONF_USER_AGENT, default=DEFAULT_USER_AGENT): vol.All(
            str, vol.Length(min=1)),
        vol.Optional(CONF_REQUIRE_INGREDIENTS, default=True): vol.Boolean(),
        vol.Optional(CONF_REQUIRE_INSTRUCTIONS, default=False): vol.Boolean(),
    },
    extra=vol.REMOVE_EXTRA,
)

CONFIG_KEYS = frozenset(str(key) for key in CONFIG_SCHEMA.schema)


class ImporterConfig(BaseModel):
    """Validated importer settings."""

    model_config = ConfigDict(frozen=True)

    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    backoff: float = DEFAULT_BACKOFF
    max_response_size: int = DEFAULT_MAX_RESPONSE_SIZE
    user_agent: str = DEFAULT_USER_AGENT
    require_ingredients: bool = True
    require_instructions: bool = False


def load_config(env: Mapping[str, Any] | None = None) -> ImporterConfig:
    """Build the importer configuration from environment variables.

    Args:
        env: Mapping to read instead of os.environ

    Returns:
        Validated configuration

    Raises:
        ConfigError: If any variable has an invalid value
    """
    if env is None:
        env = os.environ

    # Empty variables mean "use the default"
    values = {key: value for key, value in env.items()
              if key in CONFIG_KEYS and value != ""}
    try:
        validated = CONFIG_SCHEMA(values)
    except vol.Invalid as e:
        name = e.path[0] if e.path else "configuration"
        raise ConfigError(f"Invalid value for {name}: {e.msg}") from e

    config = ImporterConfig(
        timeout=validated[CONF_TIMEOUT],
        max_retries=validated[CONF_MAX_RETRIES],
        backoff=validated[CONF_BACKOFF],
        max_response_size=validated[CONF_MAX_RESPONSE_SIZE],
        user_agent=validated[CONF_USER_AGENT],
        require_ingredients=validated[CONF_REQUIRE_INGREDIENTS],
        require_instructions=validated[CONF_REQUIRE_INSTRUCTIONS],
    )
    _LOGGER.debug("Loaded importer config: %s", config)
    return config
