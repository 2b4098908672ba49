"""
Client configuration for timeanddate.

This module defines the Pydantic model that controls how ``Client``
talks to the site, plus a YAML loader so the CLI can point at a
different host (e.g. a local mirror used for fixtures).

Key model:
- ClientConfig: base URL, search path, request headers, redirect limit.

Key functions:
- load_config(path) -> ClientConfig: Load and validate from YAML.

The library itself reads no config file and no environment variables;
``Client()`` without arguments uses ``ClientConfig()`` defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from timeanddate.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class ClientConfig(BaseModel):
    """HTTP settings for ``Client``."""

    base_url: str = Field(
        "https://www.timeanddate.com",
        description="Site root; detail paths are appended to it",
    )
    search_path: str = Field(
        "/scripts/completion.php",
        description="Path of the search completion endpoint",
    )
    accept_language: str = Field(
        "en", description="Accept-Language header; table labels are matched in English"
    )
    user_agent: str | None = Field(
        None, description="Optional User-Agent override"
    )
    max_redirects: int = Field(
        2, ge=0, description="Maximum redirects followed per request"
    )
    timeout: float | None = Field(
        None,
        gt=0,
        description="Per-request timeout in seconds; None keeps the transport default",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def search_url(self) -> str:
        return self.base_url + "/" + self.search_path.lstrip("/")

    def detail_url(self, path: str) -> str:
        """Absolute URL of a detail page, e.g. ``/worldclock/@2830841``."""
        return self.base_url + "/" + path.lstrip("/")


def load_config(path: str | Path) -> ClientConfig:
    """Load and validate a YAML client config.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty or not a mapping.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Config file must contain a mapping, got {type(raw).__name__}: {path}"
        )
    logger.info("Loaded config from %s", path)
    return ClientConfig.model_validate(raw)
