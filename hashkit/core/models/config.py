"""
Configuration models.

Provides Pydantic models for hashkit configuration with validation.
"""

from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict, Field

from .base import HashkitBaseModel

LogLevel = Literal["debug", "info", "warning", "error"]

DEFAULT_SALT_LENGTH = 32
DEFAULT_TOKEN_LENGTH = 32


class ConfigBaseModel(HashkitBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML/env types
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
    )


class SaltConfig(ConfigBaseModel):
    """Salt generation configuration section."""

    length: int = Field(default=DEFAULT_SALT_LENGTH, gt=0)


class TokenConfig(ConfigBaseModel):
    """Token generation configuration section."""

    length: int = Field(default=DEFAULT_TOKEN_LENGTH, gt=0)


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: str | None = None
