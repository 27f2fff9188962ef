"""
Pydantic models for hashkit results and configuration.
"""

from .base import HashkitBaseModel, ImmutableModel
from .config import (
    DEFAULT_SALT_LENGTH,
    DEFAULT_TOKEN_LENGTH,
    ConfigBaseModel,
    LoggingConfig,
    LogLevel,
    SaltConfig,
    TokenConfig,
)
from .hash_data import HashData

__all__ = [
    "DEFAULT_SALT_LENGTH",
    "DEFAULT_TOKEN_LENGTH",
    "ConfigBaseModel",
    "HashData",
    "HashkitBaseModel",
    "ImmutableModel",
    "LogLevel",
    "LoggingConfig",
    "SaltConfig",
    "TokenConfig",
]
