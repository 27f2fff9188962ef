"""
Core infrastructure for hashkit.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Interface definitions for all services
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container, resolve, try_resolve
from .exceptions import (
    ConfigFileError,
    ConfigValidationError,
    HashkitConfigError,
    HashkitException,
    InvalidArgumentError,
    NotConfiguredError,
)

__all__ = [
    "ConfigFileError",
    "ConfigValidationError",
    "HashkitConfigError",
    "HashkitException",
    "InvalidArgumentError",
    "NotConfiguredError",
    "ServiceContainer",
    "bootstrap",
    "get_container",
    "is_initialized",
    "reset",
    "resolve",
    "try_resolve",
]
