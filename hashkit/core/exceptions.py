"""
Custom exception hierarchy for hashkit.

Every error raised by the hashing and token services derives from
HashkitException so callers can catch the whole family at once, while the
concrete subclasses keep argument errors apart from missing configuration.
"""

from __future__ import annotations


class HashkitException(Exception):
    """
    Base exception for all hashkit errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (argument names, reasons, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Argument Errors
# =============================================================================


class InvalidArgumentError(HashkitException, ValueError):
    """
    A required argument is missing or has an unusable value.

    Inherits from ValueError so code that already catches ValueError
    for bad input keeps working. Always raised before any hashing work.
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if argument:
            ctx["argument"] = argument
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Configuration Errors
# =============================================================================


class HashkitConfigError(HashkitException):
    """Base class for configuration-related errors."""

    pass


class NotConfiguredError(HashkitConfigError):
    """
    A custom hashing algorithm was requested but is not available.

    The ``reason`` context entry is ``"factory_not_set"`` when
    set_custom_hashing_method() was never called and
    ``"factory_returned_none"`` when the configured factory produced nothing.
    """

    FACTORY_NOT_SET = "factory_not_set"
    FACTORY_RETURNED_NONE = "factory_returned_none"

    def __init__(
        self,
        message: str,
        *,
        reason: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if reason:
            ctx["reason"] = reason
        super().__init__(message, context=ctx, cause=cause)
        self.reason = reason


class ConfigValidationError(HashkitConfigError, ValueError):
    """Invalid configuration value (from TOML, environment or overrides)."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        super().__init__(message, context=ctx, cause=cause)


class ConfigFileError(HashkitConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors and unreadable files when a config
    path is given explicitly.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)
