"""
Argument validation shared by the hashing and token services.

Every check raises InvalidArgumentError before any work is done.
"""

from __future__ import annotations

from typing import Any

from .exceptions import InvalidArgumentError


def require_not_none(value: Any, argument: str) -> None:
    """Reject a missing required argument."""
    if value is None:
        raise InvalidArgumentError(f"{argument} cannot be None", argument=argument)


def require_length(length: Any, argument: str = "length") -> int:
    """Return length if it is a positive int."""
    # bool is an int subclass but never a meaningful length
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidArgumentError(
            f"{argument} must be an integer", argument=argument, context={"value": length}
        )
    if length <= 0:
        raise InvalidArgumentError(
            f"{argument} must be greater than zero", argument=argument, context={"value": length}
        )
    return length
