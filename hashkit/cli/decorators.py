"""
Click decorators for hashkit CLI commands.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ..core.exceptions import HashkitException

F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(f: F) -> F:
    """Decorator turning hashkit errors into click errors.

    Usage:
        @click.command()
        @click.pass_obj
        @handle_errors
        def salt(ctx: HashkitContext, length: int):
            ...
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except HashkitException as e:
            err = click.ClickException(str(e))
            err.exit_code = e.exit_code
            raise err from e

    return wrapper  # type: ignore[return-value]
