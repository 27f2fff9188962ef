"""
Native Click implementation of the salt and token commands.
"""

from __future__ import annotations

import base64

import click

from ..context import HashkitContext
from ..decorators import handle_errors


@click.command("salt")
@click.option("--length", type=int, default=None, help="Number of bytes (default: salt.length).")
@click.pass_obj
@handle_errors
def salt(ctx: HashkitContext, length: int | None) -> None:
    """Print a fresh salt of non-zero random bytes, base64 encoded."""
    click.echo(base64.b64encode(ctx.hasher.generate_salt(length)).decode("ascii"))


@click.command("token")
@click.option("--length", type=int, default=None, help="Number of random bytes (default: token.length).")
@click.pass_obj
@handle_errors
def token(ctx: HashkitContext, length: int | None) -> None:
    """Print a fresh base64 security token."""
    click.echo(ctx.tokens.generate(length))
