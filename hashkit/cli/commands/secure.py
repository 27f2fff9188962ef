"""
Native Click implementation of the secure and verify commands.

Usage:
    hashkit secure TEXT [--salt BASE64]
    hashkit verify TEXT --salt BASE64 --expected HEX
"""

from __future__ import annotations

import base64
import binascii

import click

from ..context import HashkitContext
from ..decorators import handle_errors


def _decode_salt(ctx: click.Context, param: click.Parameter, value: str | None) -> bytes | None:
    """Decode a base64 salt option."""
    if value is None:
        return None
    try:
        return base64.b64decode(value, validate=True)
    except binascii.Error as e:
        raise click.BadParameter(f"not valid base64: {e}") from e


@click.command("secure")
@click.argument("text")
@click.option("--salt", callback=_decode_salt, help="Base64 salt to reuse.")
@click.pass_obj
@handle_errors
def secure(ctx: HashkitContext, text: str, salt: bytes | None) -> None:
    """Create a salted SHA-256 hash of TEXT.

    Without --salt a fresh salt is generated and printed along with the
    hash. With --salt only the (deterministic) hash is printed.
    """
    if salt is not None:
        click.echo(ctx.hasher.generate_secure_hash_with_salt(text, salt))
        return

    data = ctx.hasher.generate_secure_hash(text)
    click.echo(f"salt:  {data.salt_b64}")
    click.echo(f"value: {data.value}")


@click.command("verify")
@click.argument("text")
@click.option("--salt", required=True, callback=_decode_salt, help="Base64 salt of the stored hash.")
@click.option("--expected", required=True, help="Stored hash value.")
@click.pass_obj
@handle_errors
def verify(ctx: HashkitContext, text: str, salt: bytes, expected: str) -> None:
    """Check TEXT against a stored secure hash. Exits 1 on mismatch."""
    if ctx.hasher.verify_secure_hash(text, salt, expected):
        click.echo("match")
        return
    click.echo("mismatch")
    raise SystemExit(1)
