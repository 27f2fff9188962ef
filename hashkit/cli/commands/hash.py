"""
Native Click implementation of the hash command.

Usage: hashkit hash ALGORITHM [TEXT] [--file PATH]
"""

from __future__ import annotations

from pathlib import Path

import click

from ..context import HashkitContext
from ..decorators import handle_errors


@click.command("hash")
@click.argument("algorithm")
@click.argument("text", required=False)
@click.option(
    "--file",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Hash the contents of this file instead of TEXT.",
)
@click.pass_obj
@handle_errors
def hash_(ctx: HashkitContext, algorithm: str, text: str | None, file_path: Path | None) -> None:
    """Print the uppercase hex digest of TEXT or a file.

    \b
    Examples:

        hashkit hash sha256 Peter
        hashkit hash md5 --file archive.tar
    """
    if (text is None) == (file_path is None):
        raise click.UsageError("Provide either TEXT or --file, not both.")

    if file_path is not None:
        with file_path.open("rb") as handle:
            digest = ctx.hasher.compute_hash(algorithm, handle)
    else:
        digest = ctx.hasher.compute_hash(algorithm, text)

    click.echo(digest)
