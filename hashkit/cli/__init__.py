"""
Click-based CLI for hashkit.

Usage:
    from hashkit.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from ..core.exceptions import HashkitException
from .context import HashkitContext

# Version is loaded from package metadata
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("hashkit")
except PackageNotFoundError:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="hashkit")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Config file (default: .hashkit/config.toml found from cwd).",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """hashkit - digests, salted secure hashes and security tokens

    \b
    Hashing:
        hashkit hash sha256 TEXT     Hex digest of TEXT (or --file)
        hashkit secure TEXT          Salted SHA-256 hash
        hashkit verify TEXT ...      Check TEXT against a stored hash

    \b
    Random material:
        hashkit salt                 Non-zero random salt
        hashkit token                Base64 security token
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    try:
        ctx.obj = HashkitContext.create(config_path=config_path)
    except HashkitException as e:
        raise click.ClickException(str(e)) from e


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "HashkitContext",
    "__version__",
    "cli",
    "register_commands",
]
