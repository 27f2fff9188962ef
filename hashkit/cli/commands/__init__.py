"""
Click command implementations for hashkit CLI.

Commands are registered with the main CLI group via the
register_commands() function in hashkit.cli.
"""

from .hash import hash_
from .material import salt, token
from .secure import secure, verify

COMMANDS = [
    hash_,
    secure,
    verify,
    salt,
    token,
]

__all__ = [
    "COMMANDS",
    "hash_",
    "salt",
    "secure",
    "token",
    "verify",
]
