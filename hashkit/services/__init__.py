"""
Service implementations for hashkit's interfaces.
"""

from .hashing import Hasher, read_input
from .logging import HashkitLogger, NullLogger
from .token import TokenGenerator

__all__ = [
    "Hasher",
    "HashkitLogger",
    "NullLogger",
    "TokenGenerator",
    "read_input",
]
