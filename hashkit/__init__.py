"""
hashkit - digests, salted secure hashes and security tokens.

    from hashkit import Hasher, TokenGenerator

    hasher = Hasher()
    data = hasher.generate_secure_hash("s3cret")
    hasher.verify_secure_hash("s3cret", data.salt, data.value)  # True

    TokenGenerator().generate(64)
"""

from .core.exceptions import (
    HashkitException,
    InvalidArgumentError,
    NotConfiguredError,
)
from .core.interfaces import IHashing, ITokenGenerator
from .core.models.hash_data import HashData
from .services.hashing import Hasher
from .services.token import TokenGenerator

__all__ = [
    "HashData",
    "Hasher",
    "HashkitException",
    "IHashing",
    "ITokenGenerator",
    "InvalidArgumentError",
    "NotConfiguredError",
    "TokenGenerator",
]
