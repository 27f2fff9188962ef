"""
Hashing interface.

Defines the contract for computing digests of strings, byte buffers and
seekable binary streams, and for producing salted secure hashes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import IO, Any, Union

from ..models.hash_data import HashData

# str is hashed as UTF-8; buffers are used verbatim; streams are rewound and read fully.
HashInput = Union[str, bytes, bytearray, memoryview, IO[bytes]]

# Nullary callable returning a hashlib-style object (update()/digest()).
AlgorithmFactory = Callable[[], Any]


class IHashing(ABC):
    """
    Interface for hashing data.

    Example:
        hashing = resolve(IHashing)

        def save_password(user, password):
            data = hashing.generate_secure_hash(password)
            user.password = data.value
            user.salt = data.salt

        def validate_password(user, password):
            return hashing.verify_secure_hash(password, user.salt, user.password)
    """

    @abstractmethod
    def set_custom_hashing_method(self, factory: AlgorithmFactory) -> None:
        """Set the algorithm factory used by generate_custom_hash()."""
        pass

    @abstractmethod
    def generate_secure_hash(self, value: str) -> HashData:
        """Hash value with SHA-256 and a freshly generated salt."""
        pass

    @abstractmethod
    def generate_secure_hash_with_salt(self, value: str, salt: bytes) -> str:
        """Hash value with SHA-256 and the given salt."""
        pass

    @abstractmethod
    def verify_secure_hash(self, value: str, salt: bytes, expected: str) -> bool:
        """Check value against a previously generated secure hash."""
        pass

    @abstractmethod
    def sha256_hash(self, data: HashInput) -> str:
        """Hash data using SHA-256."""
        pass

    @abstractmethod
    def sha384_hash(self, data: HashInput) -> str:
        """Hash data using SHA-384."""
        pass

    @abstractmethod
    def sha512_hash(self, data: HashInput) -> str:
        """Hash data using SHA-512."""
        pass

    @abstractmethod
    def md5_hash(self, data: HashInput) -> str:
        """Hash data using MD5."""
        pass

    @abstractmethod
    def compute_hash(self, algorithm: str, data: HashInput) -> str:
        """Hash data using a registered algorithm by name."""
        pass

    @abstractmethod
    def generate_custom_hash(self, data: HashInput) -> str:
        """Hash data using the algorithm set by set_custom_hashing_method()."""
        pass

    @abstractmethod
    def generate_salt(self, length: int | None = None) -> bytes:
        """Generate a salt of random non-zero bytes."""
        pass
