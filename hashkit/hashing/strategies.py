"""
Hash algorithm strategy implementations.

Each strategy encapsulates the logic for a specific hash algorithm,
following the Strategy pattern for extensibility.
"""

import hashlib
from abc import ABC, abstractmethod
from typing import Any

from blake3 import blake3


def to_hex(digest: bytes) -> str:
    """Render a digest as uppercase hex pairs (0x0A -> "0A")."""
    return digest.hex().upper()


class HashStrategy(ABC):
    """
    Abstract base class for hash algorithm strategies.

    Implementations must provide:
    - algorithm_name: Unique identifier for the algorithm
    - create_hasher(): Factory method for hasher instances
    """

    @property
    @abstractmethod
    def algorithm_name(self) -> str:
        """Return algorithm identifier (e.g., 'sha256', 'md5')."""
        pass

    @abstractmethod
    def create_hasher(self) -> Any:
        """Create a new hasher instance."""
        pass

    def update(self, hasher: Any, data: bytes) -> None:
        """Update hasher with data. Default implementation works for most hashers."""
        hasher.update(data)

    def hexdigest(self, hasher: Any) -> str:
        """Get uppercase hex digest from hasher."""
        return to_hex(hasher.digest())


class SHA256Strategy(HashStrategy):
    """SHA-256 hashing strategy - used for secure hashes."""

    @property
    def algorithm_name(self) -> str:
        return "sha256"

    def create_hasher(self) -> Any:
        return hashlib.sha256()


class SHA384Strategy(HashStrategy):
    """SHA-384 hashing strategy."""

    @property
    def algorithm_name(self) -> str:
        return "sha384"

    def create_hasher(self) -> Any:
        return hashlib.sha384()


class SHA512Strategy(HashStrategy):
    """SHA-512 hashing strategy - stronger variant of SHA-2."""

    @property
    def algorithm_name(self) -> str:
        return "sha512"

    def create_hasher(self) -> Any:
        return hashlib.sha512()


class MD5Strategy(HashStrategy):
    """MD5 hashing strategy - for legacy compatibility only."""

    @property
    def algorithm_name(self) -> str:
        return "md5"

    def create_hasher(self) -> Any:
        return hashlib.md5()


class Blake3Strategy(HashStrategy):
    """BLAKE3 hashing strategy - fast cryptographic hash."""

    @property
    def algorithm_name(self) -> str:
        return "blake3"

    def create_hasher(self) -> Any:
        return blake3()


class FactoryStrategy(HashStrategy):
    """Wraps a caller-supplied nullary factory of hashlib-style objects."""

    def __init__(self, factory: Any, name: str = "custom") -> None:
        self._factory = factory
        self._name = name

    @property
    def algorithm_name(self) -> str:
        return self._name

    def create_hasher(self) -> Any:
        return self._factory()
