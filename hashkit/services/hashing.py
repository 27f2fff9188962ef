"""
Default hashing service implementation.

Computes uppercase hex digests of strings, byte buffers and seekable
binary streams, and produces salted SHA-256 hashes for credential storage.
"""

from __future__ import annotations

import base64
import hmac
import secrets

from ..core.di import resolve_or_default
from ..core.exceptions import InvalidArgumentError, NotConfiguredError
from ..core.interfaces.hashing import AlgorithmFactory, HashInput, IHashing
from ..core.interfaces.logger import ILogger
from ..core.models.config import DEFAULT_SALT_LENGTH
from ..core.models.hash_data import HashData
from ..core.validation import require_length, require_not_none
from ..hashing import FactoryStrategy, HashAlgorithmRegistry
from .logging import NullLogger


def read_input(data: HashInput, argument: str = "data") -> bytes:
    """
    Turn any supported hash input into the bytes to digest.

    Strings are encoded as UTF-8, buffers are used as-is and streams are
    rewound to position 0 and read to the end. The stream stays open.

    Raises:
        InvalidArgumentError: If data is None, of an unsupported type,
            or a stream that cannot be rewound or yields text
    """
    require_not_none(data, argument)

    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    if hasattr(data, "read") and hasattr(data, "seek"):
        try:
            data.seek(0)
            content = data.read()
        except (OSError, ValueError) as e:
            raise InvalidArgumentError(
                "Stream must be readable and seekable", argument=argument, cause=e
            ) from e
        if not isinstance(content, (bytes, bytearray)):
            raise InvalidArgumentError("Stream must be opened in binary mode", argument=argument)
        return bytes(content)

    raise InvalidArgumentError(
        f"Unsupported input type: {type(data).__name__}", argument=argument
    )


class Hasher(IHashing):
    """
    Default implementation of IHashing.

    Built-in algorithms come from a HashAlgorithmRegistry. The custom
    algorithm factory is owned by this instance and is not synchronised:
    call set_custom_hashing_method() before sharing the instance.
    """

    SECURE_ALGORITHM = "sha256"

    def __init__(
        self,
        registry: HashAlgorithmRegistry | None = None,
        logger: ILogger | None = None,
        salt_length: int = DEFAULT_SALT_LENGTH,
    ) -> None:
        """
        Initialize hashing service.

        Args:
            registry: Hash algorithm registry (defaults to standard registry)
            logger: Logger (defaults to the registered ILogger or a NullLogger)
            salt_length: Salt length used by generate_secure_hash() and generate_salt()
        """
        self._registry = registry or HashAlgorithmRegistry()
        self._logger = logger or resolve_or_default(ILogger, NullLogger)
        self._salt_length = require_length(salt_length, "salt_length")
        self._custom_strategy: FactoryStrategy | None = None

    @property
    def registry(self) -> HashAlgorithmRegistry:
        return self._registry

    def set_custom_hashing_method(self, factory: AlgorithmFactory) -> None:
        """
        Set the algorithm factory used by generate_custom_hash().

        Args:
            factory: Nullary callable returning a hashlib-style object,
                e.g. ``hashlib.sha3_256``

        Raises:
            InvalidArgumentError: If factory is None or not callable
        """
        require_not_none(factory, "factory")
        if not callable(factory):
            raise InvalidArgumentError("factory must be callable", argument="factory")
        self._custom_strategy = FactoryStrategy(factory)
        self._logger.info(
            "Custom hashing method set: %s", getattr(factory, "__name__", repr(factory))
        )

    def generate_secure_hash(self, value: str) -> HashData:
        """
        Hash value with SHA-256 and a freshly generated salt.

        Returns:
            HashData holding the salt and the hex digest; store both.
        """
        require_not_none(value, "value")
        if not isinstance(value, str):
            raise InvalidArgumentError("value must be a string", argument="value")
        salt = self.generate_salt()
        return HashData(salt=salt, value=self.generate_secure_hash_with_salt(value, salt))

    def generate_secure_hash_with_salt(self, value: str, salt: bytes) -> str:
        """
        Hash value with SHA-256 and the given salt.

        The digested text is ``value`` followed by the base64 form of ``salt``.
        Identical inputs always give the same result.
        """
        require_not_none(value, "value")
        require_not_none(salt, "salt")
        if not isinstance(value, str):
            raise InvalidArgumentError("value must be a string", argument="value")
        if not isinstance(salt, (bytes, bytearray, memoryview)):
            raise InvalidArgumentError("salt must be bytes", argument="salt")
        salted = value + base64.b64encode(bytes(salt)).decode("ascii")
        return self.compute_hash(self.SECURE_ALGORITHM, salted)

    def verify_secure_hash(self, value: str, salt: bytes, expected: str) -> bool:
        """Check value against a stored secure hash, in constant time."""
        require_not_none(expected, "expected")
        if not isinstance(expected, str):
            raise InvalidArgumentError("expected must be a string", argument="expected")
        actual = self.generate_secure_hash_with_salt(value, salt)
        return hmac.compare_digest(actual.encode("ascii"), expected.upper().encode("utf-8"))

    def sha256_hash(self, data: HashInput) -> str:
        """Hash data using SHA-256 (64 hex chars)."""
        return self.compute_hash("sha256", data)

    def sha384_hash(self, data: HashInput) -> str:
        """Hash data using SHA-384 (96 hex chars)."""
        return self.compute_hash("sha384", data)

    def sha512_hash(self, data: HashInput) -> str:
        """Hash data using SHA-512 (128 hex chars)."""
        return self.compute_hash("sha512", data)

    def md5_hash(self, data: HashInput) -> str:
        """Hash data using MD5 (32 hex chars)."""
        return self.compute_hash("md5", data)

    def compute_hash(self, algorithm: str, data: HashInput) -> str:
        """
        Hash data using a registered algorithm.

        Raises:
            InvalidArgumentError: If data is unusable or algorithm is unknown
        """
        require_not_none(algorithm, "algorithm")
        if not isinstance(algorithm, str):
            raise InvalidArgumentError("algorithm must be a string", argument="algorithm")
        # Unknown names fail before the stream is read
        strategy = self._registry.require(algorithm)
        content = read_input(data)
        hasher = strategy.create_hasher()
        strategy.update(hasher, content)
        return strategy.hexdigest(hasher)

    def generate_custom_hash(self, data: HashInput) -> str:
        """
        Hash data using the algorithm set by set_custom_hashing_method().

        The factory is called once per invocation; algorithm instances are
        never reused.

        Raises:
            InvalidArgumentError: If data is unusable
            NotConfiguredError: If no factory is set or it returns None
        """
        content = read_input(data)

        strategy = self._custom_strategy
        if strategy is None:
            self._logger.warning("Custom hash requested before a hashing method was set")
            raise NotConfiguredError(
                "The custom hash algorithm is not set. "
                "set_custom_hashing_method() needs to be called first.",
                reason=NotConfiguredError.FACTORY_NOT_SET,
            )

        hasher = strategy.create_hasher()
        if hasher is None:
            self._logger.warning("Custom hashing method returned no algorithm")
            raise NotConfiguredError(
                "The factory set by set_custom_hashing_method() returned None.",
                reason=NotConfiguredError.FACTORY_RETURNED_NONE,
            )

        strategy.update(hasher, content)
        return strategy.hexdigest(hasher)

    def generate_salt(self, length: int | None = None) -> bytes:
        """
        Generate a salt of cryptographically random non-zero bytes.

        Args:
            length: Number of bytes (defaults to the configured salt length, 32)

        Raises:
            InvalidArgumentError: If length is not a positive integer
        """
        size = self._salt_length if length is None else require_length(length)
        self._logger.debug("Generating %d byte salt", size)
        # Each byte drawn uniformly from 1..255
        return bytes(secrets.randbelow(255) + 1 for _ in range(size))
