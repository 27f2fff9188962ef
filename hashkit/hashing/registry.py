"""
Hash algorithm registry.

Provides a registry for hash algorithm strategies, so new algorithms
can be added by name without touching the Hasher.
"""

from ..core.exceptions import InvalidArgumentError
from .strategies import (
    Blake3Strategy,
    HashStrategy,
    MD5Strategy,
    SHA256Strategy,
    SHA384Strategy,
    SHA512Strategy,
)


class HashAlgorithmRegistry:
    """
    Registry for hash algorithm strategies.

    Example:
        registry = HashAlgorithmRegistry()

        # Use default algorithms
        digest = registry.compute_hash("sha384", b"data")

        # Register custom algorithm
        registry.register(FactoryStrategy(hashlib.sha3_256, "sha3_256"))
        digest = registry.compute_hash("sha3_256", b"data")
    """

    def __init__(self, register_defaults: bool = True):
        """
        Initialize the registry.

        Args:
            register_defaults: If True, register built-in algorithms
        """
        self._strategies: dict[str, HashStrategy] = {}
        if register_defaults:
            self._register_defaults()

    def _register_defaults(self) -> None:
        """Register built-in hash algorithms."""
        self.register(SHA256Strategy())
        self.register(SHA384Strategy())
        self.register(SHA512Strategy())
        self.register(MD5Strategy())
        self.register(Blake3Strategy())

    def register(self, strategy: HashStrategy) -> None:
        """Register a hash strategy, replacing any with the same name."""
        self._strategies[strategy.algorithm_name] = strategy

    def get(self, algorithm: str) -> HashStrategy | None:
        """
        Get strategy by algorithm name.

        Args:
            algorithm: Algorithm name (e.g., 'sha256', 'md5')

        Returns:
            HashStrategy or None if not found
        """
        return self._strategies.get(algorithm.lower())

    def require(self, algorithm: str) -> HashStrategy:
        """
        Get strategy by algorithm name.

        Raises:
            InvalidArgumentError: If algorithm not registered
        """
        strategy = self.get(algorithm)
        if strategy is None:
            raise InvalidArgumentError(
                f"Unknown hash algorithm: {algorithm}",
                argument="algorithm",
                context={"available": self.available_algorithms},
            )
        return strategy

    def compute_hash(self, algorithm: str, data: bytes) -> str:
        """
        Compute hash of data using the specified algorithm.

        Args:
            algorithm: Algorithm name
            data: Data to hash

        Returns:
            Uppercase hex-encoded hash digest
        """
        strategy = self.require(algorithm)
        hasher = strategy.create_hasher()
        strategy.update(hasher, data)
        return strategy.hexdigest(hasher)

    @property
    def available_algorithms(self) -> list[str]:
        """List available algorithm names."""
        return list(self._strategies.keys())

    def __contains__(self, algorithm: str) -> bool:
        """Check if algorithm is registered."""
        return algorithm.lower() in self._strategies
