"""
Token generator interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ITokenGenerator(ABC):
    """Generates random security tokens."""

    @abstractmethod
    def generate(self, length: int | None = None) -> str:
        """
        Generate a security token.

        Args:
            length: Number of random bytes behind the token (default 32)

        Returns:
            The token as base64 text
        """
        pass
