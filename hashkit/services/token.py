"""
Security token generation.
"""

from __future__ import annotations

import base64
import secrets

from ..core.di import resolve_or_default
from ..core.interfaces.logger import ILogger
from ..core.interfaces.token import ITokenGenerator
from ..core.models.config import DEFAULT_TOKEN_LENGTH
from ..core.validation import require_length
from .logging import NullLogger


class TokenGenerator(ITokenGenerator):
    """
    Generates random security tokens as padded standard base64.

    A token over ``n`` random bytes is ``ceil(n / 3) * 4`` characters long,
    so the default 32 bytes give 44 characters.

    Example:
        tokens = resolve(ITokenGenerator)
        reset_token = tokens.generate(64)
    """

    def __init__(
        self,
        logger: ILogger | None = None,
        default_length: int = DEFAULT_TOKEN_LENGTH,
    ) -> None:
        self._logger = logger or resolve_or_default(ILogger, NullLogger)
        self._default_length = require_length(default_length, "default_length")

    def generate(self, length: int | None = None) -> str:
        """
        Generate a security token.

        Args:
            length: Number of random bytes (defaults to the configured length, 32)

        Returns:
            The token as base64 text

        Raises:
            InvalidArgumentError: If length is not a positive integer
        """
        size = self._default_length if length is None else require_length(length)
        self._logger.debug("Generating token from %d random bytes", size)
        return base64.b64encode(secrets.token_bytes(size)).decode("ascii")
