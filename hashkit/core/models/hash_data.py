"""
Result model for salted secure hashes.
"""

from __future__ import annotations

import base64

from pydantic import Field

from .base import ImmutableModel


class HashData(ImmutableModel):
    """A generated secure hash together with the salt that produced it.

    Store both; the salt is needed to verify the value later.
    """

    salt: bytes = Field(min_length=1)
    value: str = Field(min_length=1)

    @property
    def salt_b64(self) -> str:
        """Salt as standard base64 text, e.g. for storage in a text column."""
        return base64.b64encode(self.salt).decode("ascii")
