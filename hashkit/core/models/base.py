"""
Base Pydantic models for hashkit.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class HashkitBaseModel(BaseModel):
    """Base model for all hashkit Pydantic models.

    Configuration:
        - strict: Strict type coercion (no implicit conversions)
        - validate_assignment: Validate on attribute assignment
        - extra: Reject unknown fields
        - populate_by_name: Allow field aliases
    """

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
        populate_by_name=True,
    )


class ImmutableModel(HashkitBaseModel):
    """Immutable base model for results that should not change after creation."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        populate_by_name=True,
    )
