"""
Interface definitions for hashkit's services.

These define the contracts that implementations must follow,
so callers depend on IHashing/ITokenGenerator rather than concrete classes.
"""

from .hashing import AlgorithmFactory, HashInput, IHashing
from .logger import ILogger
from .token import ITokenGenerator

__all__ = [
    "AlgorithmFactory",
    "HashInput",
    "IHashing",
    "ILogger",
    "ITokenGenerator",
]
