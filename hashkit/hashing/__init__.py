"""
Hash algorithm strategies and registry.
"""

from .registry import HashAlgorithmRegistry
from .strategies import (
    Blake3Strategy,
    FactoryStrategy,
    HashStrategy,
    MD5Strategy,
    SHA256Strategy,
    SHA384Strategy,
    SHA512Strategy,
    to_hex,
)

__all__ = [
    "Blake3Strategy",
    "FactoryStrategy",
    "HashAlgorithmRegistry",
    "HashStrategy",
    "MD5Strategy",
    "SHA256Strategy",
    "SHA384Strategy",
    "SHA512Strategy",
    "to_hex",
]
