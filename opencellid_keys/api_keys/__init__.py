"""
API key acquisition for the OpenCelliD data-collection library.
"""

from .provider import KeyProvider, ResolvedKey, KeySource
from .backends import KeyStorageBackend, KeyFileBackend
from .client import KeyGeneratorClient

__all__ = [
    "KeyProvider",
    "ResolvedKey",
    "KeySource",
    "KeyStorageBackend",
    "KeyFileBackend",
    "KeyGeneratorClient",
]
