"""
Exceptions raised by the key storage and key generator collaborators.

KeyProvider catches these and degrades to "no key available", so they
only surface when the collaborators are used directly.
"""

from typing import Optional


class ApiKeyError(Exception):
    """Base class for API key acquisition errors."""


class KeyStorageError(ApiKeyError):
    """Reading or writing the local key file failed."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class KeyRequestError(ApiKeyError):
    """The key generator request did not produce a key."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        reason_phrase: Optional[str] = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.reason_phrase = reason_phrase


class ConfigurationError(ApiKeyError):
    """Configuration could not be loaded."""
