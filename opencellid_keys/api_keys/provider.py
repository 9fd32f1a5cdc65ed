"""
API key provider for the OpenCelliD data-collection library.

Resolves a key in two steps:
1. Key file written by an earlier request (cache hit)
2. Newly generated key from the server, written back to the key file

Every failure degrades to "no key available"; nothing is raised to the
caller.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from ..config.settings import Environment, KeyProviderConfig
from ..exceptions import ApiKeyError, KeyRequestError
from .backends import KeyFileBackend, KeyStorageBackend
from .client import KeyGeneratorClient

logger = logging.getLogger(__name__)


class KeySource(Enum):
    """Where a resolved key came from."""
    CACHE = "cache"
    SERVER = "server"


@dataclass
class ResolvedKey:
    """Result of key resolution."""
    key: str
    source: KeySource
    environment: Environment

    @property
    def masked(self) -> str:
        """Key prefix safe for log output."""
        return mask_key(self.key)


def mask_key(key: str) -> str:
    if len(key) <= 4:
        return "****"
    return f"{key[:4]}****"


class KeyProvider:
    """
    Looks up the stored API key, requesting a new one when none is stored.

    The environment chosen at construction is used by every operation
    unless a call passes its own.
    """

    def __init__(
        self,
        config: KeyProviderConfig,
        environment: Environment = Environment.PRODUCTION,
        backend: Optional[KeyStorageBackend] = None,
        client: Optional[KeyGeneratorClient] = None
    ):
        """
        Initialize key provider.

        Args:
            config: Server URLs, key file locations and timeouts
            environment: Default environment for all operations
            backend: Key storage backend (plain files by default)
            client: Key generator client (created from config by default)
        """
        self.config = config
        self.environment = environment
        self.backend = backend or KeyFileBackend()
        self._owns_client = client is None
        self.client = client or KeyGeneratorClient(timeout=config.request_timeout)

    def _env(self, environment: Optional[Environment]) -> Environment:
        return environment or self.environment

    def key_file(self, environment: Optional[Environment] = None) -> Path:
        return self.config.key_file_for(self._env(environment))

    def read_cached_key(self, environment: Optional[Environment] = None) -> Optional[str]:
        """
        Read the key stored for an environment.

        Returns:
            Stored key, or None if there is none or it cannot be read
        """
        path = self.key_file(environment)
        try:
            if not self.backend.key_exists(path):
                return None
            return self.backend.read_key(path)
        except ApiKeyError as e:
            logger.error(f"Error reading key from file: {e}")
            return None

    def fetch_remote_key(self, environment: Optional[Environment] = None) -> Optional[str]:
        """
        Request a new key from the server and store it.

        Returns:
            New key, or None if the request failed
        """
        env = self._env(environment)
        url = self.config.key_generator_url(env)

        try:
            key = self.client.request_key(url)
        except KeyRequestError as e:
            if e.status_code is not None:
                logger.warning(f"Key generator returned {e.status_code} {e.reason_phrase}")
            else:
                logger.error(f"Key generator request failed: {e}")
            return None

        logger.info(f"New API key set => {mask_key(key)}")
        self.write_cached_key(key, env)
        return key

    def write_cached_key(self, key: str, environment: Optional[Environment] = None) -> bool:
        """
        Overwrite the stored key for an environment.

        Failures are logged only. The return value is informational and
        get_api_key() does not depend on it.
        """
        path = self.key_file(environment)
        try:
            self.backend.write_key(path, key)
            return True
        except ApiKeyError as e:
            logger.error(f"Error writing key to file: {e}")
            return False

    def resolve_key(self, environment: Optional[Environment] = None) -> Optional[ResolvedKey]:
        """
        Get the stored key, or a new one from the server.

        Returns:
            ResolvedKey with key value and origin, or None if no key is available
        """
        env = self._env(environment)

        key = self.read_cached_key(env)
        if key is not None:
            logger.debug(f"Using stored API key for {env.value}")
            return ResolvedKey(key=key, source=KeySource.CACHE, environment=env)

        key = self.fetch_remote_key(env)
        if key is None:
            return None
        return ResolvedKey(key=key, source=KeySource.SERVER, environment=env)

    def get_api_key(self, environment: Optional[Environment] = None) -> Optional[str]:
        """Get the API key from file if it exists, or generate a new one."""
        resolved = self.resolve_key(environment)
        return resolved.key if resolved else None

    def close(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "KeyProvider":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
