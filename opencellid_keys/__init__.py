"""
OpenCelliD API key provider.

Reads a previously issued API key from local storage, or requests a new
one from the OpenCelliD key generator and stores it.
"""

import logging
from typing import Optional

from .api_keys import (
    KeyProvider,
    ResolvedKey,
    KeySource,
    KeyStorageBackend,
    KeyFileBackend,
    KeyGeneratorClient,
)
from .config import (
    Environment,
    LogLevel,
    KeyProviderConfig,
    EnvironmentLoader,
    ConfigValidator,
)
from .exceptions import ApiKeyError, KeyStorageError, KeyRequestError, ConfigurationError
from .logging_config import configure_logging

__version__ = "2.0.0"

logger = logging.getLogger(__name__)


def get_api_key(test_mode: bool = False) -> Optional[str]:
    """
    Get the API key from file if it exists, or generate a new one.

    Configuration comes from the environment (see EnvironmentLoader).

    Args:
        test_mode: Use the test server and test key file

    Returns:
        API key, or None if no key could be obtained
    """
    try:
        config = EnvironmentLoader.load_config()
    except ConfigurationError as e:
        logger.error(f"Invalid key provider configuration: {e}")
        return None

    configure_logging(config.log_level)

    errors = ConfigValidator.validate_config(config)
    if errors:
        logger.error(f"Invalid key provider configuration: {'; '.join(errors)}")
        return None

    with KeyProvider(config, Environment.from_test_mode(test_mode)) as provider:
        return provider.get_api_key()


__all__ = [
    "get_api_key",
    "KeyProvider",
    "ResolvedKey",
    "KeySource",
    "KeyStorageBackend",
    "KeyFileBackend",
    "KeyGeneratorClient",
    "Environment",
    "LogLevel",
    "KeyProviderConfig",
    "EnvironmentLoader",
    "ConfigValidator",
    "ApiKeyError",
    "KeyStorageError",
    "KeyRequestError",
    "ConfigurationError",
    "configure_logging",
]
