"""
Configuration validation for the key provider.
"""

from typing import List
from urllib.parse import urlparse

from .settings import KeyProviderConfig


class ConfigValidator:
    """Validates configuration settings."""

    @staticmethod
    def validate_config(config: KeyProviderConfig) -> List[str]:
        """Validate the entire provider configuration."""
        errors = []

        errors.extend(ConfigValidator._validate_server_url(config.server_url, "server_url"))
        errors.extend(ConfigValidator._validate_server_url(config.test_server_url, "test_server_url"))
        errors.extend(ConfigValidator._validate_key_files(config))

        if not config.key_generator_path.startswith("/"):
            errors.append("key_generator_path must start with '/'")

        if config.request_timeout <= 0:
            errors.append("request_timeout must be positive")

        return errors

    @staticmethod
    def _validate_server_url(url: str, field_name: str) -> List[str]:
        """Validate a server base URL."""
        errors = []

        if not url:
            errors.append(f"{field_name} is required")
            return errors

        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https"):
            errors.append(f"{field_name} must use http or https")
        if not parsed.netloc:
            errors.append(f"{field_name} has no host")
        if parsed.query:
            errors.append(f"{field_name} must not contain a query string")

        return errors

    @staticmethod
    def _validate_key_files(config: KeyProviderConfig) -> List[str]:
        """Validate the production and test key file names."""
        errors = []

        if not config.key_file_name:
            errors.append("key_file_name is required")
        if not config.test_key_file_name:
            errors.append("test_key_file_name is required")

        # Both environments sharing one file would mix keys
        if config.key_file_name and config.key_file_name == config.test_key_file_name:
            errors.append("key_file_name and test_key_file_name must differ")

        return errors
