"""
Environment variable handling for the key provider configuration.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from ..exceptions import ConfigurationError
from .settings import (
    KeyProviderConfig, LogLevel,
    DEFAULT_SERVER_URL, DEFAULT_KEY_GENERATOR_PATH,
    DEFAULT_KEY_FILE, DEFAULT_TEST_KEY_FILE, DEFAULT_REQUEST_TIMEOUT,
)

DEFAULT_APP_DIR = "~/.opencellid"


class EnvironmentLoader:
    """Loads configuration from environment variables."""

    @staticmethod
    def load_config(dotenv_path: Optional[str] = None) -> KeyProviderConfig:
        """Load configuration from environment variables."""
        # Shell environment wins over .env; lookup starts at the working directory
        load_dotenv(dotenv_path or find_dotenv(usecwd=True), override=False)

        app_dir = Path(os.getenv('OPENCELLID_APP_DIR', DEFAULT_APP_DIR)).expanduser()

        server_url = os.getenv('OPENCELLID_SERVER_URL', DEFAULT_SERVER_URL)
        # Test mode hits the production server unless told otherwise
        test_server_url = os.getenv('OPENCELLID_TEST_SERVER_URL', server_url)

        log_level_str = os.getenv('LOG_LEVEL', 'INFO').upper()
        log_level = LogLevel.INFO  # default
        try:
            log_level = LogLevel(log_level_str)
        except ValueError:
            pass  # Use default

        return KeyProviderConfig(
            app_dir=app_dir,
            server_url=server_url,
            test_server_url=test_server_url,
            key_generator_path=os.getenv(
                'OPENCELLID_KEY_GENERATOR_PATH', DEFAULT_KEY_GENERATOR_PATH
            ),
            key_file_name=os.getenv('OPENCELLID_KEY_FILE', DEFAULT_KEY_FILE),
            test_key_file_name=os.getenv('OPENCELLID_TEST_KEY_FILE', DEFAULT_TEST_KEY_FILE),
            request_timeout=EnvironmentLoader._get_float(
                'OPENCELLID_REQUEST_TIMEOUT', DEFAULT_REQUEST_TIMEOUT
            ),
            log_level=log_level,
        )

    @staticmethod
    def _get_float(key: str, default: float) -> float:
        """Get a float environment variable or raise ConfigurationError."""
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        try:
            return float(value)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} is not a number: {value!r}")
