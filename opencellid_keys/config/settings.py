"""
Configuration settings for the OpenCelliD key provider.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

DEFAULT_SERVER_URL = "https://opencellid.org"
DEFAULT_KEY_GENERATOR_PATH = "/gsmCell/user/generateApiKey"
DEFAULT_KEY_FILE = "apikey.txt"
DEFAULT_TEST_KEY_FILE = "apikey_test.txt"
DEFAULT_REQUEST_TIMEOUT = 10.0


class Environment(Enum):
    """Which server and key file a provider works against."""
    PRODUCTION = "production"
    TEST = "test"

    @classmethod
    def from_test_mode(cls, test_mode: bool) -> "Environment":
        return cls.TEST if test_mode else cls.PRODUCTION


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class KeyProviderConfig:
    """Static values the key provider needs from its host application."""
    app_dir: Path
    server_url: str = DEFAULT_SERVER_URL
    test_server_url: str = DEFAULT_SERVER_URL
    key_generator_path: str = DEFAULT_KEY_GENERATOR_PATH
    key_file_name: str = DEFAULT_KEY_FILE
    test_key_file_name: str = DEFAULT_TEST_KEY_FILE
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    log_level: LogLevel = LogLevel.INFO

    def server_url_for(self, environment: Environment) -> str:
        """Base server URL for the given environment, without trailing slash."""
        if environment is Environment.TEST:
            url = self.test_server_url
        else:
            url = self.server_url
        return url.rstrip("/")

    def key_generator_url(self, environment: Environment) -> str:
        return self.server_url_for(environment) + self.key_generator_path

    def key_file_for(self, environment: Environment) -> Path:
        if environment is Environment.TEST:
            return Path(self.app_dir) / self.test_key_file_name
        return Path(self.app_dir) / self.key_file_name
