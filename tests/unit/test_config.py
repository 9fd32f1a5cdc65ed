"""
Tests for configuration loading, validation and logging setup.
"""

import logging
from pathlib import Path

import pytest

import opencellid_keys
from opencellid_keys import (
    ConfigValidator,
    ConfigurationError,
    Environment,
    EnvironmentLoader,
    KeyProviderConfig,
    LogLevel,
    configure_logging,
)

ENV_VARS = [
    "OPENCELLID_APP_DIR",
    "OPENCELLID_SERVER_URL",
    "OPENCELLID_TEST_SERVER_URL",
    "OPENCELLID_KEY_GENERATOR_PATH",
    "OPENCELLID_KEY_FILE",
    "OPENCELLID_TEST_KEY_FILE",
    "OPENCELLID_REQUEST_TIMEOUT",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so monkeypatch removes anything a .env file adds later
    for name in ENV_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def no_dotenv(tmp_path):
    return str(tmp_path / "missing.env")


class TestKeyProviderConfig:
    """Tests for KeyProviderConfig."""

    def test_key_file_locations(self, tmp_path):
        config = KeyProviderConfig(app_dir=tmp_path)

        assert config.key_file_for(Environment.PRODUCTION) == tmp_path / "apikey.txt"
        assert config.key_file_for(Environment.TEST) == tmp_path / "apikey_test.txt"

    def test_generator_url_strips_trailing_slash(self, tmp_path):
        config = KeyProviderConfig(
            app_dir=tmp_path,
            server_url="https://cells.example.org/",
            test_server_url="https://test.example.org",
        )

        assert config.key_generator_url(Environment.PRODUCTION) == (
            "https://cells.example.org/gsmCell/user/generateApiKey"
        )
        assert config.key_generator_url(Environment.TEST) == (
            "https://test.example.org/gsmCell/user/generateApiKey"
        )

    def test_environment_from_test_mode(self):
        assert Environment.from_test_mode(True) is Environment.TEST
        assert Environment.from_test_mode(False) is Environment.PRODUCTION


class TestEnvironmentLoader:
    """Tests for EnvironmentLoader."""

    def test_defaults(self, clean_env, no_dotenv):
        config = EnvironmentLoader.load_config(no_dotenv)

        assert config.app_dir == Path("~/.opencellid").expanduser()
        assert config.server_url == "https://opencellid.org"
        assert config.test_server_url == config.server_url
        assert config.key_file_name == "apikey.txt"
        assert config.test_key_file_name == "apikey_test.txt"
        assert config.request_timeout == 10.0
        assert config.log_level == LogLevel.INFO

    def test_reads_environment(self, clean_env, no_dotenv, tmp_path):
        clean_env.setenv("OPENCELLID_APP_DIR", str(tmp_path))
        clean_env.setenv("OPENCELLID_SERVER_URL", "https://cells.example.org")
        clean_env.setenv("OPENCELLID_TEST_SERVER_URL", "https://test.example.org")
        clean_env.setenv("OPENCELLID_REQUEST_TIMEOUT", "2.5")
        clean_env.setenv("LOG_LEVEL", "debug")

        config = EnvironmentLoader.load_config(no_dotenv)

        assert config.app_dir == tmp_path
        assert config.server_url == "https://cells.example.org"
        assert config.test_server_url == "https://test.example.org"
        assert config.request_timeout == 2.5
        assert config.log_level == LogLevel.DEBUG

    def test_invalid_log_level_uses_default(self, clean_env, no_dotenv):
        clean_env.setenv("LOG_LEVEL", "chatty")
        assert EnvironmentLoader.load_config(no_dotenv).log_level == LogLevel.INFO

    def test_invalid_timeout_raises(self, clean_env, no_dotenv):
        clean_env.setenv("OPENCELLID_REQUEST_TIMEOUT", "soon")
        with pytest.raises(ConfigurationError):
            EnvironmentLoader.load_config(no_dotenv)

    def test_dotenv_file(self, clean_env, tmp_path):
        dotenv = tmp_path / ".env"
        dotenv.write_text("OPENCELLID_SERVER_URL=https://dotenv.example.org\n")

        config = EnvironmentLoader.load_config(str(dotenv))
        assert config.server_url == "https://dotenv.example.org"

    def test_dotenv_found_in_working_directory(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("OPENCELLID_SERVER_URL=https://cwd.example.org\n")
        clean_env.chdir(tmp_path)

        config = EnvironmentLoader.load_config()
        assert config.server_url == "https://cwd.example.org"

    def test_shell_env_wins_over_dotenv(self, clean_env, tmp_path):
        dotenv = tmp_path / ".env"
        dotenv.write_text("OPENCELLID_SERVER_URL=https://dotenv.example.org\n")
        clean_env.setenv("OPENCELLID_SERVER_URL", "https://shell.example.org")

        config = EnvironmentLoader.load_config(str(dotenv))
        assert config.server_url == "https://shell.example.org"


class TestConfigValidator:
    """Tests for ConfigValidator."""

    def test_valid_config(self, tmp_path):
        assert ConfigValidator.validate_config(KeyProviderConfig(app_dir=tmp_path)) == []

    def test_bad_urls(self, tmp_path):
        config = KeyProviderConfig(
            app_dir=tmp_path,
            server_url="ftp://cells.example.org",
            test_server_url="",
        )
        errors = ConfigValidator.validate_config(config)

        assert "server_url must use http or https" in errors
        assert "test_server_url is required" in errors

    def test_shared_key_file(self, tmp_path):
        config = KeyProviderConfig(
            app_dir=tmp_path,
            key_file_name="key.txt",
            test_key_file_name="key.txt",
        )
        assert "key_file_name and test_key_file_name must differ" in (
            ConfigValidator.validate_config(config)
        )

    def test_timeout_and_path(self, tmp_path):
        config = KeyProviderConfig(
            app_dir=tmp_path,
            key_generator_path="gsmCell/user/generateApiKey",
            request_timeout=0,
        )
        errors = ConfigValidator.validate_config(config)

        assert "key_generator_path must start with '/'" in errors
        assert "request_timeout must be positive" in errors


class TestModuleEntryPoint:
    """Tests for the module-level get_api_key."""

    @pytest.fixture
    def log_levels(self, clean_env, tmp_path):
        # No stray .env above the working directory, no real root logger changes
        clean_env.chdir(tmp_path)
        clean_env.setenv("OPENCELLID_APP_DIR", str(tmp_path))
        levels = []
        clean_env.setattr(opencellid_keys, "configure_logging", levels.append)
        return levels

    def test_reads_stored_key(self, log_levels, tmp_path):
        (tmp_path / "apikey.txt").write_text("ABC123")
        (tmp_path / "apikey_test.txt").write_text("TEST123")

        assert opencellid_keys.get_api_key() == "ABC123"
        assert opencellid_keys.get_api_key(test_mode=True) == "TEST123"

    def test_bad_configuration_returns_none(self, log_levels, clean_env):
        clean_env.setenv("OPENCELLID_REQUEST_TIMEOUT", "soon")

        assert opencellid_keys.get_api_key() is None

    def test_applies_configured_log_level(self, log_levels, clean_env, tmp_path):
        (tmp_path / "apikey.txt").write_text("ABC123")
        clean_env.setenv("LOG_LEVEL", "debug")

        opencellid_keys.get_api_key()
        assert log_levels == [LogLevel.DEBUG]

    def test_failed_validation_returns_none(self, log_levels, clean_env, tmp_path, caplog):
        (tmp_path / "apikey.txt").write_text("ABC123")
        clean_env.setenv("OPENCELLID_SERVER_URL", "ftp://cells.example.org")

        with caplog.at_level(logging.ERROR):
            assert opencellid_keys.get_api_key() is None
        assert "server_url must use http or https" in caplog.text


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_passes_level_and_format(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging("warning")

        assert calls[0]["level"] == logging.WARNING
        assert "%(name)s" in calls[0]["format"]

    def test_accepts_enum(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging(LogLevel.DEBUG)
        assert calls[0]["level"] == logging.DEBUG
