"""
API key storage backends.

The key is stored as raw text in a plain file so that other libraries on
the same device can pick it up.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from ..exceptions import KeyStorageError

logger = logging.getLogger(__name__)

KEY_ENCODING = "utf-8"


class KeyStorageBackend(ABC):
    """Abstract base class for API key storage backends."""

    @abstractmethod
    def key_exists(self, path: Path) -> bool:
        """
        Check if a key is stored at a location.

        Args:
            path: Key file location

        Returns:
            True if key exists
        """
        pass

    @abstractmethod
    def read_key(self, path: Path) -> str:
        """
        Read the full stored key.

        Args:
            path: Key file location

        Returns:
            Stored key, unmodified

        Raises:
            KeyStorageError: If the key cannot be read
        """
        pass

    @abstractmethod
    def write_key(self, path: Path, key_value: str) -> None:
        """
        Replace the stored key.

        Args:
            path: Key file location
            key_value: API key value

        Raises:
            KeyStorageError: If the key cannot be written
        """
        pass


class KeyFileBackend(KeyStorageBackend):
    """
    Plain file backend.

    Reads and writes are byte-faithful: nothing is trimmed on read and
    every write truncates the previous contents.
    """

    def key_exists(self, path: Path) -> bool:
        file_path = Path(path)
        try:
            return file_path.is_file()
        except (OSError, ValueError) as e:
            # is_file() only swallows "not found" style errors
            raise KeyStorageError(f"Error checking key file {file_path}: {e}", str(file_path)) from e

    def read_key(self, path: Path) -> str:
        file_path = Path(path)
        try:
            data = file_path.read_bytes()
            logger.debug(f"Read key from file: {file_path}")
            return data.decode(KEY_ENCODING)
        except (OSError, UnicodeDecodeError) as e:
            raise KeyStorageError(f"Error reading key from file {file_path}: {e}", str(file_path)) from e

    def write_key(self, path: Path, key_value: str) -> None:
        file_path = Path(path)
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, "wb") as f:
                f.write(key_value.encode(KEY_ENCODING))
                f.flush()
            logger.debug(f"Saved key to file: {file_path}")
        except (OSError, UnicodeEncodeError) as e:
            raise KeyStorageError(f"Error writing key to file {file_path}: {e}", str(file_path)) from e
