"""
Configuration management for the LIONESS package.

Holds the application-level choices (cipher suite, log level, where the
master key file lives) while delegating key file handling to the kdf module.
Values come from constructor arguments first, then LIONESS_* environment
variables, then defaults.
"""

import logging
import os
from typing import Optional

from .crypto.errors import LionessError
from .crypto.kdf import load_master_key, save_master_key
from .crypto.suites import DEFAULT_SUITE, CipherSuite, get_suite
from .crypto.cipher import Lioness


logger = logging.getLogger(__name__)

ENV_CONFIG_DIR = "LIONESS_CONFIG_DIR"
ENV_SUITE = "LIONESS_SUITE"
ENV_LOG_LEVEL = "LIONESS_LOG_LEVEL"

KEY_FILE_NAME = "master_key.hex"
DEFAULT_LOG_LEVEL = "WARNING"


class ConfigError(LionessError):
    """Raised when configuration operations fail."""
    pass


class LionessConfig:
    """
    Configuration for command-line and application use of LIONESS.
    """

    def __init__(self, config_dir: Optional[str] = None, suite: Optional[str] = None,
                 log_level: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_dir: Directory for configuration files. Defaults to ~/.lioness/
            suite: Cipher suite name. Defaults to chacha20-blake2b
            log_level: Logging level name. Defaults to WARNING
        """
        if config_dir is None:
            config_dir = os.environ.get(ENV_CONFIG_DIR) or os.path.expanduser("~/.lioness")

        self.config_dir = config_dir
        self.key_file_path = os.path.join(config_dir, KEY_FILE_NAME)
        self.suite_name = (suite or os.environ.get(ENV_SUITE) or DEFAULT_SUITE).lower()
        self.log_level = (log_level or os.environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()

    @property
    def suite(self) -> CipherSuite:
        """
        The configured cipher suite.

        Raises:
            ConfigError: If the suite name is not registered
        """
        try:
            return get_suite(self.suite_name)
        except KeyError as e:
            raise ConfigError(str(e)) from e

    def configure_logging(self) -> None:
        """Apply the configured log level to the root logger."""
        level = logging.getLevelName(self.log_level)
        if not isinstance(level, int):
            raise ConfigError(f"Invalid log level: {self.log_level}")
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    def key_exists(self) -> bool:
        """Check if a master key file exists."""
        return os.path.exists(self.key_file_path)

    def get_master_key(self, key_file_path: Optional[str] = None) -> bytes:
        """
        Load the master key for the configured suite.

        Args:
            key_file_path: Explicit key file; defaults to the config directory key

        Returns:
            bytes: The 4 * H byte master key

        Raises:
            ConfigError: If the key cannot be loaded
        """
        path = key_file_path or self.key_file_path
        try:
            return load_master_key(path, self.suite.digest_size)
        except FileNotFoundError:
            raise ConfigError(f"Master key file not found: {path}")
        except ValueError as e:
            raise ConfigError(f"Invalid master key in {path}: {e}")

    def set_master_key(self, hex_key: str) -> None:
        """
        Store a master key given as hex (for setup/testing).

        Args:
            hex_key: Hex string of 8 * H characters

        Raises:
            ConfigError: If the key format is invalid or cannot be saved
        """
        expected = self.suite.key_size
        try:
            key = bytes.fromhex(hex_key.strip())
        except ValueError:
            raise ConfigError("Invalid hex characters in master key")

        if len(key) != expected:
            raise ConfigError(f"Master key must be {2 * expected} hex characters ({expected} bytes)")

        self._save(key)

    def create_new_master_key(self) -> bytes:
        """
        Generate and store a new master key for the configured suite.

        Returns:
            bytes: The generated key
        """
        key = self.suite.generate_key()
        self._save(key)
        return key

    def create_cipher(self, key_file_path: Optional[str] = None) -> Lioness:
        """Build a cipher from the configured suite and stored master key."""
        return self.suite.create(self.get_master_key(key_file_path))

    def _save(self, key: bytes) -> None:
        try:
            os.makedirs(self.config_dir, exist_ok=True)
            save_master_key(self.key_file_path, key)
        except OSError as e:
            raise ConfigError(f"Failed to save master key: {e}")
        logger.info("Master key saved to %s", self.key_file_path)
