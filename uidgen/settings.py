"""Service settings for the uidgen HTTP service.

This module loads settings from environment variables and an optional TOML
file, with defaults for everything, and resolves the generator configuration
eagerly so that bad values fail at startup.
"""

import logging
import os
import sys
from types import ModuleType
from typing import Optional
from typing import TypedDict

from uidgen.alphabets import lookup_alphabet
from uidgen.config import GeneratorConfig, resolve_config
from uidgen.errors import UIDGenError

# Configure logging
logger = logging.getLogger(__name__)

# Handle tomllib/tomli for Python 3.11+ vs earlier versions
tomllib: ModuleType | None
if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None


class _SettingsValues(TypedDict):
    bit_size: int | None
    output_length: int | None
    alphabet: str | None
    listen_port: int
    max_batch_size: int


def _defaults() -> _SettingsValues:
    return {
        "bit_size": None,
        "output_length": None,
        "alphabet": None,
        "listen_port": 8080,
        "max_batch_size": 100,
    }


class SettingsError(Exception):
    """Raised when settings are invalid."""

    pass


class Settings:
    """Settings for the uidgen service.

    Settings are loaded with the following priority:
    1. Environment variables (highest priority)
    2. Configuration file (TOML format)
    3. Default values (lowest priority)

    Generator settings (at most one of bit_size / output_length):
    - bit_size: Entropy per identifier in bits (default: 128)
    - output_length: Exact identifier length, instead of bit_size
    - alphabet: Standard alphabet name ("base58") or literal symbols

    Server settings:
    - listen_port: Port for HTTP server (default: 8080)
    - max_batch_size: Most identifiers returned by one request (default: 100)
    """

    def __init__(
        self,
        bit_size: Optional[int] = None,
        output_length: Optional[int] = None,
        alphabet: Optional[str] = None,
        listen_port: int = 8080,
        max_batch_size: int = 100,
    ):
        """Initialize settings with validated values.

        Args:
            bit_size: Entropy per identifier in bits
            output_length: Exact identifier length
            alphabet: Alphabet name or literal symbols
            listen_port: Port for HTTP server
            max_batch_size: Most identifiers per request
        """
        self.bit_size = bit_size
        self.output_length = output_length
        self.alphabet = alphabet
        self.listen_port = listen_port
        self.max_batch_size = max_batch_size

    @classmethod
    def from_env_and_file(cls, config_file: Optional[str] = None) -> "Settings":
        """Load settings from environment variables and optional config file.

        Environment variables take precedence over config file values.

        Environment variables:
        - UIDGEN_BIT_SIZE: Entropy per identifier in bits
        - UIDGEN_OUTPUT_LENGTH: Exact identifier length
        - UIDGEN_ALPHABET: Alphabet name or literal symbols
        - LISTEN_PORT: HTTP server port (optional, default: 8080)
        - MAX_BATCH_SIZE: Most identifiers per request (optional, default: 100)

        Args:
            config_file: Path to TOML config file (optional)

        Returns:
            Settings instance with loaded values

        Raises:
            SettingsError: If settings are invalid
        """
        values = _defaults()

        # Load from config file if provided
        if config_file:
            values.update(cls._load_from_file(config_file))

        # Override with environment variables. bit_size and output_length
        # are one length setting: setting either replaces both file values.
        if "UIDGEN_BIT_SIZE" in os.environ or "UIDGEN_OUTPUT_LENGTH" in os.environ:
            values["bit_size"] = None
            values["output_length"] = None
        if "UIDGEN_BIT_SIZE" in os.environ:
            values["bit_size"] = cls._int_from_env("UIDGEN_BIT_SIZE")
        if "UIDGEN_OUTPUT_LENGTH" in os.environ:
            values["output_length"] = cls._int_from_env("UIDGEN_OUTPUT_LENGTH")
        if "UIDGEN_ALPHABET" in os.environ:
            values["alphabet"] = os.environ["UIDGEN_ALPHABET"]
        if "LISTEN_PORT" in os.environ:
            values["listen_port"] = cls._int_from_env("LISTEN_PORT")
        if "MAX_BATCH_SIZE" in os.environ:
            values["max_batch_size"] = cls._int_from_env("MAX_BATCH_SIZE")

        for key in ("listen_port", "max_batch_size"):
            if isinstance(values[key], bool) or not isinstance(values[key], int):
                logger.error(f"Invalid {key}: {values[key]!r}")
                raise SettingsError(f"Invalid {key}: must be an integer")

        # Validate listen port
        if not (1 <= values["listen_port"] <= 65535):
            logger.error(f"Invalid listen_port: {values['listen_port']}")
            raise SettingsError("Invalid listen_port: must be between 1 and 65535")

        if values["max_batch_size"] < 1:
            logger.error(f"Invalid max_batch_size: {values['max_batch_size']}")
            raise SettingsError("Invalid max_batch_size: must be at least 1")

        settings = cls(**values)

        # Fail at load time rather than on the first request
        generator_config = settings.generator_config()

        logger.info(
            f"Settings loaded: base={generator_config.base}, "
            f"bit_size={generator_config.bit_size}, "
            f"uid_length={generator_config.output_length}, "
            f"listen_port={settings.listen_port}"
        )

        return settings

    @staticmethod
    def _int_from_env(name: str) -> int:
        try:
            return int(os.environ[name])
        except ValueError:
            raise SettingsError(f"Invalid {name}: must be an integer")

    @staticmethod
    def _load_from_file(config_file: str) -> dict:
        """Load settings from TOML file.

        Args:
            config_file: Path to TOML config file

        Returns:
            Dictionary of the settings present in the file

        Raises:
            SettingsError: If file cannot be read or parsed
        """
        if tomllib is None:
            raise SettingsError(
                "TOML support not available. Install tomli for Python < 3.11"
            )

        try:
            with open(config_file, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError:
            raise SettingsError(f"Config file not found: {config_file}")
        except Exception as e:
            raise SettingsError(f"Failed to parse config file: {e}")

        # Keys in a [uidgen] table override top-level keys
        config = {key: data[key] for key in _defaults() if key in data}
        section = data.get("uidgen", {})
        config.update({key: section[key] for key in _defaults() if key in section})

        return config

    def generator_config(self) -> GeneratorConfig:
        """Resolve the generator configuration described by these settings.

        Raises:
            SettingsError: If the generator settings are invalid
        """
        alphabet = self.alphabet
        if isinstance(alphabet, str):
            alphabet = lookup_alphabet(alphabet)
        try:
            return resolve_config(
                bit_size=self.bit_size,
                alphabet=alphabet,
                output_length=self.output_length,
            )
        except UIDGenError as e:
            logger.error(f"Invalid generator settings: {e}")
            raise SettingsError(f"Invalid generator settings: {e}")

    def __repr__(self) -> str:
        """String representation of settings."""
        return (
            f"Settings(bit_size={self.bit_size!r}, "
            f"output_length={self.output_length!r}, "
            f"alphabet={self.alphabet!r}, "
            f"listen_port={self.listen_port}, "
            f"max_batch_size={self.max_batch_size})"
        )
