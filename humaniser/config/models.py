"""Configuration models for the humaniser formatters."""

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "HUMANISER_CONFIG"
LOG_LEVEL_ENV_VAR = "HUMANISER_LOG_LEVEL"

UNIT_SYSTEMS = ("binary", "decimal")
OUTPUT_STYLES = ("concise", "full")


# --- CUSTOM EXCEPTIONS ---

class HumaniserError(Exception):
    """Base exception for humaniser errors."""


class InvalidInputError(HumaniserError, ValueError):
    """Raw value outside the domain a formatter accepts."""


class ConfigError(HumaniserError):
    """Configuration loading error."""


# --- CONFIGURATION DATACLASSES ---

@dataclass
class SizeConfig:
    """Defaults for byte-size formatting."""
    unit_system: str = "binary"

    def __post_init__(self):
        self.unit_system = str(self.unit_system).lower()
        if self.unit_system not in UNIT_SYSTEMS:
            raise ConfigError(
                f"Invalid unit_system '{self.unit_system}', "
                f"expected one of: {', '.join(UNIT_SYSTEMS)}"
            )


@dataclass
class PercentConfig:
    """Defaults for percent formatting."""
    decimals: int = 1

    def __post_init__(self):
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int):
            raise ConfigError(f"Percent decimals must be an integer, got {self.decimals!r}")
        if self.decimals < 0:
            raise ConfigError(f"Percent decimals must be >= 0, got {self.decimals}")


@dataclass
class OutputConfig:
    """Default output style used by Humaniser.render()."""
    style: str = "full"

    def __post_init__(self):
        self.style = str(self.style).lower()
        if self.style not in OUTPUT_STYLES:
            raise ConfigError(
                f"Invalid output style '{self.style}', "
                f"expected one of: {', '.join(OUTPUT_STYLES)}"
            )


@dataclass
class LoggingConfig:
    """Configuration for logging behavior."""
    level: str = "INFO"


# --- HELPER FUNCTIONS ---

def safe_load_dataclass(dclass_type, data: dict, section_name: str):
    """Safely load a dataclass from a dictionary.

    Ignores unknown keys and logs warnings for them.

    Args:
        dclass_type: Dataclass type to instantiate
        data: Dictionary with configuration data
        section_name: Name of config section (for logging)

    Returns:
        Instance of dclass_type with filtered data

    Raises:
        ConfigError: If the section is not a mapping
    """
    if data is None:
        return dclass_type()
    if not isinstance(data, dict):
        raise ConfigError(f"Section '{section_name}' must be a mapping.")

    valid_keys = {f.name for f in fields(dclass_type)}
    filtered_data = {}

    for k, v in data.items():
        if k in valid_keys:
            filtered_data[k] = v
        else:
            logger.warning(
                "Config warning: Unknown key '%s' in section '%s' ignored.",
                k, section_name
            )

    return dclass_type(**filtered_data)


def setup_logging(config_log_level: str = "INFO") -> None:
    """Configure a console handler for the humaniser loggers.

    Args:
        config_log_level: Level name such as 'DEBUG' or 'info'
    """
    log_level = logging.getLevelName(config_log_level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    console_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(funcName)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(console_formatter)

    package_logger = logging.getLogger("humaniser")
    package_logger.handlers = [console_handler]
    package_logger.setLevel(log_level)


@dataclass
class HumaniserConfig:
    """Main configuration container."""
    size: SizeConfig = field(default_factory=SizeConfig)
    percent: PercentConfig = field(default_factory=PercentConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Path | str) -> 'HumaniserConfig':
        """Load configuration from a YAML file.

        Args:
            config_path: Path to the YAML file

        Returns:
            HumaniserConfig instance with loaded configuration

        Raises:
            ConfigError: If file not found or YAML parsing fails
        """
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Configuration file '{path}' not found.")

        try:
            with path.open('r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing YAML: {e}") from e

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict) -> 'HumaniserConfig':
        """Build configuration from an already parsed mapping."""
        if not isinstance(data, dict):
            raise ConfigError("Configuration root must be a mapping.")

        for section in data:
            if section not in {f.name for f in fields(cls)}:
                logger.warning("Config warning: Unknown section '%s' ignored.", section)

        return cls(
            size=safe_load_dataclass(SizeConfig, data.get('size'), 'size'),
            percent=safe_load_dataclass(PercentConfig, data.get('percent'), 'percent'),
            output=safe_load_dataclass(OutputConfig, data.get('output'), 'output'),
            logging=safe_load_dataclass(LoggingConfig, data.get('logging'), 'logging'),
        )

    @classmethod
    def from_env(cls) -> 'HumaniserConfig':
        """Load configuration named by the environment (and a local .env file).

        Reads HUMANISER_CONFIG for the YAML path and HUMANISER_LOG_LEVEL
        for a logging level override. Falls back to defaults when no path
        is set.
        """
        load_dotenv()

        config_path = os.getenv(CONFIG_ENV_VAR)
        if config_path:
            config = cls.load(config_path)
        else:
            config = cls()

        log_level = os.getenv(LOG_LEVEL_ENV_VAR)
        if log_level:
            config.logging.level = log_level
        return config
