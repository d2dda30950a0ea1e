"""Configuration package for humaniser."""

from .models import (
    HumaniserConfig,
    SizeConfig,
    PercentConfig,
    OutputConfig,
    LoggingConfig,
    HumaniserError,
    InvalidInputError,
    ConfigError,
    safe_load_dataclass,
    setup_logging,
)

__all__ = [
    'HumaniserConfig',
    'SizeConfig',
    'PercentConfig',
    'OutputConfig',
    'LoggingConfig',
    'HumaniserError',
    'InvalidInputError',
    'ConfigError',
    'safe_load_dataclass',
    'setup_logging',
]
