"""Turn counts, byte sizes, durations, times and percentages into readable text."""

from .config import (
    HumaniserConfig,
    HumaniserError,
    InvalidInputError,
    ConfigError,
    setup_logging,
)
from .core import (
    OutputStyle,
    HumanValue,
    HumanCount,
    HumanSize,
    UnitSystem,
    HumanRelativeTime,
    HumanElapsedTime,
    HumanPercent,
    Humaniser,
)
from .utils import group_digits

__version__ = "0.1.0"

__all__ = [
    'HumaniserConfig',
    'HumaniserError',
    'InvalidInputError',
    'ConfigError',
    'setup_logging',
    'OutputStyle',
    'HumanValue',
    'HumanCount',
    'HumanSize',
    'UnitSystem',
    'HumanRelativeTime',
    'HumanElapsedTime',
    'HumanPercent',
    'Humaniser',
    'group_digits',
    '__version__',
]
