"""Core formatters for humaniser."""

from .base import OutputStyle, HumanValue
from .scaler import Unit, UnitTable, ScaledValue, scale
from .count import HumanCount
from .size import HumanSize, UnitSystem
from .relative_time import HumanRelativeTime, system_clock
from .elapsed_time import HumanElapsedTime
from .percent import HumanPercent
from .humaniser import Humaniser

__all__ = [
    'OutputStyle',
    'HumanValue',
    'Unit',
    'UnitTable',
    'ScaledValue',
    'scale',
    'HumanCount',
    'HumanSize',
    'UnitSystem',
    'HumanRelativeTime',
    'system_clock',
    'HumanElapsedTime',
    'HumanPercent',
    'Humaniser',
]
