"""Magnitude scaling shared by the count and size formatters."""

import logging
from dataclasses import dataclass
from decimal import Decimal

from ..utils.formatters import render_number, round_half_away

logger = logging.getLogger(__name__)

SCALED_PLACES = 1


@dataclass(frozen=True)
class Unit:
    """One rung of a unit table: abbreviated and spelled-out labels."""
    short: str
    long: str


@dataclass(frozen=True)
class UnitTable:
    """Ascending units where unit i has divisor ``step ** i``.

    Unit 0 is the base unit (divisor 1), e.g. bytes or a bare count.
    """
    step: int
    units: tuple[Unit, ...]

    def divisor(self, index: int) -> int:
        return self.step ** index


@dataclass(frozen=True)
class ScaledValue:
    """Result of scaling a magnitude into the largest fitting unit."""
    rounded: Decimal
    unit: Unit
    index: int

    @property
    def number(self) -> str:
        """Rounded value as text ('1', '1.4', '1024')."""
        return render_number(self.rounded)

    @property
    def is_singular(self) -> bool:
        """True when the long label should stay singular."""
        return self.rounded == 1


def scale(magnitude: int | float, table: UnitTable) -> ScaledValue:
    """Scale a non-negative magnitude into the largest unit it reaches.

    The unit index only advances while the magnitude is at least the next
    divisor and more units remain. The value is then divided once and
    rounded to one decimal place, half away from zero. A value that rounds
    up to the next divisor (1023.95 KiB) is not moved into the next unit.

    Args:
        magnitude: Non-negative number to scale
        table: Unit table to scale through

    Returns:
        ScaledValue with rounded value and selected unit
    """
    index = 0
    last = len(table.units) - 1
    while index < last and magnitude >= table.divisor(index + 1):
        index += 1

    # int / int true division is correctly rounded even past 2**53
    scaled = magnitude / table.divisor(index)
    rounded = round_half_away(scaled, SCALED_PLACES)

    logger.debug(
        "Scaled %r -> %s (unit %d: %r)", magnitude, rounded, index, table.units[index].short
    )
    return ScaledValue(rounded=rounded, unit=table.units[index], index=index)
