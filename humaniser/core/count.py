"""Large-count formatting: 1500 -> '1.5K' / '1.5 thousand'."""

from dataclasses import dataclass

from .base import HumanValue, OutputStyle, check_magnitude
from .scaler import Unit, UnitTable, scale

COUNT_UNITS = UnitTable(
    step=1000,
    units=(
        Unit("", ""),
        Unit("K", "thousand"),
        Unit("M", "million"),
        Unit("B", "billion"),
        Unit("T", "trillion"),
        Unit("Q", "quadrillion"),
        Unit("Qi", "quintillion"),
    ),
)


@dataclass(frozen=True)
class HumanCount(HumanValue):
    """A count rendered with thousand/million/billion scaling.

    Counts below 1000 render as the plain number. Scale words are
    invariant nouns, so '2 million' never becomes '2 millions'.

    Example:
        >>> HumanCount(1_200).concise()
        '1.2K'
        >>> HumanCount(1_200).full()
        '1.2 thousand'
    """
    count: int | float

    def __post_init__(self):
        check_magnitude(self.count, "count")

    def _render(self, style: OutputStyle) -> str:
        scaled = scale(self.count, COUNT_UNITS)
        if scaled.index == 0:
            return scaled.number
        if style is OutputStyle.CONCISE:
            return f"{scaled.number}{scaled.unit.short}"
        return f"{scaled.number} {scaled.unit.long}"
