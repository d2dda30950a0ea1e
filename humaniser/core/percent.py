"""Percent formatting: (12.3456, 1) -> '12.3%' / '12.3 percent'."""

import logging
import math
from dataclasses import dataclass
from numbers import Real

from ..config import InvalidInputError
from ..utils.formatters import render_number, round_half_away
from .base import SENTINEL, HumanValue, OutputStyle

logger = logging.getLogger(__name__)

DEFAULT_DECIMALS = 1


@dataclass(frozen=True)
class HumanPercent(HumanValue):
    """A value already on the percent scale, rounded for display.

    Rounding is half away from zero on the decimal repr of the value, and
    trailing zeros are dropped: HumanPercent(12.0, 2) renders '12%'.
    NaN and infinities render as '-'.
    """
    value: float
    decimals: int = DEFAULT_DECIMALS

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, Real):
            raise InvalidInputError(f"percent value must be a number, got {self.value!r}")
        try:
            float(self.value)
        except OverflowError as e:
            raise InvalidInputError("percent value is too large to format") from e
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int):
            raise InvalidInputError(f"decimals must be an integer, got {self.decimals!r}")
        if self.decimals < 0:
            raise InvalidInputError(f"decimals must be >= 0, got {self.decimals}")

    def _render(self, style: OutputStyle) -> str:
        if not math.isfinite(self.value):
            logger.debug("Non-finite percent %r, rendering sentinel", self.value)
            return SENTINEL

        rounded = render_number(round_half_away(self.value, self.decimals))
        if style is OutputStyle.CONCISE:
            return f"{rounded}%"
        return f"{rounded} percent"
