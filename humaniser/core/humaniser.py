"""Configured entry point that builds formatters from shared settings."""

import logging
from datetime import datetime, timedelta
from typing import Optional

from ..config import HumaniserConfig
from .base import HumanValue, OutputStyle
from .count import HumanCount
from .elapsed_time import HumanElapsedTime
from .percent import HumanPercent
from .relative_time import Clock, HumanRelativeTime, system_clock
from .size import HumanSize, UnitSystem

logger = logging.getLogger(__name__)


class Humaniser:
    """Builds formatters that share one configuration and one clock.

    The configuration supplies the default unit system for sizes, the
    default decimal places for percentages and the default output style
    for render(). The clock is handed to every relative-time formatter.

    Example:
        config = HumaniserConfig.load("humaniser.yaml")
        humaniser = Humaniser(config)

        humaniser.size(5_000_000).concise()      # '4.8 MiB' with binary defaults
        humaniser.render(humaniser.count(1_500)) # '1.5 thousand'
    """

    def __init__(self, config: Optional[HumaniserConfig] = None, clock: Optional[Clock] = None):
        """Initialize with configuration and an optional clock.

        Args:
            config: Formatter defaults (optional, defaults to HumaniserConfig())
            clock: Callable returning the current POSIX timestamp
                   (optional, defaults to the system clock)
        """
        self.config = config or HumaniserConfig()
        self.clock = clock or system_clock
        self.default_style = OutputStyle.coerce(self.config.output.style)
        self.default_unit_system = UnitSystem.coerce(self.config.size.unit_system)
        logger.debug(
            "Humaniser ready (style=%s, unit_system=%s, percent decimals=%d)",
            self.default_style.value,
            self.default_unit_system.value,
            self.config.percent.decimals,
        )

    def count(self, value: int | float) -> HumanCount:
        return HumanCount(value)

    def size(self, value: int | float, unit_system: UnitSystem | str | None = None) -> HumanSize:
        """Byte size in the given unit system, or the configured one."""
        system = self.default_unit_system if unit_system is None else unit_system
        return HumanSize(value, UnitSystem.coerce(system))

    def relative_time(self, time_point: Optional[datetime | float]) -> HumanRelativeTime:
        """Relative time bound to this humaniser's clock."""
        return HumanRelativeTime(time_point, clock=self.clock)

    def elapsed_time(self, seconds: int | float | timedelta) -> HumanElapsedTime:
        return HumanElapsedTime(seconds)

    def percent(self, value: float, decimals: Optional[int] = None) -> HumanPercent:
        """Percent with the given decimal places, or the configured ones."""
        if decimals is None:
            decimals = self.config.percent.decimals
        return HumanPercent(value, decimals)

    def render(self, value: HumanValue, style: OutputStyle | str | None = None) -> str:
        """Render any formatter in the given style, or the configured one."""
        return value.format(self.default_style if style is None else style)
