"""Fixed-duration formatting: 3661 seconds -> '1h 1m 1s'."""

from dataclasses import dataclass
from datetime import timedelta

from .base import HumanValue, OutputStyle, check_magnitude, pluralize


@dataclass(frozen=True)
class HumanElapsedTime(HumanValue):
    """A non-negative duration split into hours, minutes and seconds.

    Concise output keeps every component from the largest non-zero one
    down to seconds ('1h 0m 5s'); full output keeps only the non-zero
    components ('1 hour 5 seconds'). Hours are not folded into days.
    """
    seconds: int | float | timedelta

    def __post_init__(self):
        if isinstance(self.seconds, timedelta):
            check_magnitude(self.seconds.total_seconds(), "duration")
        else:
            check_magnitude(self.seconds, "duration")

    @property
    def total_seconds(self) -> int:
        if isinstance(self.seconds, timedelta):
            return int(self.seconds.total_seconds())
        return int(self.seconds)

    def components(self) -> tuple[int, int, int]:
        """(hours, minutes, seconds) of the whole-second duration."""
        hours, remainder = divmod(self.total_seconds, 3600)
        minutes, seconds = divmod(remainder, 60)
        return hours, minutes, seconds

    def _render(self, style: OutputStyle) -> str:
        hours, minutes, seconds = self.components()

        if style is OutputStyle.CONCISE:
            if hours > 0:
                return f"{hours}h {minutes}m {seconds}s"
            if minutes > 0:
                return f"{minutes}m {seconds}s"
            return f"{seconds}s"

        parts = []
        if hours > 0:
            parts.append(f"{hours} {pluralize(hours, 'hour')}")
        if minutes > 0:
            parts.append(f"{minutes} {pluralize(minutes, 'minute')}")
        if seconds > 0 or not parts:
            parts.append(f"{seconds} {pluralize(seconds, 'second')}")
        return " ".join(parts)
