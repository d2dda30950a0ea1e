"""Relative-time formatting: '2d ago', '3 hours from now', 'yesterday'.

"Now" is read from an injectable clock on every call, so the same
time-point renders differently as wall-clock time moves on. Pass a fixed
clock to get repeatable output:

    >>> fixed = lambda: 1_700_000_000.0
    >>> HumanRelativeTime(1_700_000_000.0 - 120, clock=fixed).concise()
    '2m ago'
"""

import logging
import math
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, NamedTuple, Optional

from ..config import InvalidInputError
from .base import SENTINEL, HumanValue, OutputStyle, pluralize

logger = logging.getLogger(__name__)

Clock = Callable[[], float]

JUST_NOW_SECONDS = 10

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3_600
SECONDS_PER_DAY = 86_400
SECONDS_PER_WEEK = 604_800
# Calendar averages: 365.2425 days per year, a twelfth of that per month
SECONDS_PER_MONTH = 2_629_746
SECONDS_PER_YEAR = 31_556_952


class TimeBucket(NamedTuple):
    seconds: int
    upper_bound: Optional[int]
    suffix: str
    word: str


BUCKETS = (
    TimeBucket(1, SECONDS_PER_MINUTE, "s", "second"),
    TimeBucket(SECONDS_PER_MINUTE, SECONDS_PER_HOUR, "m", "minute"),
    TimeBucket(SECONDS_PER_HOUR, SECONDS_PER_DAY, "h", "hour"),
    TimeBucket(SECONDS_PER_DAY, SECONDS_PER_WEEK, "d", "day"),
    TimeBucket(SECONDS_PER_WEEK, SECONDS_PER_MONTH, "w", "week"),
    TimeBucket(SECONDS_PER_MONTH, SECONDS_PER_YEAR, "mo", "month"),
    TimeBucket(SECONDS_PER_YEAR, None, "y", "year"),
)


def system_clock() -> float:
    """Current POSIX timestamp in seconds."""
    return time.time()


def to_timestamp(time_point: datetime | float) -> float:
    """Convert a datetime or POSIX timestamp to seconds since the epoch.

    Naive datetimes are taken as local time, matching datetime.timestamp().
    """
    if isinstance(time_point, datetime):
        return time_point.timestamp()
    if isinstance(time_point, bool) or not isinstance(time_point, (int, float)):
        raise InvalidInputError(
            f"time_point must be a datetime or a POSIX timestamp, got {time_point!r}"
        )
    try:
        timestamp = float(time_point)
    except OverflowError as e:
        raise InvalidInputError("time_point is too large to be a timestamp") from e
    if not math.isfinite(timestamp):
        logger.debug("Rejected non-finite time_point %r", time_point)
        raise InvalidInputError(f"time_point must be finite, got {time_point!r}")
    return timestamp


def pick_bucket(seconds: int) -> TimeBucket:
    """Coarsest bucket whose upper bound is still above ``seconds``."""
    for bucket in BUCKETS:
        if bucket.upper_bound is None or seconds < bucket.upper_bound:
            return bucket
    return BUCKETS[-1]


@dataclass(frozen=True)
class HumanRelativeTime(HumanValue):
    """How long ago (or how far ahead) a time-point is, relative to now.

    Attributes:
        time_point: datetime, POSIX timestamp, or None for an unknown time
        clock: Zero-argument callable returning the current POSIX timestamp
    """
    time_point: Optional[datetime | float]
    clock: Clock = field(default=system_clock, compare=False, repr=False)

    def __post_init__(self):
        if self.time_point is not None:
            to_timestamp(self.time_point)

    def elapsed_seconds(self) -> Optional[int]:
        """Whole seconds from time_point to now; negative for the future."""
        if self.time_point is None:
            return None
        # int() truncates toward zero in both directions
        return int(self.clock() - to_timestamp(self.time_point))

    def _render(self, style: OutputStyle) -> str:
        elapsed = self.elapsed_seconds()
        if elapsed is None:
            logger.debug("No time-point given, rendering sentinel")
            return SENTINEL

        seconds = abs(elapsed)
        if seconds < JUST_NOW_SECONDS:
            return "just now"

        bucket = pick_bucket(seconds)
        count = seconds // bucket.seconds
        in_future = elapsed < 0
        direction = "from now" if in_future else "ago"

        if style is OutputStyle.CONCISE:
            return f"{count}{bucket.suffix} {direction}"

        if count == 1 and bucket.word == "day":
            return "tomorrow" if in_future else "yesterday"
        return f"{count} {pluralize(count, bucket.word)} {direction}"
