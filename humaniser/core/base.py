"""Output styles and the common formatter surface."""

import logging
import math
from enum import Enum
from numbers import Real

from ..config import InvalidInputError

logger = logging.getLogger(__name__)

SENTINEL = "-"


class OutputStyle(Enum):
    """Register a value is rendered in."""
    CONCISE = "concise"
    FULL = "full"

    @classmethod
    def coerce(cls, style: 'OutputStyle | str') -> 'OutputStyle':
        """Accept an OutputStyle or its string value ('concise' / 'full')."""
        if isinstance(style, cls):
            return style
        try:
            return cls(str(style).lower())
        except ValueError as e:
            raise InvalidInputError(f"Unknown output style: {style!r}") from e


class HumanValue:
    """Mixin giving every formatter the same rendering entry points.

    Subclasses implement ``_render(style)``; callers use ``concise()``,
    ``full()``, ``format(style)`` or ``str()`` (which is the full form).
    """

    def _render(self, style: OutputStyle) -> str:
        raise NotImplementedError

    def format(self, style: OutputStyle | str = OutputStyle.FULL) -> str:
        """Render in the given style."""
        return self._render(OutputStyle.coerce(style))

    def concise(self) -> str:
        """Abbreviated form, e.g. '1.5K' or '2d ago'."""
        return self._render(OutputStyle.CONCISE)

    def full(self) -> str:
        """Descriptive form, e.g. '1.5 thousand' or '2 days ago'."""
        return self._render(OutputStyle.FULL)

    def __str__(self) -> str:
        return self.full()


def check_magnitude(value, name: str):
    """Validate a raw magnitude: a finite, non-negative real number.

    Raises:
        InvalidInputError: If value is not a number, not finite, negative
            or too large to convert to a float
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        logger.debug("Rejected %s of type %s", name, type(value).__name__)
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    try:
        as_float = float(value)
    except OverflowError as e:
        logger.debug("Rejected %s too large for a float", name)
        raise InvalidInputError(f"{name} is too large to format") from e
    if not math.isfinite(as_float):
        logger.debug("Rejected non-finite %s: %r", name, value)
        raise InvalidInputError(f"{name} must be finite, got {value!r}")
    if value < 0:
        logger.debug("Rejected negative %s: %r", name, value)
        raise InvalidInputError(f"{name} must be >= 0, got {value!r}")
    return value


def pluralize(count, singular: str, plural: str = "") -> str:
    """Pick the English singular when count is exactly 1."""
    if count == 1:
        return singular
    return plural or f"{singular}s"
