"""Byte-size formatting in binary (IEC) or decimal (SI) units."""

from dataclasses import dataclass, replace
from enum import Enum

from ..config import InvalidInputError
from .base import HumanValue, OutputStyle, check_magnitude, pluralize
from .scaler import Unit, UnitTable, scale


class UnitSystem(Enum):
    """Base for byte scaling."""
    BINARY = "binary"    # IEC, 1024-based
    DECIMAL = "decimal"  # SI, 1000-based

    @classmethod
    def coerce(cls, system: 'UnitSystem | str') -> 'UnitSystem':
        if isinstance(system, cls):
            return system
        try:
            return cls(str(system).lower())
        except ValueError as e:
            raise InvalidInputError(f"Unknown unit system: {system!r}") from e


BINARY_UNITS = UnitTable(
    step=1024,
    units=(
        Unit("B", "byte"),
        Unit("KiB", "kibibyte"),
        Unit("MiB", "mebibyte"),
        Unit("GiB", "gibibyte"),
        Unit("TiB", "tebibyte"),
        Unit("PiB", "pebibyte"),
        Unit("EiB", "exbibyte"),
        Unit("ZiB", "zebibyte"),
        Unit("YiB", "yobibyte"),
    ),
)

DECIMAL_UNITS = UnitTable(
    step=1000,
    units=(
        Unit("B", "byte"),
        Unit("kB", "kilobyte"),
        Unit("MB", "megabyte"),
        Unit("GB", "gigabyte"),
        Unit("TB", "terabyte"),
        Unit("PB", "petabyte"),
        Unit("EB", "exabyte"),
        Unit("ZB", "zettabyte"),
        Unit("YB", "yottabyte"),
    ),
)

UNIT_TABLES = {
    UnitSystem.BINARY: BINARY_UNITS,
    UnitSystem.DECIMAL: DECIMAL_UNITS,
}


@dataclass(frozen=True)
class HumanSize(HumanValue):
    """A byte count rendered in the chosen unit system.

    Binary is the default. Switching systems returns a copy:

        >>> HumanSize(5_242_880).concise()
        '5 MiB'
        >>> HumanSize(5_000_000).as_decimal().full()
        '5 megabytes'
    """
    size: int | float
    unit_system: UnitSystem = UnitSystem.BINARY

    def __post_init__(self):
        check_magnitude(self.size, "size")
        object.__setattr__(self, 'unit_system', UnitSystem.coerce(self.unit_system))

    @classmethod
    def decimal(cls, size: int | float) -> 'HumanSize':
        """Build a size that renders in SI units."""
        return cls(size, UnitSystem.DECIMAL)

    def as_binary(self) -> 'HumanSize':
        return replace(self, unit_system=UnitSystem.BINARY)

    def as_decimal(self) -> 'HumanSize':
        return replace(self, unit_system=UnitSystem.DECIMAL)

    def _render(self, style: OutputStyle) -> str:
        scaled = scale(self.size, UNIT_TABLES[self.unit_system])
        if style is OutputStyle.CONCISE:
            return f"{scaled.number} {scaled.unit.short}"
        unit = pluralize(scaled.rounded, scaled.unit.long)
        return f"{scaled.number} {unit}"
