"""Number rounding and rendering shared by every formatter."""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext


def round_half_away(value: float, places: int) -> Decimal:
    """Round value to a fixed number of decimal places.

    Ties round away from zero (2.5 -> 3, -2.5 -> -3). The float is read
    through its shortest decimal repr, so 1.15 rounds to 1.2 instead of
    the 1.1 a binary multiply-and-round would give.

    Args:
        value: Finite number to round
        places: Number of digits to keep after the decimal point

    Returns:
        Rounded value as a Decimal
    """
    exact = Decimal(str(float(value)))
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        return exact.quantize(quantum, rounding=ROUND_HALF_UP)


def render_number(value: Decimal) -> str:
    """Render a rounded value without trailing zeros.

    Examples:
    - Decimal('1024.0') -> '1024'
    - Decimal('1.40') -> '1.4'
    - Decimal('-0.0') -> '0'

    Args:
        value: Rounded Decimal

    Returns:
        Plain positional string, never in exponent form
    """
    text = format(value, 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text == '-0':
        return '0'
    return text


def group_digits(number: int | float | Decimal) -> str:
    """Insert thousands separators into the integer part of a number.

    Converts numbers to a grouped format:
    - 1234567 -> '1,234,567'
    - 1234.5 -> '1,234.5'
    - -1234 -> '-1,234'

    Fractional digits are kept exactly as the number's repr shows them.
    Non-finite values render as '-'.

    Args:
        number: Number to format

    Returns:
        Formatted string representation
    """
    if isinstance(number, int):
        return f"{number:,}"

    if isinstance(number, float):
        if not math.isfinite(number):
            return "-"
        if number.is_integer():
            return f"{int(number):,}"
        text = format(Decimal(str(number)), 'f')
    else:
        if not number.is_finite():
            return "-"
        text = format(number, 'f')

    sign = ""
    if text.startswith('-'):
        sign, text = "-", text[1:]

    int_part, _, frac_part = text.partition('.')
    grouped = f"{int(int_part):,}"
    if frac_part:
        return f"{sign}{grouped}.{frac_part}"
    return f"{sign}{grouped}"
