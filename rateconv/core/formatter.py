"""Render converted rates for the terminal."""
from decimal import Decimal

from rateconv.models import Rate


def format_magnitude(value: float, decimal_places: int) -> str:
    """Fixed-point rendering, e.g. ``360.00``."""
    return f"{value:.{decimal_places}f}"


def format_quantity(value: float) -> str:
    """Render a user-supplied magnitude in plain decimal notation.

    Trailing zeros are dropped: ``100``, ``123.456``, ``0.0000001``.
    """
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_rate(rate: Rate, decimal_places: int) -> str:
    """Result line, e.g. ``360.00 mb/hr``."""
    return f"{format_magnitude(rate.magnitude, decimal_places)} {rate.unit_spec.label}"


def describe_conversion(source: Rate, result: Rate, decimal_places: int) -> str:
    """Verbose sentence naming both unit pairs in long form.

    Example:
        100 Kilobits per Second is equivalent to 360.00 Megabits per Hour
    """
    source_desc = source.unit_spec.describe(plural=source.magnitude != 1)
    result_desc = result.unit_spec.describe(plural=result.magnitude != 1)
    return (
        f"{format_quantity(source.magnitude)} {source_desc} is equivalent to "
        f"{format_magnitude(result.magnitude, decimal_places)} {result_desc}"
    )
