"""Convert a rate between size/time unit pairs."""
import math
from fractions import Fraction

from rateconv.core.logger import get_logger
from rateconv.models import MalformedRate, Rate, UnitSpec

logger = get_logger(__name__)


def scale_factor(source: UnitSpec, target: UnitSpec) -> Fraction:
    """Exact multiplier taking a magnitude in ``source`` units to ``target`` units.

    Equivalent to going through bits per millisecond:

        bits_per_ms = magnitude * source.bits / source.ms
        result      = bits_per_ms * target.ms / target.bits

    Unit constants are integers, so the ratio is kept exact and the float
    magnitude is only multiplied once.
    """
    return Fraction(
        source.size_unit.bits * target.time_unit.milliseconds,
        source.time_unit.milliseconds * target.size_unit.bits,
    )


def convert(rate: Rate, target: UnitSpec) -> Rate:
    """Express ``rate`` in the units of ``target``.

    No rounding happens here. Zero stays zero.

    Raises:
        MalformedRate: If the result overflows a float (magnitudes near 1e300)
    """
    factor = scale_factor(rate.unit_spec, target)
    magnitude = float(rate.magnitude) * factor

    logger.debug(
        f"{rate.magnitude} {rate.unit_spec.label} = {rate.bits_per_millisecond} bits/ms "
        f"= {magnitude} {target.label} (x {factor})"
    )

    if not math.isfinite(magnitude):
        raise MalformedRate(
            f"{rate.magnitude} {rate.unit_spec.label} is too large to express in {target.label}",
            token=str(rate.magnitude),
        )

    return Rate(magnitude, target.size_unit, target.time_unit)
