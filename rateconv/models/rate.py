"""Rate and unit specification value objects."""
import math
from dataclasses import dataclass

from rateconv.models.errors import MalformedRate
from rateconv.models.units import SizeUnit, TimeUnit


@dataclass(frozen=True)
class UnitSpec:
    """A size/time unit pair without a magnitude, e.g. ``mb/hr``."""
    size_unit: SizeUnit
    time_unit: TimeUnit

    @property
    def label(self) -> str:
        """Canonical short label."""
        return f"{self.size_unit.label}/{self.time_unit.label}"

    def describe(self, plural: bool = True) -> str:
        """Long-form name, e.g. ``Megabits per Hour``."""
        size_name = self.size_unit.description + ("s" if plural else "")
        return f"{size_name} per {self.time_unit.description}"

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class Rate:
    """A magnitude of size units per time unit.

    The magnitude is always a finite, non-negative number; anything else
    is rejected at construction with MalformedRate.
    """
    magnitude: float
    size_unit: SizeUnit
    time_unit: TimeUnit

    def __post_init__(self):
        if isinstance(self.magnitude, bool) or not isinstance(self.magnitude, (int, float)):
            raise MalformedRate(
                f"Rate magnitude must be a number, got {self.magnitude!r}",
                token=repr(self.magnitude),
            )
        if not math.isfinite(self.magnitude) or self.magnitude < 0:
            raise MalformedRate(
                f"Rate magnitude must be finite and non-negative, got {self.magnitude!r}",
                token=repr(self.magnitude),
            )

    @property
    def unit_spec(self) -> UnitSpec:
        return UnitSpec(self.size_unit, self.time_unit)

    @property
    def bits_per_millisecond(self) -> float:
        """Unit-independent form of this rate."""
        return self.magnitude * self.size_unit.bits / self.time_unit.milliseconds

    def __str__(self) -> str:
        return f"{self.magnitude:g} {self.unit_spec.label}"
