"""Data models for rateconv."""
from rateconv.models.errors import (
    AmbiguousInput,
    InvalidOption,
    MalformedRate,
    RateConvError,
    UnrecognizedUnit,
)
from rateconv.models.rate import Rate, UnitSpec
from rateconv.models.units import SizeUnit, TimeUnit

__all__ = [
    'SizeUnit',
    'TimeUnit',
    'Rate',
    'UnitSpec',
    'RateConvError',
    'UnrecognizedUnit',
    'MalformedRate',
    'AmbiguousInput',
    'InvalidOption',
]
