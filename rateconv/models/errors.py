"""Errors raised while parsing rates, unit specifications and settings."""
from typing import Optional, Sequence, Tuple


class RateConvError(Exception):
    """Base class for every user-facing rateconv failure.

    Attributes:
        token: The offending piece of input, quoted back to the user
        source: Which input the token came from (e.g. "input rate")
    """

    def __init__(self, message: str, token: Optional[str] = None,
                 source: Optional[str] = None):
        super().__init__(message)
        self.token = token
        self.source = source

    @property
    def kind(self) -> str:
        """Failure kind shown to the user."""
        return type(self).__name__


class UnrecognizedUnit(RateConvError):
    """Raised when a size or time token matches no known alias."""


class MalformedRate(RateConvError):
    """Raised when the magnitude is missing or invalid, or the unit grammar is violated."""


class AmbiguousInput(RateConvError):
    """Raised when a unit token splits into more than one valid size/time pair."""

    def __init__(self, message: str, token: Optional[str] = None,
                 source: Optional[str] = None,
                 candidates: Sequence[Tuple[object, object]] = ()):
        super().__init__(message, token=token, source=source)
        self.candidates = list(candidates)


class InvalidOption(RateConvError):
    """Raised when a setting such as decimal places has an invalid value."""
