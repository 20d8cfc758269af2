"""Parse rate strings ("100 kb/s") and unit specifications ("mb/hr").

Accepted unit expressions:

    kb/s, kb / s        size and time split by '/'
    kb per s, kb p s    size and time split by a separator word
    kbps, MBph, kbpers  run-together form, resolved by longest size prefix
"""
import math
import re
from typing import List, Optional, Tuple

from rateconv.core.lexicon import lookup_size_unit, lookup_time_unit, size_prefixes
from rateconv.core.logger import get_logger
from rateconv.models import (
    AmbiguousInput,
    MalformedRate,
    Rate,
    SizeUnit,
    TimeUnit,
    UnitSpec,
    UnrecognizedUnit,
)

logger = get_logger(__name__)

# Unsigned decimal: 123, 123., 123.456, .456
NUMBER_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")

# Longest first so "kbpers" is read as kb + per + s
SEPARATORS = ("per", "p")


def _located(message: str, source: Optional[str], text: Optional[str]) -> str:
    if source and text is not None:
        return f"{message} in {source} {text!r}"
    if source:
        return f"{message} in {source}"
    return message


def parse_size_unit(token: str, source: Optional[str] = None,
                    text: Optional[str] = None) -> SizeUnit:
    """Resolve a size token such as ``kB`` or ``megabits``.

    Raises:
        UnrecognizedUnit: If the token is not a known size alias
    """
    unit = lookup_size_unit(token)
    if unit is None:
        raise UnrecognizedUnit(
            _located(f"Unrecognized size unit {token!r}", source, text),
            token=token, source=source,
        )
    return unit


def parse_time_unit(token: str, source: Optional[str] = None,
                    text: Optional[str] = None) -> TimeUnit:
    """Resolve a time token such as ``s``, ``hr`` or ``minutes``.

    Raises:
        UnrecognizedUnit: If the token is not a known time alias
    """
    unit = lookup_time_unit(token)
    if unit is None:
        raise UnrecognizedUnit(
            _located(f"Unrecognized time unit {token!r}", source, text),
            token=token, source=source,
        )
    return unit


def _split_run_together(token: str, source: Optional[str],
                        text: Optional[str]) -> Tuple[SizeUnit, TimeUnit]:
    """Split a token like ``kbps`` into its size and time units."""
    prefixes = size_prefixes(token)
    candidates: List[Tuple[int, SizeUnit, TimeUnit]] = []
    unknown_time: Optional[str] = None

    for prefix in prefixes:
        remainder = token[len(prefix):]
        for separator in SEPARATORS:
            if len(remainder) <= len(separator) or not remainder.lower().startswith(separator):
                continue
            time_token = remainder[len(separator):]
            time_unit = lookup_time_unit(time_token)
            if time_unit is None:
                unknown_time = unknown_time or time_token
                continue
            candidates.append((len(prefix), lookup_size_unit(prefix), time_unit))

    if not candidates:
        if unknown_time is not None:
            raise UnrecognizedUnit(
                _located(f"Unrecognized time unit {unknown_time!r}", source, text),
                token=unknown_time, source=source,
            )
        if prefixes:
            raise MalformedRate(
                _located(
                    f"Missing '/', 'per' or 'p' between size and time units in {token!r}",
                    source, text,
                ),
                token=token, source=source,
            )
        raise UnrecognizedUnit(
            _located(f"Unrecognized unit {token!r}", source, text),
            token=token, source=source,
        )

    longest = max(length for length, _, _ in candidates)
    pairs = sorted(
        {(size, time) for length, size, time in candidates if length == longest},
        key=lambda pair: (pair[0].bits, pair[1].milliseconds),
    )
    if len(pairs) > 1:
        readings = ", ".join(f"{size.label}/{time.label}" for size, time in pairs)
        raise AmbiguousInput(
            _located(f"Unit {token!r} could mean any of: {readings}", source, text),
            token=token, source=source, candidates=pairs,
        )

    size_unit, time_unit = pairs[0]
    logger.debug(f"Split {token!r} as {size_unit.label}/{time_unit.label}")
    return size_unit, time_unit


def parse_unit_expression(expression: str, source: Optional[str] = None,
                          text: Optional[str] = None) -> Tuple[SizeUnit, TimeUnit]:
    """Parse the unit part of a rate into a (size unit, time unit) pair.

    Args:
        expression: Unit text such as ``kb/s``, ``kb per s`` or ``kbps``
        source: Which input is being parsed, for error messages
        text: The full user input, for error messages

    Raises:
        UnrecognizedUnit: A size or time token matches no alias
        MalformedRate: The separator grammar is violated
        AmbiguousInput: A run-together token has several readings
    """
    if text is None:
        text = expression
    stripped = expression.strip()

    if not stripped:
        raise MalformedRate(_located("Missing unit", source, text), token=expression, source=source)

    if "/" in stripped:
        parts = [part.strip() for part in stripped.split("/")]
        if len(parts) != 2:
            raise MalformedRate(
                _located(f"Expected a single '/' in {stripped!r}", source, text),
                token=stripped, source=source,
            )
        size_token, time_token = parts
        if not size_token or not time_token:
            raise MalformedRate(
                _located(f"Missing size or time unit around '/' in {stripped!r}", source, text),
                token=stripped, source=source,
            )
        for part in parts:
            if len(part.split()) > 1:
                raise MalformedRate(
                    _located(f"Unexpected text in unit {part!r}", source, text),
                    token=part, source=source,
                )
        return (
            parse_size_unit(size_token, source, text),
            parse_time_unit(time_token, source, text),
        )

    words = stripped.split()

    if len(words) == 3:
        size_token, separator, time_token = words
        if separator.lower() not in SEPARATORS:
            raise MalformedRate(
                _located(
                    f"Expected '/', 'per' or 'p' between size and time units, got {separator!r}",
                    source, text,
                ),
                token=separator, source=source,
            )
        return (
            parse_size_unit(size_token, source, text),
            parse_time_unit(time_token, source, text),
        )

    if len(words) == 1:
        token = words[0]
        if lookup_size_unit(token) is not None:
            raise MalformedRate(
                _located(f"Missing time unit after {token!r}", source, text),
                token=token, source=source,
            )
        return _split_run_together(token, source, text)

    raise MalformedRate(
        _located(f"Cannot read {stripped!r} as a size unit and a time unit", source, text),
        token=stripped, source=source,
    )


def parse_rate(text: str, source: str = "input rate") -> Rate:
    """Parse a rate such as ``100 kb/s``, ``1024MB/hr`` or ``.5 gbps``.

    Raises:
        MalformedRate: Missing, non-numeric or negative magnitude, or bad unit grammar
        UnrecognizedUnit: A size or time token matches no alias
        AmbiguousInput: A run-together unit has several readings
    """
    stripped = (text or "").strip()
    if not stripped:
        raise MalformedRate(f"Missing {source}", token=text, source=source)

    if stripped[0] in "+-":
        word = stripped.split()[0]
        reason = "Negative rates are not supported" if stripped[0] == "-" else "Signed magnitudes are not supported"
        raise MalformedRate(
            _located(f"{reason}: {word!r}", source, text),
            token=word, source=source,
        )

    match = NUMBER_PATTERN.match(stripped)
    if not match:
        word = stripped.split()[0]
        raise MalformedRate(
            _located(f"Missing or non-numeric magnitude {word!r}", source, text),
            token=word, source=source,
        )

    number = match.group(0)
    magnitude = float(number)
    if not math.isfinite(magnitude):
        raise MalformedRate(
            _located(f"Magnitude {number!r} is too large", source, text),
            token=number, source=source,
        )

    remainder = stripped[match.end():]
    if not remainder.strip():
        raise MalformedRate(
            _located(f"Missing unit after {number!r}", source, text),
            token=number, source=source,
        )

    size_unit, time_unit = parse_unit_expression(remainder, source, text)
    rate = Rate(magnitude, size_unit, time_unit)
    logger.debug(
        f"Parsed {source} {text!r} as {rate.magnitude} {rate.unit_spec.label} "
        f"({rate.bits_per_millisecond} bits/ms)"
    )
    return rate


def parse_unit_spec(text: str, source: str = "output rate",
                    default_time_unit: Optional[TimeUnit] = None) -> UnitSpec:
    """Parse a unit specification such as ``mb/hr`` or ``MBps``.

    Args:
        text: Unit specification without a magnitude
        source: Which input is being parsed, for error messages
        default_time_unit: Time unit used when ``text`` names only a size unit

    Raises:
        MalformedRate: A magnitude is present, or bad unit grammar
        UnrecognizedUnit: A size or time token matches no alias
        AmbiguousInput: A run-together unit has several readings
    """
    stripped = (text or "").strip()
    if not stripped:
        raise MalformedRate(f"Missing {source}", token=text, source=source)

    if stripped[0] in "+-" or NUMBER_PATTERN.match(stripped):
        word = stripped.split()[0]
        raise MalformedRate(
            _located(f"Unexpected magnitude {word!r}, expected units only", source, text),
            token=word, source=source,
        )

    if default_time_unit is not None:
        size_unit = lookup_size_unit(stripped)
        if size_unit is not None:
            logger.debug(f"{source} {text!r} has no time unit, using {default_time_unit.label}")
            return UnitSpec(size_unit, default_time_unit)

    size_unit, time_unit = parse_unit_expression(stripped, source, text)
    return UnitSpec(size_unit, time_unit)
