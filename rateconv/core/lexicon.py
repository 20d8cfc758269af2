"""Alias tables mapping free-form unit spellings to canonical units.

Size tokens are normalized by lower-casing everything except a trailing
single-letter ``b``/``B``, whose case decides bits versus bytes:

    kb, Kb      -> kilobit
    kB, KB      -> kilobyte
    KBits       -> kilobit
    KBytes      -> kilobyte
    KiB, kib    -> kibibyte / unrecognized

Time tokens are matched case-insensitively.
"""
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Union

from rateconv.models.units import SizeUnit, TimeUnit

# prefix -> (bit unit, byte unit)
DECIMAL_PREFIXES = {
    "": (SizeUnit.BIT, SizeUnit.BYTE),
    "k": (SizeUnit.KILOBIT, SizeUnit.KILOBYTE),
    "m": (SizeUnit.MEGABIT, SizeUnit.MEGABYTE),
    "g": (SizeUnit.GIGABIT, SizeUnit.GIGABYTE),
    "t": (SizeUnit.TERABIT, SizeUnit.TERABYTE),
}

DECIMAL_NAMES = {
    "kilo": DECIMAL_PREFIXES["k"],
    "mega": DECIMAL_PREFIXES["m"],
    "giga": DECIMAL_PREFIXES["g"],
    "tera": DECIMAL_PREFIXES["t"],
}

BINARY_PREFIXES = {
    "ki": SizeUnit.KIBIBYTE,
    "mi": SizeUnit.MEBIBYTE,
    "gi": SizeUnit.GIBIBYTE,
    "ti": SizeUnit.TEBIBYTE,
}

BINARY_NAMES = {
    "kibi": SizeUnit.KIBIBYTE,
    "mebi": SizeUnit.MEBIBYTE,
    "gibi": SizeUnit.GIBIBYTE,
    "tebi": SizeUnit.TEBIBYTE,
}

BIT_SUFFIXES = ("b", "bit", "bits")
BYTE_SUFFIXES = ("B", "byte", "bytes")
WORD_SUFFIXES = {
    "bit": ("bit", "bits"),
    "byte": ("byte", "bytes"),
}

TIME_ALIASES = {
    TimeUnit.MILLISECOND: ("ms", "msec", "millisecond", "milliseconds"),
    TimeUnit.SECOND: ("s", "sec", "secs", "second", "seconds"),
    TimeUnit.MINUTE: ("m", "min", "mins", "minute", "minutes"),
    TimeUnit.HOUR: ("h", "hr", "hrs", "hour", "hours"),
    TimeUnit.DAY: ("d", "day", "days"),
}


def normalize_size_alias(token: str) -> str:
    """Lower-case a size token, keeping the case of a trailing ``b``/``B``."""
    if not token:
        return token
    lowered = token.lower()
    if token[-1] in "bB":
        return lowered[:-1] + token[-1]
    return lowered


def _build_size_aliases() -> Dict[str, SizeUnit]:
    aliases: Dict[str, SizeUnit] = {}

    for prefix, (bit_unit, byte_unit) in DECIMAL_PREFIXES.items():
        for suffix in BIT_SUFFIXES:
            aliases[prefix + suffix] = bit_unit
        for suffix in BYTE_SUFFIXES:
            aliases[prefix + suffix] = byte_unit

    for name, (bit_unit, byte_unit) in DECIMAL_NAMES.items():
        for suffix in WORD_SUFFIXES["bit"]:
            aliases[name + suffix] = bit_unit
        for suffix in WORD_SUFFIXES["byte"]:
            aliases[name + suffix] = byte_unit

    for prefix, unit in BINARY_PREFIXES.items():
        for suffix in BYTE_SUFFIXES:
            aliases[prefix + suffix] = unit

    for name, unit in BINARY_NAMES.items():
        for suffix in WORD_SUFFIXES["byte"]:
            aliases[name + suffix] = unit

    return aliases


def _build_time_aliases() -> Dict[str, TimeUnit]:
    return {
        alias: unit
        for unit, unit_aliases in TIME_ALIASES.items()
        for alias in unit_aliases
    }


SIZE_UNIT_ALIASES: Mapping[str, SizeUnit] = MappingProxyType(_build_size_aliases())
TIME_UNIT_ALIASES: Mapping[str, TimeUnit] = MappingProxyType(_build_time_aliases())

# Longest alias first, for prefix searches over run-together tokens
SIZE_ALIAS_LENGTHS = sorted({len(alias) for alias in SIZE_UNIT_ALIASES}, reverse=True)


def lookup_size_unit(token: str) -> Optional[SizeUnit]:
    """Return the size unit for ``token``, or None if it is not a known alias."""
    return SIZE_UNIT_ALIASES.get(normalize_size_alias(token.strip()))


def lookup_time_unit(token: str) -> Optional[TimeUnit]:
    """Return the time unit for ``token``, or None if it is not a known alias."""
    return TIME_UNIT_ALIASES.get(token.strip().lower())


def size_prefixes(token: str) -> List[str]:
    """Prefixes of ``token`` that are size aliases, longest first."""
    return [
        token[:length]
        for length in SIZE_ALIAS_LENGTHS
        if length < len(token) and lookup_size_unit(token[:length]) is not None
    ]


def aliases_for(unit: Union[SizeUnit, TimeUnit]) -> List[str]:
    """All accepted spellings of ``unit`` in their normalized form."""
    table = SIZE_UNIT_ALIASES if isinstance(unit, SizeUnit) else TIME_UNIT_ALIASES
    return [alias for alias, candidate in table.items() if candidate is unit]
