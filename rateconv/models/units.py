"""Data size and time unit models."""
from enum import Enum


class SizeUnit(Enum):
    """Data size unit with its size in bits."""
    BIT = ("b", "Bit", 1)
    KILOBIT = ("kb", "Kilobit", 1000)
    MEGABIT = ("mb", "Megabit", 1000 ** 2)
    GIGABIT = ("gb", "Gigabit", 1000 ** 3)
    TERABIT = ("tb", "Terabit", 1000 ** 4)
    BYTE = ("B", "Byte", 8)
    KILOBYTE = ("kB", "Kilobyte", 8 * 1000)
    MEGABYTE = ("MB", "Megabyte", 8 * 1000 ** 2)
    GIGABYTE = ("GB", "Gigabyte", 8 * 1000 ** 3)
    TERABYTE = ("TB", "Terabyte", 8 * 1000 ** 4)
    KIBIBYTE = ("KiB", "Kibibyte", 8 * 1024)
    MEBIBYTE = ("MiB", "Mebibyte", 8 * 1024 ** 2)
    GIBIBYTE = ("GiB", "Gibibyte", 8 * 1024 ** 3)
    TEBIBYTE = ("TiB", "Tebibyte", 8 * 1024 ** 4)

    def __init__(self, label: str, description: str, bits: int):
        self.label = label
        self.description = description
        self.bits = bits

    @property
    def is_byte(self) -> bool:
        """True for byte-based units (multiples of 8 bits)."""
        return self.label.endswith("B")

    @property
    def is_binary(self) -> bool:
        """True for units scaled by powers of 1024."""
        return "i" in self.label

    def __str__(self) -> str:
        return self.label


class TimeUnit(Enum):
    """Time unit with its duration in milliseconds."""
    MILLISECOND = ("ms", "Millisecond", 1)
    SECOND = ("s", "Second", 1000)
    MINUTE = ("min", "Minute", 60 * 1000)
    HOUR = ("hr", "Hour", 60 * 60 * 1000)
    DAY = ("d", "Day", 24 * 60 * 60 * 1000)

    def __init__(self, label: str, description: str, milliseconds: int):
        self.label = label
        self.description = description
        self.milliseconds = milliseconds

    def __str__(self) -> str:
        return self.label
