"""Tests for size and time unit models."""
import pytest

from rateconv.models import SizeUnit, TimeUnit


@pytest.mark.parametrize("unit,bits", [
    (SizeUnit.BIT, 1),
    (SizeUnit.KILOBIT, 1000),
    (SizeUnit.MEGABIT, 1_000_000),
    (SizeUnit.GIGABIT, 1_000_000_000),
    (SizeUnit.TERABIT, 1_000_000_000_000),
    (SizeUnit.BYTE, 8),
    (SizeUnit.KILOBYTE, 8_000),
    (SizeUnit.MEGABYTE, 8_000_000),
    (SizeUnit.GIGABYTE, 8_000_000_000),
    (SizeUnit.TERABYTE, 8_000_000_000_000),
    (SizeUnit.KIBIBYTE, 8 * 1024),
    (SizeUnit.MEBIBYTE, 8 * 1024 * 1024),
    (SizeUnit.GIBIBYTE, 8 * 1024 ** 3),
    (SizeUnit.TEBIBYTE, 8 * 1024 ** 4),
])
def test_size_unit_bits(unit, bits):
    assert unit.bits == bits


@pytest.mark.parametrize("unit,milliseconds", [
    (TimeUnit.MILLISECOND, 1),
    (TimeUnit.SECOND, 1000),
    (TimeUnit.MINUTE, 60_000),
    (TimeUnit.HOUR, 3_600_000),
    (TimeUnit.DAY, 86_400_000),
])
def test_time_unit_milliseconds(unit, milliseconds):
    assert unit.milliseconds == milliseconds


def test_every_unit_constant_is_positive():
    assert all(unit.bits > 0 for unit in SizeUnit)
    assert all(unit.milliseconds > 0 for unit in TimeUnit)


def test_labels_are_unique():
    assert len({unit.label for unit in SizeUnit}) == len(SizeUnit)
    assert len({unit.label for unit in TimeUnit}) == len(TimeUnit)


def test_byte_and_binary_flags():
    assert SizeUnit.KILOBYTE.is_byte
    assert SizeUnit.KIBIBYTE.is_byte
    assert not SizeUnit.KILOBIT.is_byte
    assert SizeUnit.MEBIBYTE.is_binary
    assert not SizeUnit.MEGABYTE.is_binary
    assert not SizeUnit.MEGABIT.is_binary


def test_descriptions():
    assert SizeUnit.KILOBIT.description == "Kilobit"
    assert SizeUnit.TEBIBYTE.description == "Tebibyte"
    assert TimeUnit.HOUR.description == "Hour"
    assert str(SizeUnit.MEGABYTE) == "MB"
    assert str(TimeUnit.HOUR) == "hr"
