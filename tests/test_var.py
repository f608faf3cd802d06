import io

import pytest

from ztdb.common import ZTDB_RANGE, ZTDB_UNKNOWN
from ztdb.var import Var


def test_size_above_64_is_truncated():
    with pytest.warns(UserWarning):
        var = Var("wide", 100)
    assert var.size == 64


def test_size_zero_becomes_one():
    with pytest.warns(UserWarning):
        var = Var("empty", 0)
    assert var.size == 1
    assert var.max == 1


def test_max_for_byte():
    assert Var("b", 8).max == 255


def test_max_for_64_bits_is_all_ones():
    assert Var("w", 64).max == 0xFFFFFFFFFFFFFFFF


def test_value_out_of_range_is_marked():
    var = Var("b", 4)
    var.add(0, 16)
    var.add(1, ZTDB_UNKNOWN)
    var.add(2, 15)
    assert list(var) == [(0, ZTDB_RANGE), (1, ZTDB_UNKNOWN), (2, 15)]


def test_samples_ordered_by_time_with_stable_ties():
    var = Var("x", 8)
    var.add(30, 3)
    var.add(10, 1)
    var.add(20, 2)
    var.add(10, 7)
    assert list(var) == [(10, 1), (10, 7), (20, 2), (30, 3)]
    assert len(var) == 4


def test_first_on_empty_is_none():
    assert Var("x", 8).first() is None


def test_first_returns_earliest():
    var = Var("x", 8)
    var.add(9, 4)
    var.add(3, 5)
    assert var.first() == (3, 5)


def test_at_is_lower_bound():
    var = Var("x", 8)
    for time, value in [(10, 1), (20, 2), (20, 9), (30, 3)]:
        var.add(time, value)
    assert var.at(5) == (10, 1)
    assert var.at(20) == (20, 2)
    assert var.at(21) == (30, 3)
    assert var.at(31) is None


def test_time_precise_zero_is_identity():
    var = Var("x", 8)
    assert var.time_precise(12345, 0) == float(12345)


def test_time_precise_scales():
    var = Var("x", 8)
    assert var.time_precise(1500, 3) == 1.5
    assert var.time_precise(7, 12) * 1e12 == pytest.approx(7)


@pytest.mark.parametrize("precision", [-1, 13])
def test_time_precise_rejects_bad_precision(precision):
    with pytest.raises(ValueError):
        Var("x", 8).time_precise(1, precision)


@pytest.mark.parametrize(
    "size,digits",
    [(3, 1), (6, 2), (9, 3), (13, 4), (16, 5), (19, 6), (23, 7), (26, 8), (29, 9), (30, 10), (64, 10)],
)
def test_decimal_value_width(size, digits):
    assert Var("x", size).value_width(False) == digits


@pytest.mark.parametrize("size", [1, 4, 5, 8, 33, 64])
def test_hex_width_holds_max(size):
    var = Var("x", size)
    assert len(f"{var.max:x}") == var.value_width(True)


def test_value_string_decimal_padding():
    assert Var("x", 8).value_string(5, False) == "  5"


def test_value_string_hex():
    var = Var("x", 12)
    text = var.value_string(255, True)
    assert text.startswith("0x")
    assert int(text, 16) == 255
    assert len(text) == var.value_width(True) + 2


@pytest.mark.parametrize("hex_format", [True, False])
def test_value_string_special_values(hex_format):
    var = Var("x", 16)
    extra = 2 if hex_format else 0
    width = var.value_width(hex_format) + extra
    assert var.value_string(ZTDB_UNKNOWN, hex_format) == "U" * width
    assert var.value_string(ZTDB_RANGE, hex_format) == "R" * width


def test_dump_lists_every_sample():
    var = Var("sig", 8)
    var.add(1000, 7)
    var.add(2000, ZTDB_UNKNOWN)
    out = io.StringIO()
    var.dump("pre", 3, False, out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "pre # Time/Value pairs=2"
    assert len(lines) == 3
    assert lines[1].startswith("pre ")
    assert lines[1].endswith("-> " + var.value_string(7, False))
    assert lines[2].endswith("-> " + var.value_string(ZTDB_UNKNOWN, False))