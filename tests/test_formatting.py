"""Tests for cinex.codec.formatting module."""

from __future__ import annotations

import pytest

from cinex.codec.formatting import (
    format_float,
    format_floats,
    format_guid,
    format_int,
    format_ints,
    format_string,
    format_value,
)


class TestFormatFloat:
    def test_strips_trailing_zeros_to_two_digits(self) -> None:
        assert format_float(1.5) == "1.50"
        assert format_float(1.0) == "1.00"
        assert format_float(20.0) == "20.00"
        assert format_float(0.15) == "0.15"

    def test_keeps_significant_digits(self) -> None:
        assert format_float(1.256637) == "1.256637"
        assert format_float(0.125) == "0.125"

    def test_rounds_to_six_digits(self) -> None:
        assert format_float(3.14159265) == "3.141593"
        assert format_float(0.0000001) == "0.00"

    def test_negative_values(self) -> None:
        assert format_float(-0.5) == "-0.50"
        assert format_float(-12.75) == "-12.75"

    def test_negative_zero(self) -> None:
        assert format_float(-0.0) == "0.00"

    def test_width_pads_right(self) -> None:
        assert format_float(2.5, 8) == "2.50    "


class TestFormatInt:
    def test_truncates_toward_zero(self) -> None:
        assert format_int(3.9) == "3"
        assert format_int(-3.9) == "-3"

    def test_plain_integer(self) -> None:
        assert format_int(432) == "432"

    def test_width_pads_right(self) -> None:
        assert format_int(1, 4) == "1   "


class TestVectorsAndStrings:
    def test_float_triple(self) -> None:
        assert format_floats((0.0, 1.5, -2.0)) == "0.00 1.50 -2.00"

    def test_int_quad(self) -> None:
        assert format_ints((0, 0, 0, 255.7)) == "0 0 0 255"

    def test_string_is_quoted_without_escaping(self) -> None:
        assert format_string("Hello there, friend") == '"Hello there, friend"'
        assert format_string("") == '""'

    def test_guid_is_verbatim(self) -> None:
        assert format_guid("CA3DDD8F_11110000") == "CA3DDD8F_11110000"


class TestFormatValue:
    def test_dispatch_by_tag(self) -> None:
        assert format_value("x", "s") == '"x"'
        assert format_value("ID_1", "g") == "ID_1"
        assert format_value(7, "d") == "7"
        assert format_value(7, "f") == "7.00"
        assert format_value((1, 2, 3), "fff") == "1.00 2.00 3.00"
        assert format_value((1, 2, 3, 4, 5, 6), "ffffff") == "1.00 2.00 3.00 4.00 5.00 6.00"
        assert format_value((1, 2, 3, 4), "dddd") == "1 2 3 4"

    def test_unknown_tag_raises(self) -> None:
        with pytest.raises(ValueError):
            format_value(1, "q")
