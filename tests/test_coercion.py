"""Tests for text <-> scalar conversion."""

import math

import numpy as np
import pytest

from layerconf.coercion import FieldKind, decode, encode, kind_of, parse_bool
from layerconf.contracts import CoercionError

pytestmark = pytest.mark.unit


class TestDecodeText:

    def test_text_passes_through(self):
        assert decode("hello world", FieldKind.TEXT) == "hello world"

    def test_empty_text_is_valid(self):
        assert decode("", FieldKind.TEXT) == ""

    def test_kind_given_as_value_string(self):
        assert decode("7", "integer") == 7


class TestDecodeBoolean:

    @pytest.mark.parametrize("text", ["true", "TRUE", "True", "t", "T", "1", "tRuE"])
    def test_true_spellings(self, text):
        assert decode(text, FieldKind.BOOLEAN) is True

    @pytest.mark.parametrize("text", ["false", "FALSE", "False", "f", "F", "0"])
    def test_false_spellings(self, text):
        assert decode(text, FieldKind.BOOLEAN) is False

    @pytest.mark.parametrize("text", ["yes", "no", "on", "", "2", "truthy"])
    def test_invalid_boolean_raises(self, text):
        with pytest.raises(CoercionError) as exc_info:
            decode(text, FieldKind.BOOLEAN, "BoolVal")

        assert exc_info.value.field == "BoolVal"
        assert exc_info.value.raw_input == text
        assert exc_info.value.kind is FieldKind.BOOLEAN

    def test_parse_bool_raises_value_error(self):
        with pytest.raises(ValueError):
            parse_bool("maybe")


class TestDecodeInteger:

    @pytest.mark.parametrize("text,expected", [
        ("42", 42),
        ("-7", -7),
        ("+5", 5),
        ("0x1F", 31),
        ("-0x10", -16),
        ("0o17", 15),
        ("0b101", 5),
        ("1_000", 1000),
        ("017", 15),
        ("-010", -8),
        ("0_17", 15),
        ("00", 0),
        ("0", 0),
    ])
    def test_valid_integers(self, text, expected):
        assert decode(text, FieldKind.INTEGER) == expected

    def test_int64_bounds_accepted(self):
        assert decode("9223372036854775807", FieldKind.INTEGER) == 2 ** 63 - 1
        assert decode("-9223372036854775808", FieldKind.INTEGER) == -(2 ** 63)

    @pytest.mark.parametrize("text", ["9223372036854775808", "-9223372036854775809"])
    def test_overflow_raises(self, text):
        with pytest.raises(CoercionError):
            decode(text, FieldKind.INTEGER, "IntVal")

    @pytest.mark.parametrize("text", ["notanumber", "", "1.5", "12abc", "09", "0o8"])
    def test_non_numeric_raises(self, text):
        with pytest.raises(CoercionError):
            decode(text, FieldKind.INTEGER, "IntVal")

    def test_error_message_names_input_and_field(self):
        with pytest.raises(CoercionError) as exc_info:
            decode("notanumber", FieldKind.INTEGER, "IntVal")

        message = str(exc_info.value)
        assert "cannot use notanumber as integer" in message
        assert "IntVal" in message


class TestDecodeFloat:

    @pytest.mark.parametrize("text,expected", [
        ("0.1", 0.1),
        ("1e3", 1000.0),
        ("-2.5E-2", -0.025),
        ("7", 7.0),
    ])
    def test_valid_floats(self, text, expected):
        assert decode(text, FieldKind.FLOAT) == pytest.approx(expected)

    def test_infinity_spelled_out_is_accepted(self):
        assert math.isinf(decode("inf", FieldKind.FLOAT))

    def test_out_of_range_raises(self):
        with pytest.raises(CoercionError):
            decode("1e400", FieldKind.FLOAT, "FloatVal")

    @pytest.mark.parametrize("text", ["abc", "", "1.2.3"])
    def test_non_numeric_raises(self, text):
        with pytest.raises(CoercionError):
            decode(text, FieldKind.FLOAT, "FloatVal")


class TestEncode:

    def test_booleans_are_canonical(self):
        assert encode(True) == "true"
        assert encode(False) == "false"

    def test_integers(self):
        assert encode(42) == "42"
        assert encode(-7) == "-7"
        assert encode(np.int64(5)) == "5"

    def test_floats_use_positional_notation(self):
        assert encode(0.1) == "0.1"
        assert encode(1000.0) == "1000"
        assert encode(1e20) == "100000000000000000000"

    def test_text_unchanged(self):
        assert encode("abc") == "abc"

    @pytest.mark.parametrize("value", [None, [1, 2], {"a": 1}])
    def test_unsupported_values_yield_placeholder(self, value):
        text = encode(value)
        assert "unsupported type" in text
        assert type(value).__name__ in text

    @pytest.mark.parametrize("text,kind,normalized", [
        ("TRUE", FieldKind.BOOLEAN, "true"),
        ("t", FieldKind.BOOLEAN, "true"),
        ("0", FieldKind.BOOLEAN, "false"),
        ("0x1F", FieldKind.INTEGER, "31"),
        ("0042", FieldKind.INTEGER, "34"),
        ("1e3", FieldKind.FLOAT, "1000"),
        ("0.10", FieldKind.FLOAT, "0.1"),
        ("-2.50", FieldKind.FLOAT, "-2.5"),
        ("hello world", FieldKind.TEXT, "hello world"),
    ])
    def test_decode_then_encode_normalizes(self, text, kind, normalized):
        assert encode(decode(text, kind)) == normalized


class TestKinds:

    def test_kind_of_distinguishes_bool_from_int(self):
        assert kind_of(True) is FieldKind.BOOLEAN
        assert kind_of(1) is FieldKind.INTEGER
        assert kind_of(1.0) is FieldKind.FLOAT
        assert kind_of("1") is FieldKind.TEXT
        assert kind_of(None) is None

    def test_zero_values(self):
        assert FieldKind.TEXT.zero_value == ""
        assert FieldKind.INTEGER.zero_value == 0
        assert FieldKind.FLOAT.zero_value == 0.0
        assert FieldKind.BOOLEAN.zero_value is False
