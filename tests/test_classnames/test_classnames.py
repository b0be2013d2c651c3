"""Tests for class string stringification and normalization."""

from decimal import Decimal
from enum import Enum
from fractions import Fraction

import pytest

from classvariance.classnames import combine_classes, is_class_value, to_class_string


class Size(Enum):
    SM = "sm"


# ---------------------------------------------------------------------------
# to_class_string
# ---------------------------------------------------------------------------


class TestToClassString:
    def test_none_is_empty(self):
        assert to_class_string(None) == ""

    def test_booleans_are_lowercase(self):
        assert to_class_string(True) == "true"
        assert to_class_string(False) == "false"

    def test_zero_is_kept(self):
        assert to_class_string(0) == "0"
        assert to_class_string(0.0) == "0"

    def test_numbers(self):
        assert to_class_string(12) == "12"
        assert to_class_string(1.5) == "1.5"

    def test_string_passthrough(self):
        assert to_class_string("text-sm px-2") == "text-sm px-2"

    def test_enum_uses_value(self):
        assert to_class_string(Size.SM) == "sm"

    def test_unsupported_type_raises(self):
        with pytest.raises(TypeError, match="dict"):
            to_class_string({"a": 1})

    def test_object_raises(self):
        with pytest.raises(TypeError):
            to_class_string(object())


# ---------------------------------------------------------------------------
# combine_classes
# ---------------------------------------------------------------------------


class TestCombineClasses:
    def test_joins_with_single_space(self):
        assert combine_classes(["a", "b c"]) == "a b c"

    def test_drops_none_and_empty(self):
        assert combine_classes([None, "", "a", None, "", "b"]) == "a b"

    def test_trims_each_fragment(self):
        assert combine_classes(["  a ", "\tb\n"]) == "a b"

    def test_collapses_internal_whitespace(self):
        assert combine_classes(["a   b", "c"]) == "a b c"

    def test_whitespace_only_fragment_dropped(self):
        assert combine_classes(["a", "   ", "b"]) == "a b"

    def test_empty_input(self):
        assert combine_classes([]) == ""

    def test_scalars_stringified(self):
        assert combine_classes(["a", 0, True]) == "a 0 true"

    @pytest.mark.parametrize(
        "fragments",
        [
            ["", None, " ", "a"],
            ["a ", " b", None],
            [None, None],
            ["  x  y  ", "", "z "],
        ],
    )
    def test_never_leading_trailing_or_double_spaces(self, fragments):
        result = combine_classes(fragments)
        assert result == result.strip()
        assert "  " not in result


class TestNumericTypes:
    def test_decimal(self):
        assert to_class_string(Decimal("1.5")) == "1.5"
        assert to_class_string(Decimal("0.00")) == "0"

    def test_fraction(self):
        assert to_class_string(Fraction(1, 2)) == "1/2"
        assert to_class_string(Fraction(0)) == "0"


class TestIsClassValue:
    @pytest.mark.parametrize("value", [None, "a", 0, 1.5, True, Decimal("2"), Size.SM])
    def test_accepted(self, value):
        assert is_class_value(value) is True

    @pytest.mark.parametrize("value", [["a"], {"a": 1}, object()])
    def test_rejected(self, value):
        assert is_class_value(value) is False
