# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Unit tests for string shaping helpers."""

import pytest

from agent_datamodel.utils.strings import (
    get_ordered_escaped_key_vals_string,
    indent_string,
    slice_int_is_non_empty,
    wrap_as_arm_variable,
    wrap_as_parameter,
    wrap_as_verbatim,
)

ALPHABETIZED = '"foo=bar", "yes=please"'


class TestGetOrderedEscapedKeyValsString:
    """Tests for get_ordered_escaped_key_vals_string."""

    @pytest.mark.parametrize(
        "config,expected",
        [
            ({}, ""),
            ({"foo": "bar", "yes": "please"}, ALPHABETIZED),
            ({"yes": "please", "foo": "bar"}, ALPHABETIZED),
        ],
        ids=["empty input", "valid input", "valid input re-ordered"],
    )
    def test_orders_keys(self, config: dict[str, str], expected: str) -> None:
        """Output is sorted by key regardless of insertion order."""
        assert get_ordered_escaped_key_vals_string(config) == expected

    def test_single_entry_has_no_separator(self) -> None:
        assert get_ordered_escaped_key_vals_string({"a": "1"}) == '"a=1"'

    def test_values_are_not_escaped(self) -> None:
        """Only the surrounding quotes are added; embedded characters pass through."""
        result = get_ordered_escaped_key_vals_string({"k": 'a "b", c'})
        assert result == '"k=a "b", c"'

    def test_uppercase_sorts_before_lowercase(self) -> None:
        """Sorting is plain lexicographic ordering."""
        result = get_ordered_escaped_key_vals_string({"b": "2", "B": "1", "a": "3"})
        assert result == '"B=1", "a=3", "b=2"'


class TestWrapAsVerbatim:
    """Tests for wrap_as_verbatim and the sibling ARM wrappers."""

    @pytest.mark.parametrize(
        "s,expected",
        [("foo", "',foo,'"), ("", "',,'")],
        ids=["just a string", "empty string"],
    )
    def test_wrap_as_verbatim(self, s: str, expected: str) -> None:
        assert wrap_as_verbatim(s) == expected

    def test_wrap_as_arm_variable(self) -> None:
        assert wrap_as_arm_variable("foo") == "',variables('foo'),'"

    def test_wrap_as_parameter(self) -> None:
        assert wrap_as_parameter("foo") == "',parameters('foo'),'"


class TestIndentString:
    """Tests for indent_string."""

    @pytest.mark.parametrize(
        "original,spaces,expected",
        [
            ("", 4, ""),
            ("foo", 4, "    foo\n"),
            ("foo\nbar", 4, "    foo\n    bar\n"),
        ],
        ids=[
            "should leave empty string alone",
            "should indent single line string 4 spaces",
            "should indent multi-line string 4 spaces",
        ],
    )
    def test_indent(self, original: str, spaces: int, expected: str) -> None:
        assert indent_string(original, spaces) == expected

    @pytest.mark.parametrize("spaces", [0, 1, 8])
    def test_empty_string_for_any_indent(self, spaces: int) -> None:
        assert indent_string("", spaces) == ""

    def test_trailing_newline_adds_no_blank_line(self) -> None:
        assert indent_string("foo\n", 2) == "  foo\n"

    def test_interior_blank_line_is_indented(self) -> None:
        assert indent_string("foo\n\nbar", 2) == "  foo\n  \n  bar\n"

    def test_windows_line_endings(self) -> None:
        assert indent_string("foo\r\nbar\r\n", 2) == "  foo\n  bar\n"

    def test_zero_spaces_only_adds_newline(self) -> None:
        assert indent_string("foo", 0) == "foo\n"


class TestSliceIntIsNonEmpty:
    """Tests for slice_int_is_non_empty."""

    @pytest.mark.parametrize(
        "values,expected",
        [([1, 2, 3], True), ([], False), (None, False)],
        ids=["valid slice", "empty slice", "nil slice"],
    )
    def test_non_empty(self, values: list[int] | None, expected: bool) -> None:
        assert slice_int_is_non_empty(values) is expected


class TestIndentStringCarriageReturns:
    """Only a single trailing carriage return is removed from each line."""

    def test_single_trailing_cr_removed(self) -> None:
        assert indent_string("foo\r", 2) == "  foo\n"

    def test_second_trailing_cr_kept(self) -> None:
        assert indent_string("foo\r\r", 2) == "  foo\r\n"

    def test_interior_cr_kept(self) -> None:
        assert indent_string("fo\ro\r\nbar", 2) == "  fo\ro\n  bar\n"
