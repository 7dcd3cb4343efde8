"""Tests for formatvar and value rendering."""

import sys

import pytest

pytestmark = pytest.mark.unit

from dbc import formatvar
from dbc.formatvar import format_pairs, render_value


class TestRenderValue:
    """Test textual rendering of reported values."""

    def test_int_uses_repr(self):
        """Integers render as their repr."""
        assert render_value(34) == "34"

    def test_string_is_double_quoted(self):
        """Strings render double-quoted."""
        assert render_value("My message") == '"My message"'

    def test_string_quotes_are_escaped(self):
        """Embedded double quotes and newlines are escaped."""
        assert render_value('say "hi"\n') == '"say \\"hi\\"\\n"'

    def test_non_ascii_kept(self):
        """Non-ASCII characters are not escaped."""
        assert render_value("café") == '"café"'

    def test_none_and_containers_use_repr(self):
        """None and containers render as their repr."""
        assert render_value(None) == "None"
        assert render_value({"k": [1, 2]}) == "{'k': [1, 2]}"


class TestFormatPairs:
    """Test joining of (name, value) pairs."""

    def test_pairs_joined_by_spaces(self):
        """Pairs are name=value separated by single spaces."""
        assert format_pairs([("msg", "hi"), ("a", 1)]) == 'msg="hi" a=1'

    def test_empty_pairs(self):
        """No pairs gives an empty string."""
        assert format_pairs([]) == ""


class TestFormatvar:
    """Test formatvar naming values by their call-site expression."""

    def test_single_int(self, sample_values):
        """formatvar(a) == 'a=34'."""
        a = sample_values["a"]
        out = formatvar(a)
        assert out == "a=34"

    def test_nested_record(self, sample_values):
        """Objects render through their repr."""
        b = sample_values["b"]
        out = formatvar(b)
        assert out == "b=BB(AA(234))"

    def test_string(self, sample_values):
        """Strings are double-quoted."""
        msg = sample_values["msg"]
        out = formatvar(msg)
        assert out == 'msg="My message"'

    def test_multiple_in_order(self, sample_values):
        """Several values are listed in the order supplied."""
        a = sample_values["a"]
        b = sample_values["b"]
        msg = sample_values["msg"]
        out = formatvar(msg, a, b)
        assert out == 'msg="My message" a=34 b=BB(AA(234))'

    def test_keywords_after_positionals(self):
        """Keyword values are named by keyword and listed last."""
        count = 2
        out = formatvar(count, total=5)
        assert out == "count=2 total=5"

    def test_attribute_expression(self, sample_values):
        """Attribute access is named by its source text."""
        b = sample_values["b"]
        out = formatvar(b.inner.value)
        assert out == "b.inner.value=234"

    def test_no_arguments(self):
        """formatvar() returns an empty string."""
        assert formatvar() == ""

    def test_call_nested_in_another_call(self, sample_values):
        """formatvar inside another call is still named by its own argument."""
        a = sample_values["a"]
        out = str(formatvar(a))
        assert out == "a=34"

    @pytest.mark.skipif(sys.version_info < (3, 11), reason="needs instruction positions")
    def test_two_calls_on_one_line(self):
        """Each of two calls on a line names its own argument."""
        a, b = 1, 2
        pair = (formatvar(a), formatvar(b))
        assert pair == ("a=1", "b=2")

    @pytest.mark.skipif(sys.version_info >= (3, 11), reason="exact call known from instruction positions")
    def test_two_calls_on_one_line_without_positions(self):
        """Ambiguous calls on one line fall back to positional names, never a wrong name."""
        a, b = 1, 2
        pair = (formatvar(a), formatvar(b))
        assert pair == ("arg0=1", "arg0=2")
