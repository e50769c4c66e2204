"""Tests for merge_dependabot.utils.normalizers."""

import pytest

from merge_dependabot.utils.normalizers import parse_comma_or_semicolon_separated_value


class TestParseCommaOrSemicolonSeparatedValue:
    """Test splitting of list-valued inputs."""

    def test_semicolon_separated(self):
        """Test values separated by semicolons."""
        assert parse_comma_or_semicolon_separated_value("test1;test2;test3") == ["test1", "test2", "test3"]

    def test_semicolon_separated_with_whitespace(self):
        """Test surrounding whitespace is stripped."""
        assert parse_comma_or_semicolon_separated_value("  test1; test2; test3") == ["test1", "test2", "test3"]

    def test_comma_separated(self):
        """Test values separated by commas."""
        assert parse_comma_or_semicolon_separated_value("test1,test2,test3") == ["test1", "test2", "test3"]

    def test_comma_separated_with_whitespace(self):
        """Test surrounding whitespace is stripped."""
        assert parse_comma_or_semicolon_separated_value("  test1, test2, test3") == ["test1", "test2", "test3"]

    def test_whitespace_around_delimiters(self):
        """Test whitespace on both sides of a delimiter."""
        assert parse_comma_or_semicolon_separated_value("  a; b ; c") == ["a", "b", "c"]

    @pytest.mark.parametrize("value", ["", "   ", ",", " ; ; "])
    def test_no_tokens(self, value):
        """Test inputs without tokens yield an empty list."""
        assert parse_comma_or_semicolon_separated_value(value) == []

    def test_single_value(self):
        """Test a value without delimiters."""
        assert parse_comma_or_semicolon_separated_value(" react ") == ["react"]

    def test_order_and_duplicates_preserved(self):
        """Test tokens are neither reordered nor deduplicated."""
        assert parse_comma_or_semicolon_separated_value("vue,react,vue") == ["vue", "react", "vue"]

    def test_scoped_package_names(self):
        """Test package identifiers with scopes and slashes survive intact."""
        assert parse_comma_or_semicolon_separated_value("@types/node, github.com/pkg/errors") == [
            "@types/node",
            "github.com/pkg/errors",
        ]
