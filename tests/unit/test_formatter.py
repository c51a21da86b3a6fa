"""Unit tests for formatters."""

import pytest

from errortree import ErrorTree, colored_formatter, simple_formatter, summary_line
from errortree.colors import CYAN, RED, RESET


@pytest.mark.unit
class TestSimpleFormatter:
    """Tests for simple_formatter."""

    def test_single_error(self):
        """One error uses the singular form."""
        assert simple_formatter({"key": ValueError("value")}) == (
            "1 error occurred:\n\n* key: value"
        )

    def test_sorted_by_key(self):
        """Errors are sorted by key, not by message."""
        errors = {"c": ValueError("b"), "a": ValueError("c"), "b": ValueError("a")}

        assert simple_formatter(errors) == "3 errors occurred:\n\n* a: c\n* b: a\n* c: b"

    def test_no_errors(self):
        """An empty mapping uses the plural form."""
        assert simple_formatter({}) == "0 errors occurred:\n\n"

    def test_nested_tree_message(self):
        """A tree's default message is produced by simple_formatter."""
        tree = ErrorTree(errors={"b": ErrorTree(errors={"c": ValueError("nested")})})

        assert str(tree) == "1 error occurred:\n\n* b:c: nested"


@pytest.mark.unit
class TestSummaryLine:
    """Tests for summary_line."""

    @pytest.mark.parametrize(
        ("count", "expected"),
        [
            (0, "0 errors occurred:"),
            (1, "1 error occurred:"),
            (2, "2 errors occurred:"),
        ],
    )
    def test_plural_suffix(self, count, expected):
        assert summary_line(count) == expected


@pytest.mark.unit
class TestColoredFormatter:
    """Tests for colored_formatter."""

    def test_layout(self):
        """Count and paths are highlighted, messages are not."""
        errors = {"b": ValueError("second"), "a": ValueError("first")}

        assert colored_formatter(errors) == (
            f"{RED}2 errors occurred:{RESET}\n\n"
            f"* {CYAN}a{RESET}: first\n"
            f"* {CYAN}b{RESET}: second"
        )

    def test_as_tree_formatter(self):
        """A tree can be configured to render in color."""
        tree = ErrorTree(formatter=colored_formatter, errors={"key": ValueError("value")})

        assert str(tree) == f"{RED}1 error occurred:{RESET}\n\n* {CYAN}key{RESET}: value"
