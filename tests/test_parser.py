"""Tests for the indented text parser."""

from __future__ import annotations

import pytest

from todotree.parser import measure_indent, parse_outline
from todotree.schemas import NodeKind


class TestParseOutline:
    """Tests for parse_outline function."""

    @pytest.mark.parametrize("text", ["", "   \n\n", "\n", "\t \r\n  \n"])
    def test_blank_input_yields_empty_forest(self, text: str) -> None:
        """Empty and whitespace-only input produce no nodes."""
        assert parse_outline(text) == []

    def test_categories_and_tasks(self, example_text: str) -> None:
        """Root lines are categories, indented lines are their tasks."""
        forest = parse_outline(example_text)

        assert [node.name for node in forest] == ["A", "B"]
        assert all(node.kind is NodeKind.CATEGORY for node in forest)
        assert [child.name for child in forest[0].children] == ["a1", "a2"]
        assert all(child.kind is NodeKind.TASK for child in forest[0].children)
        assert forest[1].children == ()

    def test_ids_follow_reading_order(self, example_text: str) -> None:
        """Ids are assigned depth-first, left to right."""
        forest = parse_outline(example_text)

        assert forest[0].id == "item-0"
        assert [child.id for child in forest[0].children] == ["item-1", "item-2"]
        assert forest[1].id == "item-3"

    def test_reparsing_is_deterministic(self, example_text: str) -> None:
        """Identical text parses to identical forests, ids included."""
        assert parse_outline(example_text) == parse_outline(example_text)

    def test_deep_nesting_is_task(self) -> None:
        """Grandchildren are tasks as well."""
        forest = parse_outline("Home\n    Kitchen\n        Paint\n")

        grandchild = forest[0].children[0].children[0]
        assert grandchild.name == "Paint"
        assert grandchild.kind is NodeKind.TASK

    def test_blank_lines_do_not_close_scopes(self) -> None:
        """Blank lines between children keep them under the same parent."""
        forest = parse_outline("A\n    a1\n\n   \n    a2\n")

        assert [child.name for child in forest[0].children] == ["a1", "a2"]

    def test_trailing_whitespace_and_carriage_returns_are_ignored(self) -> None:
        """Windows line endings and trailing spaces never reach the name."""
        forest = parse_outline("A  \r\n    a1\t\r\n")

        assert forest[0].name == "A"
        assert forest[0].children[0].name == "a1"

    def test_only_relative_indentation_matters(self) -> None:
        """The first line's column is the baseline for the root level."""
        forest = parse_outline("        A\n            a1\n        B\n")

        assert [node.name for node in forest] == ["A", "B"]
        assert forest[0].children[0].name == "a1"

    def test_indentation_width_is_not_fixed(self) -> None:
        """Two-space indentation nests just like four-space indentation."""
        forest = parse_outline("A\n  a1\n    deep\n  a2\n")

        assert [child.name for child in forest[0].children] == ["a1", "a2"]
        assert forest[0].children[0].children[0].name == "deep"

    def test_indented_line_before_any_root_becomes_category(self) -> None:
        """An orphan indented line attaches to the virtual root."""
        forest = parse_outline("    orphan\nA\n    a1\n")

        assert [node.name for node in forest] == ["orphan", "A"]
        assert forest[0].kind is NodeKind.CATEGORY

    def test_dedent_to_unseen_column_attaches_to_nearest_shallower_scope(self) -> None:
        """A dedent between two known levels lands under the shallower scope."""
        forest = parse_outline("A\n        deep\n    mid\n")

        assert [child.name for child in forest[0].children] == ["deep", "mid"]

    def test_tabs_expand_to_tab_size(self) -> None:
        """A tab and four spaces measure the same indentation."""
        forest = parse_outline("A\n\ta1\n    a2\n")

        assert [child.name for child in forest[0].children] == ["a1", "a2"]

    def test_names_are_verbatim(self) -> None:
        """Special characters are kept as-is, without any escaping."""
        forest = parse_outline("  - [x] Buy milk: 2% & eggs <now>  \n")

        assert forest[0].name == "- [x] Buy milk: 2% & eggs <now>"

    def test_sample_outline_shape(self) -> None:
        """The starter document parses to two projects with two tasks each."""
        from todotree.document import SAMPLE_OUTLINE

        forest = parse_outline(SAMPLE_OUTLINE)

        assert [node.name for node in forest] == ["Kitchen Renovation", "Backyard Landscaping"]
        assert all(len(node.children) == 2 for node in forest)
        assert forest[0].children[1].children[1].name == "Select color: thinking about light gray"


class TestMeasureIndent:
    """Tests for measure_indent function."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("A", 0),
            ("    A", 4),
            ("\tA", 4),
            ("  \tA", 4),
            ("\t\tA", 8),
        ],
    )
    def test_measures_leading_whitespace(self, line: str, expected: int) -> None:
        assert measure_indent(line) == expected

    def test_custom_tab_size(self) -> None:
        assert measure_indent("\tA", tab_size=2) == 2
