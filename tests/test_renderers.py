"""
Tests for the tree and rectangle rendering styles.

Checks the exact output of small documents, the branch glyph rules and
the column alignment of the boxed rendering.
"""

import pytest

from fje.annotator import annotate
from fje.icons import JsonIconFamily, PokerFaceIconFamily
from fje.models import ErrorKind, JsonObject, JsonValue, UnknownStyleError
from fje.render import (
    STYLES,
    RectangleStyle,
    TreeStyle,
    create_style,
    display_width,
    terminal_width,
)
from fje.render.rectangle import iter_rows

from .helpers import NESTED, SAMPLE, make_tree


def poker(data: dict) -> JsonObject:
    return annotate(make_tree(data), PokerFaceIconFamily())


def fill(count: int) -> str:
    return "─" * count


class TestTreeStyle:
    """Test suite for the indented tree style."""

    def test_sample_document(self):
        """Test the rendering of a small mixed document."""
        expected = (
            "├─♤a: 1\n"
            "└─♢b\n"
            "   └─♤c\n"
        )
        assert TreeStyle().render(poker(SAMPLE)) == expected

    def test_nested_document(self):
        """Test continuation glyphs under last and non-last ancestors."""
        expected = (
            "├─♢oranges\n"
            "│  └─♢mandarin\n"
            "│     ├─♤clementine\n"
            "│     └─♤tangerine: cheap & juicy!\n"
            "└─♢apples\n"
            "   ├─♤gala\n"
            "   └─♤pink lady\n"
        )
        assert TreeStyle().render(poker(NESTED)) == expected

    def test_empty_root(self):
        """Test that an empty document renders as an empty string."""
        assert TreeStyle().render(JsonObject()) == ""

    def test_only_last_child_uses_last_connector(self):
        """Test that N children give N lines with a single closing connector."""
        root = make_tree({"one": "1", "two": "2", "three": "3", "four": None})

        lines = TreeStyle().render(root).splitlines()

        assert len(lines) == 4
        assert [line[:2] for line in lines] == ["├─", "├─", "├─", "└─"]

    def test_null_leaf_has_no_value_suffix(self):
        """Test that a null leaf shows its key alone and "" keeps the separator."""
        root = make_tree({"gone": None, "blank": ""})

        assert TreeStyle().render(root) == "├─gone\n└─blank: \n"

    def test_duplicate_keys_render_independently(self):
        """Test that repeated keys each get their own line."""
        root = JsonObject([("k", JsonValue("1")), ("k", JsonValue("2"))])

        assert TreeStyle().render(root) == "├─k: 1\n└─k: 2\n"


class TestRectangleStyle:
    """Test suite for the boxed style."""

    def test_sample_document(self):
        """Test the rendering of a small mixed document."""
        expected = (
            f"┌─♤a: 1{fill(10)}┐\n"
            f"├─♢b{fill(13)}┤\n"
            f"└─ └─♤c{fill(10)}┘\n"
        )
        assert RectangleStyle().render(poker(SAMPLE)) == expected

    def test_nested_document(self):
        """Test indentation and padding of a deeper document."""
        lines = RectangleStyle().render(poker(NESTED)).splitlines()

        assert lines == [
            f"┌─♢oranges{fill(34)}┐",
            f"│  ├─♢mandarin{fill(30)}┤",
            f"│  │  ├─♤clementine{fill(25)}┤",
            f"│  │  ├─♤tangerine: cheap & juicy!{fill(10)}┤",
            f"├─♢apples{fill(35)}┤",
            f"│  ├─♤gala{fill(34)}┤",
            f"└─ └─♤pink lady{fill(29)}┘",
        ]

    def test_right_edge_is_aligned(self):
        """Test that every row closes in the same column."""
        lines = RectangleStyle().render(poker(NESTED)).splitlines()

        closing_columns = {len(line) - 1 for line in lines}
        assert len(closing_columns) == 1
        assert lines[0][-1] == "┐"
        assert lines[-1][-1] == "┘"
        assert all(line[-1] == "┤" for line in lines[1:-1])

    def test_widest_row_gets_fixed_padding(self):
        """Test that the widest row is padded by exactly ten fill characters."""
        root = poker(NESTED)
        style = RectangleStyle()

        assert style.measure(root) == 34
        assert style.render(root).count(f"juicy!{fill(10)}┤") == 1

    def test_single_row(self):
        """Test that a lone row is both the top and the bottom of the box."""
        assert RectangleStyle().render(make_tree({"only": "x"})) == f"┌─only: x{fill(10)}┐\n"

    def test_empty_root(self):
        """Test that an empty document renders as an empty string."""
        style = RectangleStyle()

        assert style.measure(JsonObject()) == 0
        assert style.render(JsonObject()) == ""

    def test_null_leaf_has_no_value_suffix(self):
        """Test that a null leaf shows its key alone."""
        output = RectangleStyle().render(make_tree({"gone": None, "kept": "v"}))

        assert output.splitlines() == [
            f"┌─gone{fill(13)}┐",
            f"└─kept: v{fill(10)}┘",
        ]

    def test_bottom_edge_at_depth_two(self):
        """Test that every indent level of a deep last row turns into bottom edge."""
        lines = RectangleStyle().render(poker({"a": {"b": {"c": "x"}}})).splitlines()

        assert lines == [
            f"┌─♢a{fill(19)}┐",
            f"│  ├─♢b{fill(16)}┤",
            f"└─ └─ └─♤c: x{fill(10)}┘",
        ]

    def test_box_glyphs_in_keys_are_untouched(self):
        """Test that corners are placed by row position, not by searching the text."""
        root = annotate(make_tree({"x": "a", "├─y": "┤"}), JsonIconFamily("+", "-"))

        assert RectangleStyle().render(root).splitlines() == [
            f"┌─-x: a{fill(12)}┐",
            f"└─-├─y: ┤{fill(10)}┘",
        ]

    def test_rows_are_flagged_in_traversal_order(self):
        """Test the row metadata produced for both passes."""
        rows = list(iter_rows(poker(SAMPLE)))

        assert [(row.depth, row.label) for row in rows] == [(0, "♤a: 1"), (0, "♢b"), (1, "♤c")]
        assert [row.is_first for row in rows] == [True, False, False]
        assert [row.is_last for row in rows] == [False, False, True]

    def test_wide_glyphs_count_as_one_column_by_default(self):
        """Test the naive width rule: a wide character is one column."""
        root = make_tree({"名": "x", "ab": None})

        assert RectangleStyle().render(root).splitlines() == [
            f"┌─名: x{fill(10)}┐",
            f"└─ab{fill(12)}┘",
        ]

    def test_terminal_width_aligns_wide_glyphs(self):
        """Test that the opt-in terminal width counts wide characters as two columns."""
        root = make_tree({"名": "x", "ab": None})

        lines = RectangleStyle(width=terminal_width).render(root).splitlines()

        assert lines == [
            f"┌─名: x{fill(10)}┐",
            f"└─ab{fill(13)}┘",
        ]
        assert len({terminal_width(line) for line in lines}) == 1


class TestStyles:
    """Test suite for style selection and repeated rendering."""

    @pytest.mark.parametrize("name, style_class", [("tree", TreeStyle), ("rectangle", RectangleStyle)])
    def test_create_style(self, name, style_class):
        """Test that registered names build the matching style."""
        assert isinstance(create_style(name), style_class)
        assert STYLES[name] is style_class

    def test_unknown_style(self):
        """Test that an unregistered name raises UnknownStyleError."""
        with pytest.raises(UnknownStyleError) as exc_info:
            create_style("mindmap")

        assert exc_info.value.kind == ErrorKind.UNKNOWN_STYLE

    @pytest.mark.parametrize("style", [TreeStyle(), RectangleStyle()])
    def test_rendering_is_repeatable(self, style):
        """Test that rendering the same tree twice gives identical output."""
        root = poker(NESTED)

        assert style.render(root) == style.render(root)

    def test_display_width_counts_code_points(self):
        """Test the naive width helper against the terminal-aware one."""
        assert display_width("a名b") == 3
        assert terminal_width("a名b") == 4
