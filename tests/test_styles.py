"""Tests for tag-stack style resolution."""

import pytest

from epubgrid.core import COLOR_MASK, Attribute
from epubgrid.rendering.styles import resolve_style


class TestResolveStyle:

    def test_empty_stack_is_default(self):
        assert resolve_style([]) == Attribute.DEFAULT

    def test_unstyled_tags_contribute_nothing(self):
        assert resolve_style(["html", "body", "div", "span"]) == Attribute.DEFAULT

    @pytest.mark.parametrize("tag", ["b", "strong", "em"])
    def test_bold_tags(self, tag):
        assert resolve_style([tag]) == Attribute.BOLD

    @pytest.mark.parametrize(
        "tag, color",
        [
            ("i", Attribute.YELLOW),
            ("title", Attribute.RED),
            ("h1", Attribute.MAGENTA),
            ("h2", Attribute.BLUE),
            ("h3", Attribute.CYAN),
            ("h4", Attribute.CYAN),
            ("h5", Attribute.CYAN),
            ("h6", Attribute.CYAN),
        ],
    )
    def test_color_tags(self, tag, color):
        assert resolve_style([tag]) == color

    def test_bold_and_italic_set_both_bits(self):
        fg = resolve_style(["b", "i"])
        assert fg & Attribute.BOLD
        assert fg & COLOR_MASK == Attribute.YELLOW

    def test_nesting_order_does_not_matter(self):
        assert resolve_style(["i", "strong"]) == resolve_style(["strong", "i"])

    def test_repeated_tags_are_idempotent(self):
        assert resolve_style(["b", "b", "em"]) == Attribute.BOLD

    def test_heading_with_bold(self):
        assert resolve_style(["h2", "b"]) == Attribute.BLUE | Attribute.BOLD
