"""Tests for converting a grid to Rich text."""

from rich.style import Style

from epubgrid.core import Attribute
from epubgrid.rendering import parse_text
from epubgrid.rendering.display import attribute_style, to_rich_text


class TestAttributeStyle:

    def test_default_is_plain(self):
        assert attribute_style(Attribute.DEFAULT) == Style()

    def test_bold_color(self):
        style = attribute_style(Attribute.BOLD | Attribute.YELLOW)
        assert style.bold
        assert style.color.name == "yellow"


class TestToRichText:

    def test_plain_text_matches_grid(self):
        doc = parse_text("<p>Hello <b>world</b></p><br/><h2>Next</h2>").document
        assert to_rich_text(doc).plain == doc.to_text()

    def test_styled_spans(self):
        doc = parse_text("<p>Hello <b>world</b></p>").document
        rich_text = to_rich_text(doc)
        bold = [
            rich_text.plain[span.start:span.end]
            for span in rich_text.spans
            if span.style.bold
        ]
        assert bold == ["world"]

    def test_empty_document(self):
        assert to_rich_text(parse_text("").document).plain == ""
