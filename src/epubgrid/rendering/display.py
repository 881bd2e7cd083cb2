# =============================================================================
# Grid Display
# =============================================================================
# Converts a GridDocument into Rich Text so that a terminal layer can show
# it with the cell styles intact. Consecutive cells with the same attribute
# are emitted as a single styled span.
# =============================================================================

from rich.style import Style
from rich.text import Text

from epubgrid.core import COLOR_MASK, Attribute
from epubgrid.rendering.document import GridDocument


# Palette index -> Rich color name
COLOR_NAMES: dict[int, str] = {
    Attribute.BLACK: "black",
    Attribute.RED: "red",
    Attribute.GREEN: "green",
    Attribute.YELLOW: "yellow",
    Attribute.BLUE: "blue",
    Attribute.MAGENTA: "magenta",
    Attribute.CYAN: "cyan",
    Attribute.WHITE: "white",
}


def attribute_style(fg: Attribute) -> Style:
    """Translate a foreground attribute into a Rich style."""
    return Style(
        color=COLOR_NAMES.get(fg & COLOR_MASK),
        bold=bool(fg & Attribute.BOLD) or None,
        underline=bool(fg & Attribute.UNDERLINE) or None,
        reverse=bool(fg & Attribute.REVERSE) or None,
    )


def to_rich_text(doc: GridDocument) -> Text:
    """
    Build styled text for the whole document, one line per grid row.

    Trailing unset cells on each row are dropped.
    """
    text = Text()
    for y in range(doc.height):
        row = [doc.cell(x, y) for x in range(doc.width)]
        while row and row[-1].is_empty:
            row.pop()

        run: list[str] = []
        run_fg = None
        for cell in row:
            if cell.fg != run_fg and run:
                text.append("".join(run), attribute_style(run_fg))
                run = []
            run.append(cell.ch or " ")
            run_fg = cell.fg
        if run:
            text.append("".join(run), attribute_style(run_fg))
        if y < doc.height - 1:
            text.append("\n")
    return text
