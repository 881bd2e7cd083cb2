# =============================================================================
# Grid Document
# =============================================================================
# The layout engine. Owns a flat, row-major array of cells addressed by
# row * width + col, a cursor, and the current style.
#
# Two insertion modes:
#   - append_text: word-wrapped prose (words split on literal spaces only)
#   - append_raw:  verbatim blocks (ASCII art, tables, rules, line breaks)
#
# The array grows in fixed chunks, so a document has no row limit. Words
# longer than a row are not truncated: they start a fresh row and their
# runes continue past the nominal width into the following cells.
# Raw lines that overflow the same way keep the rows they spill into.
# =============================================================================

from collections.abc import Iterable

from epubgrid.config import DEFAULT_WIDTH
from epubgrid.core import EMPTY_CELL, Attribute, Cell
from epubgrid.rendering.styles import resolve_style


# Number of cells added to the backing array per grow step
CHUNK_SIZE = 1024


class GridDocument:
    """
    A fixed-width character grid that grows downward as content is added.

    Usage:
        >>> doc = GridDocument()
        >>> doc.style(["p", "b"])
        >>> doc.append_text("Hello world")
        >>> doc.line(0)
        'Hello world'

    Attributes:
        width: Target width in columns.
        left_margin: Column that wrapped and broken lines start at.
        col: Cursor column.
        row: Cursor row.
        fg: Foreground attribute for cells written next.
        bg: Background attribute for cells written next.
        cells: Backing array of cells, row-major.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, left_margin: int = 0) -> None:
        self.width = width
        self.left_margin = left_margin
        self.col = 0
        self.row = 0
        self.fg = Attribute.DEFAULT
        self.bg = Attribute.DEFAULT
        self.cells: list[Cell] = []

        # One past the highest index ever written
        self._extent = 0

    # -------------------------------------------------------------------------
    # Writing
    # -------------------------------------------------------------------------

    def set_cell(
        self,
        x: int,
        y: int,
        ch: str,
        fg: Attribute,
        bg: Attribute,
    ) -> None:
        """
        Write one cell, growing the backing array until (x, y) is addressable.
        """
        index = y * self.width + x
        while index >= len(self.cells):
            self.cells.extend([EMPTY_CELL] * CHUNK_SIZE)
        self.cells[index] = Cell(ch, fg, bg)
        self._extent = max(self._extent, index + 1)

    def style(self, tags: Iterable[str]) -> None:
        """Set the style for future cells from the full stack of open tags."""
        self.fg = resolve_style(tags)
        self.bg = Attribute.DEFAULT

    def append_text(self, text: str) -> None:
        """
        Append word-wrapped text at the cursor.

        Words are separated by literal spaces only. Tabs and other whitespace
        are part of a word; a newline inside a word breaks the row without
        emitting a glyph. A word that does not fit in the rest of the row
        moves to a fresh row first.
        """
        self._snap_to_margin()
        for word in text.split(" "):
            if not word:
                continue
            if len(word) > self.width - self.col:
                self._newline()
            for ch in word:
                if ch == "\n":
                    self._newline()
                    continue
                self.set_cell(self.col, self.row, ch, self.fg, self.bg)
                self.col += 1
            # Word separator
            if self.col != self.left_margin:
                self.col += 1

    def append_raw(self, text: str) -> None:
        """
        Append text verbatim, without wrapping.

        Only newlines are interpreted: each one moves the cursor to the
        margin of the next free row. A line longer than the grid runs on
        into the rows below, and those rows are skipped so the following
        line does not overwrite it.
        """
        self._snap_to_margin()
        last_col = -1
        for ch in text:
            if ch == "\n":
                self.row += max(last_col, 0) // self.width
                self._newline()
                last_col = -1
                continue
            self.set_cell(self.col, self.row, ch, self.fg, self.bg)
            last_col = self.col
            self.col += 1

    def _snap_to_margin(self) -> None:
        if self.col < self.left_margin:
            self.col = self.left_margin

    def _newline(self) -> None:
        self.row += 1
        self.col = self.left_margin

    # -------------------------------------------------------------------------
    # Reading
    # -------------------------------------------------------------------------

    @property
    def height(self) -> int:
        """Number of rows up to and including the last written cell."""
        return -(-self._extent // self.width)

    def cell(self, x: int, y: int) -> Cell:
        """Return the cell at (x, y), or an empty cell if never written."""
        index = y * self.width + x
        if 0 <= index < len(self.cells):
            return self.cells[index]
        return EMPTY_CELL

    def line(self, y: int) -> str:
        """Return row y as a string, unset cells as spaces, right-stripped."""
        start = y * self.width
        row = self.cells[start:start + self.width]
        return "".join(c.ch or " " for c in row).rstrip()

    def lines(self) -> list[str]:
        """Return every row of the document."""
        return [self.line(y) for y in range(self.height)]

    def to_text(self) -> str:
        """Return the document as plain text, one line per row."""
        return "\n".join(self.lines())
