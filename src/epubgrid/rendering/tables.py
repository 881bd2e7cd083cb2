# =============================================================================
# Table Building
# =============================================================================
# Tables arrive as a flat stream of table/row/cell tokens, but the column
# count and widths are only known once the whole table has been seen. So
# fragments are buffered on a stack while the markup is traversed, and the
# table is flattened into a bordered text block when it closes.
#
# Frames are plain nested lists addressed by index (table, row, cell).
# Nothing holds a reference into a frame, so popping or growing the outer
# structure can never leave a dangling cell behind.
#
# Formatting is delegated to Rich's Table renderer with ASCII box drawing.
# =============================================================================

import io
import logging

from rich import box
from rich.cells import cell_len
from rich.console import Console
from rich.table import Table
from rich.text import Text

logger = logging.getLogger(__name__)

Row = list[str]
TableFrame = list[Row]


class TableStack:
    """
    Stack of partially built tables.

    The focused cell is the last cell of the last row of the topmost
    table. It only exists once a table, a row and a cell have all been
    opened.

    Usage:
        >>> tables = TableStack()
        >>> tables.push_table()
        >>> tables.push_row()
        >>> tables.push_cell()
        >>> tables.append_to_focused("a")
        >>> tables.pop_table()
        [['a']]
    """

    def __init__(self) -> None:
        self._tables: list[TableFrame] = []

    def __len__(self) -> int:
        return len(self._tables)

    def push_table(self) -> None:
        """Open a new, empty table frame."""
        self._tables.append([])

    def push_row(self) -> bool:
        """
        Open a row in the topmost table.

        Returns:
            False if there is no open table (the row is dropped).
        """
        if not self._tables:
            return False
        self._tables[-1].append([])
        return True

    def push_cell(self) -> bool:
        """
        Open an empty cell in the topmost row of the topmost table.

        Returns:
            False if there is no open row (the cell is dropped).
        """
        if not self._tables or not self._tables[-1]:
            return False
        self._tables[-1][-1].append("")
        return True

    @property
    def focused_cell(self) -> tuple[int, int, int] | None:
        """Index triple (table, row, cell) of the focused cell, or None."""
        if not self._tables:
            return None
        table_i = len(self._tables) - 1
        rows = self._tables[table_i]
        if not rows:
            return None
        row_i = len(rows) - 1
        if not rows[row_i]:
            return None
        return table_i, row_i, len(rows[row_i]) - 1

    def append_to_focused(self, text: str) -> bool:
        """
        Append text to the focused cell.

        Returns:
            False if there is no focused cell.
        """
        focus = self.focused_cell
        if focus is None:
            return False
        table_i, row_i, cell_i = focus
        self._tables[table_i][row_i][cell_i] += text
        return True

    def pop_table(self) -> TableFrame | None:
        """Remove and return the topmost table, or None if none is open."""
        if not self._tables:
            return None
        return self._tables.pop()


# Space on either side of the text in every cell
CELL_PADDING = 2


def _column_widths(rows: TableFrame, columns: int, width: int) -> list[int]:
    """
    Pick a text width for each column.

    A column is never narrower than its longest word, so words are not
    broken. If even that does not fit, the block comes out wider than
    requested. Otherwise spare room goes to the columns holding longer
    text, and a table whose text fits unwrapped is left at its natural
    widths.
    """
    longest_word = [1] * columns
    longest_line = [1] * columns
    for row in rows:
        for i, cell in enumerate(row):
            for line in cell.splitlines():
                longest_line[i] = max(longest_line[i], cell_len(line))
                for word in line.split():
                    longest_word[i] = max(longest_word[i], cell_len(word))

    # Borders: one per column plus the closing edge
    available = width - (columns + 1) - CELL_PADDING * columns
    if sum(longest_line) <= available:
        return longest_line
    spare = available - sum(longest_word)
    if spare <= 0:
        return longest_word

    wants = [line - word for line, word in zip(longest_line, longest_word)]
    total_wants = sum(wants)
    return [word + spare * want // total_wants for word, want in zip(longest_word, wants)]


def format_table(rows: TableFrame, width: int) -> str:
    """
    Render rows of cell strings as a bordered text block.

    Every row, including the first, is a body row and a separator line is
    drawn between rows. Ragged rows are padded with empty cells. Cell text
    is taken literally (no markup or emoji codes) and is never truncated:
    long cells wrap between words inside their column.

    Args:
        rows: Cell strings, row-major.
        width: Preferred width of the block. A table whose words cannot
            fit comes out wider.

    Returns:
        The block, newline-terminated, or "" if there are no cells.
    """
    columns = max((len(row) for row in rows), default=0)
    if columns == 0:
        return ""

    widths = _column_widths(rows, columns, width)
    table = Table(
        box=box.ASCII,
        show_header=False,
        show_lines=True,
        show_edge=True,
    )
    for column_width in widths:
        table.add_column(width=column_width, overflow="fold")
    for row in rows:
        padded = row + [""] * (columns - len(row))
        table.add_row(*(Text(cell) for cell in padded))

    block_width = sum(widths) + CELL_PADDING * columns + columns + 1
    if block_width > width:
        logger.debug(f"Table of {columns} columns overflows the grid: {block_width} > {width}")

    output = io.StringIO()
    console = Console(
        file=output,
        width=max(width, block_width),
        color_system=None,
        force_terminal=False,
        markup=False,
        emoji=False,
        highlight=False,
    )
    console.print(table)
    return output.getvalue()
