# =============================================================================
# Cell Model
# =============================================================================
# A single position in the character grid. The grid is consumed by a
# character-cell terminal layer, so attributes use terminal palette values:
# the low bits hold a color index, the high bits hold text attributes.
# =============================================================================

from dataclasses import dataclass
from enum import IntFlag


class Attribute(IntFlag):
    """
    Foreground/background styling attribute, stored as a bitmask.

    Colors are palette indexes (DEFAULT=0, BLACK=1 ... WHITE=8) sitting in
    the low bits; BOLD, UNDERLINE and REVERSE are independent flag bits.

    Usage:
        # Combine attributes
        fg = Attribute.BOLD | Attribute.YELLOW

        # Check a flag
        if fg & Attribute.BOLD:
            print("bold text")

        # Extract the color index
        color = fg & COLOR_MASK
    """
    DEFAULT = 0
    BLACK = 1
    RED = 2
    GREEN = 3
    YELLOW = 4
    BLUE = 5
    MAGENTA = 6
    CYAN = 7
    WHITE = 8
    BOLD = 1 << 9
    UNDERLINE = 1 << 10
    REVERSE = 1 << 11


# Everything below the first text-attribute bit is the color index
COLOR_MASK = (1 << 9) - 1


@dataclass(frozen=True)
class Cell:
    """
    One grid position.

    Attributes:
        ch: The character shown in this cell ("" if never written).
        fg: Foreground attribute (color index OR'd with BOLD etc.).
        bg: Background attribute. The renderer always leaves this DEFAULT.
    """
    ch: str = ""
    fg: Attribute = Attribute.DEFAULT
    bg: Attribute = Attribute.DEFAULT

    @property
    def is_empty(self) -> bool:
        """Returns True if nothing has been written to this cell."""
        return self.ch == ""


# Cells are immutable, so unwritten slots can share a single instance
EMPTY_CELL = Cell()
