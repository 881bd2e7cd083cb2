# =============================================================================
# epubgrid Core Module
# =============================================================================
# Core data models shared by the rendering engine and its consumers. These
# have no third-party dependencies and can be imported anywhere.
#
#   - Attribute: Foreground/background styling bitmask
#   - Cell: One character position in the grid
#   - Item: A resource (image) the markup refers to by href
# =============================================================================

from epubgrid.core.cell import COLOR_MASK, EMPTY_CELL, Attribute, Cell
from epubgrid.core.resource import Item, items_from_directory

__all__ = [
    "Attribute",
    "Cell",
    "COLOR_MASK",
    "EMPTY_CELL",
    "Item",
    "items_from_directory",
]
