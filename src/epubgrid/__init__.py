# =============================================================================
# epubgrid: E-book Chapter Rendering for Character-Cell Terminals
# =============================================================================
#
# epubgrid renders chapter markup into a fixed-width character grid:
# styled, word-wrapped text, bordered tables, and images converted to
# ASCII art, ready for a terminal screen layer to page through.
#
# Features:
#   - Streaming, stack-based rendering of a markup token stream
#   - Word wrapping that never splits a word across rows
#   - Bold and color styles combined from all open tags
#   - Nested tables flattened into bordered text blocks
#   - PNG/JPEG images rendered as ASCII art
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "epubgrid"

from epubgrid.rendering import GridDocument, RenderResult, parse_text, render

__all__ = [
    "GridDocument",
    "RenderResult",
    "parse_text",
    "render",
    "__version__",
    "__app_name__",
]
