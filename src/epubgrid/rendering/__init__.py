# =============================================================================
# Rendering Module
# =============================================================================
# The heart of epubgrid: rendering e-book chapter markup into a fixed-width
# character grid for display in a terminal.
#
# The rendering pipeline:
#   1. Tokenize the chapter markup (tokens.py)
#   2. Track open tags and partially built tables (engine.py, tables.py)
#   3. Resolve a style for every text run from the open tags (styles.py)
#   4. Word-wrap text and place raw blocks into the grid (document.py)
#   5. Convert embedded images into ASCII art (images.py)
# =============================================================================

from epubgrid.rendering.document import GridDocument
from epubgrid.rendering.engine import (
    MarkupError,
    Parser,
    RenderResult,
    parse_text,
    render,
)
from epubgrid.rendering.tokens import Token, TokenType, tokenize

__all__ = [
    "GridDocument",
    "MarkupError",
    "Parser",
    "RenderResult",
    "Token",
    "TokenType",
    "parse_text",
    "render",
    "tokenize",
]
