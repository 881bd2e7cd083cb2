# =============================================================================
# Rendering Engine
# =============================================================================
# Drives a markup token stream into a GridDocument.
#
# The engine is a flat, event-driven loop rather than a recursive walk.
# All structure lives in two stacks:
#   - the tag stack: names of currently open elements, used for styling
#   - the table stack: partially built tables (see tables.py)
#
# Each token either updates those stacks, writes styled or raw content to
# the document, or (inside a table) appends text to the focused cell.
#
# Error policy:
#   - End of stream finishes the render successfully
#   - Any other tokenizer error is fatal; the partial document is kept
#   - Image failures are never fatal (see images.py)
#   - Orphaned structure (a cell with no row, an end tag with nothing open)
#     is ignored token by token
# =============================================================================

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import IO

from epubgrid.config import RenderingConfig
from epubgrid.core import Item
from epubgrid.rendering.document import GridDocument
from epubgrid.rendering.images import GlyphRenderer
from epubgrid.rendering.tables import TableStack, format_table
from epubgrid.rendering.tokens import Token, TokenType, tokenize

logger = logging.getLogger(__name__)


# Text directly inside these elements is never displayed
HIDDEN_TEXT_TAGS = frozenset({"style", "script"})

TABLE_CELL_TAGS = frozenset({"td", "th"})


class MarkupError(Exception):
    """Raised when the token source reports an error other than end of stream."""
    pass


@dataclass
class RenderResult:
    """
    Result of rendering a chapter.

    Attributes:
        document: The rendered grid. Partial if rendering failed.
        error: The fatal error, or None on success.
    """
    document: GridDocument
    error: Exception | None = None

    @property
    def success(self) -> bool:
        """Returns True if rendering succeeded."""
        return self.error is None


class Parser:
    """
    Renders one token stream into one GridDocument.

    A Parser owns its document and stacks for the duration of a single
    parse() call and is not meant to be reused.

    Usage:
        >>> parser = Parser(tokenize(markup), items)
        >>> parser.parse()
        >>> print(parser.doc.to_text())

    Attributes:
        doc: The document being built.
        tag_stack: Names of currently open elements, outermost first.
        tables: Tables under construction.
        items: Resources that image sources are resolved against.
    """

    def __init__(
        self,
        tokens: Iterable[Token],
        items: Iterable[Item] = (),
        config: RenderingConfig | None = None,
    ) -> None:
        self.config = config or RenderingConfig()
        self.tokens = tokens
        # Plain (href, opener) pairs are accepted too
        self.items = [item if isinstance(item, Item) else Item(*item) for item in items]
        self.doc = GridDocument(
            width=self.config.width,
            left_margin=self.config.left_margin,
        )
        self.tag_stack: list[str] = []
        self.tables = TableStack()
        self._glyphs = GlyphRenderer(
            width=self.config.image_width,
            gradient=self.config.gradient,
        )

    def parse(self) -> None:
        """
        Consume the token stream until it ends.

        Raises:
            MarkupError: If the stream reports an error other than EOF.
        """
        for token in self.tokens:
            if token.type == TokenType.ERROR:
                if isinstance(token.error, EOFError):
                    return
                logger.error(f"Markup error: {token.error}")
                raise MarkupError(str(token.error)) from token.error
            elif token.type == TokenType.START_TAG:
                self.tag_stack.append(token.data)
                self.handle_start_tag(token)
            elif token.type == TokenType.SELF_CLOSING_TAG:
                self.handle_start_tag(token)
            elif token.type == TokenType.TEXT:
                self.handle_text(token)
            elif token.type == TokenType.END_TAG:
                self.handle_end_tag(token)
                self._pop_tag(token.data)

    # -------------------------------------------------------------------------
    # Token Handlers
    # -------------------------------------------------------------------------

    def handle_text(self, token: Token) -> None:
        """Append a text token, unless it belongs to a hidden element."""
        if self.tag_stack and self.tag_stack[-1] in HIDDEN_TEXT_TAGS:
            return
        self.doc.style(self.tag_stack)
        self.append(token.data, raw=False)

    def handle_start_tag(self, token: Token) -> None:
        """
        Render non-text elements (images, rules, breaks) and open table
        structure.
        """
        tag = token.data
        if tag == "img":
            self._handle_image(token)
        elif tag == "br":
            self.append("\n", raw=True)
        elif tag == "p":
            self.doc.col += 2
        elif tag == "hr":
            self.doc.col = 0
            self.append("-" * self.doc.width, raw=True)
        elif tag == "table":
            self.tables.push_table()
        elif tag == "tr":
            if not self.tables.push_row():
                logger.debug("Ignoring <tr> outside of a table")
        elif tag in TABLE_CELL_TAGS:
            if not self.tables.push_cell():
                logger.debug(f"Ignoring <{tag}> outside of a table row")

    def handle_end_tag(self, token: Token) -> None:
        """Flatten a finished table into the document (or enclosing cell)."""
        if token.data != "table":
            return
        rows = self.tables.pop_table()
        if rows is None:
            logger.debug("Ignoring </table> with no open table")
            return
        block = format_table(rows, self.doc.width)
        self.append("\n", raw=True)
        self.append(block, raw=True)

    def _handle_image(self, token: Token) -> None:
        for key, value in token.attrs:
            if key == "alt":
                self.append(f"Alt text: {value}\n", raw=False)
            elif key == "src":
                # Column widths aren't known until the whole table has been
                # traversed, so images inside tables are not drawn.
                if self.tables.focused_cell is not None:
                    continue
                if not self.config.render_images:
                    continue
                item = self._find_item(value)
                if item is None:
                    logger.debug(f"No resource for image source {value!r}")
                    continue
                self.append(self._glyphs.render(item), raw=True)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def append(self, text: str, raw: bool) -> None:
        """
        Append text to the focused element: the focused table cell if one
        exists (trimmed, unwrapped), otherwise the document.
        """
        if self.tables.append_to_focused(text.strip()):
            return
        if raw:
            self.doc.append_raw(text)
        else:
            self.doc.append_text(text)

    def _find_item(self, href: str) -> Item | None:
        for item in self.items:
            if item.href == href:
                return item
        return None

    def _pop_tag(self, name: str) -> None:
        """
        Close the most recent open element with this name, along with any
        elements opened inside it that were never closed.
        """
        for i in range(len(self.tag_stack) - 1, -1, -1):
            if self.tag_stack[i] == name:
                del self.tag_stack[i:]
                return
        logger.debug(f"Ignoring </{name}> with no matching open element")


def render(
    tokens: Iterable[Token],
    items: Iterable[Item] = (),
    config: RenderingConfig | None = None,
) -> RenderResult:
    """
    Render a token stream to a GridDocument.

    Args:
        tokens: Markup tokens, e.g. from tokenize().
        items: Resources that image sources are resolved against.
        config: Rendering configuration. Defaults to an 80 column grid.

    Returns:
        RenderResult holding the document and, if the token stream failed,
        the error. The document is returned either way.
    """
    parser = Parser(tokens, items, config)
    try:
        parser.parse()
    except MarkupError as e:
        return RenderResult(document=parser.doc, error=e)
    return RenderResult(document=parser.doc)


def parse_text(
    source: str | bytes | IO,
    items: Iterable[Item] = (),
    config: RenderingConfig | None = None,
) -> RenderResult:
    """Tokenize chapter markup and render it."""
    return render(tokenize(source), items, config)
