# =============================================================================
# Markup Tokens
# =============================================================================
# The rendering engine consumes a flat stream of tokens: start tags, end
# tags, self-closing tags, text and errors. Any iterable of Token works.
#
# tokenize() produces such a stream from chapter markup. It parses with
# BeautifulSoup (lxml tree builder), which repairs malformed markup, and
# then walks the tree with an explicit stack so that deeply nested
# documents never hit the recursion limit.
# =============================================================================

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import IO

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Kinds of markup token."""
    START_TAG = auto()          # <p>
    END_TAG = auto()            # </p>
    SELF_CLOSING_TAG = auto()   # <br/>, <img/>
    TEXT = auto()               # Character data
    ERROR = auto()              # Tokenizer failure (see Token.error)


@dataclass
class Token:
    """
    A single markup token.

    Attributes:
        type: Kind of token.
        data: Lowercase tag name for tags, the text itself for TEXT.
        attrs: Ordered (key, value) attribute pairs for start tags.
        error: The failure for ERROR tokens. An EOFError marks a normal
               end of stream.
    """
    type: TokenType
    data: str = ""
    attrs: list[tuple[str, str]] = field(default_factory=list)
    error: Exception | None = None


def tokenize(
    source: str | bytes | IO,
    features: str = "lxml",
) -> Iterator[Token]:
    """
    Tokenize chapter markup.

    Elements with content produce START_TAG ... END_TAG; void elements
    (img, br, hr, ...) produce a single SELF_CLOSING_TAG. Comments,
    doctypes, CDATA sections and processing instructions are dropped.

    Args:
        source: Markup as text, bytes, or a readable file object.
        features: BeautifulSoup tree builder to use.

    Yields:
        Tokens in document order. If the source cannot be read, a single
        ERROR token is yielded instead.
    """
    try:
        soup = BeautifulSoup(source, features, multi_valued_attributes=None)
    except (OSError, ValueError) as e:
        logger.error(f"Could not parse markup: {e}")
        yield Token(TokenType.ERROR, error=e)
        return

    # One child iterator per open element, plus one for the document root
    pending = [iter(soup.contents)]
    open_tags: list[str] = []

    while pending:
        node = next(pending[-1], None)
        if node is None:
            pending.pop()
            if open_tags:
                yield Token(TokenType.END_TAG, open_tags.pop())
            continue

        if isinstance(node, Tag):
            attrs = [(key, _attr_value(value)) for key, value in node.attrs.items()]
            if node.is_empty_element:
                yield Token(TokenType.SELF_CLOSING_TAG, node.name, attrs)
                continue
            yield Token(TokenType.START_TAG, node.name, attrs)
            open_tags.append(node.name)
            pending.append(iter(node.contents))
        elif isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
            yield Token(TokenType.TEXT, str(node))


def _attr_value(value) -> str:
    """Attribute values are strings, except for builders that split them."""
    if isinstance(value, list):
        return " ".join(value)
    return str(value)
