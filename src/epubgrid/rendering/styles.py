# =============================================================================
# Style Resolution
# =============================================================================
# Maps the stack of currently open tags to a foreground attribute.
#
# Styling is "inherited and combined": every open tag contributes its bits,
# and the contributions are OR'd together. Nesting order does not matter,
# and the result is recomputed from the whole stack for every text token.
# =============================================================================

from collections.abc import Iterable

from epubgrid.core import Attribute


# Tag name -> attribute bits contributed while the tag is open
TAG_STYLES: dict[str, Attribute] = {
    "b": Attribute.BOLD,
    "strong": Attribute.BOLD,
    "em": Attribute.BOLD,
    "i": Attribute.YELLOW,
    "title": Attribute.RED,
    "h1": Attribute.MAGENTA,
    "h2": Attribute.BLUE,
    "h3": Attribute.CYAN,
    "h4": Attribute.CYAN,
    "h5": Attribute.CYAN,
    "h6": Attribute.CYAN,
}


def resolve_style(tags: Iterable[str]) -> Attribute:
    """
    Compute the foreground attribute for text under the given open tags.

    Args:
        tags: Open tag names, outermost first.

    Returns:
        DEFAULT OR'd with the contribution of every styled tag.
    """
    fg = Attribute.DEFAULT
    for tag in tags:
        fg |= TAG_STYLES.get(tag, Attribute.DEFAULT)
    return fg
