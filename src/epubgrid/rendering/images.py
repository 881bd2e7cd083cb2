# =============================================================================
# Image to Glyph Conversion
# =============================================================================
# Converts raster images into blocks of ASCII art.
#
# The process:
#   1. Open the resource and decode it (format detected from content)
#   2. Resize to a fixed glyph width, halving the height because terminal
#      cells are roughly twice as tall as they are wide
#   3. Convert each pixel to grayscale luminance
#   4. Map luminance onto a darkest-to-lightest glyph gradient
#
# Conversion is best effort: any failure yields an empty string so that a
# broken image never aborts the chapter around it.
# =============================================================================

import logging
from typing import TYPE_CHECKING

from PIL import Image

from epubgrid.config import DEFAULT_GRADIENT, DEFAULT_IMAGE_WIDTH

if TYPE_CHECKING:
    from epubgrid.core import Item

logger = logging.getLogger(__name__)


class GlyphRenderer:
    """
    Renders images as ASCII art.

    Usage:
        >>> renderer = GlyphRenderer(width=80)
        >>> art = renderer.render(item)

    Attributes:
        width: Output width in glyphs.
        gradient: Glyphs ordered from darkest to lightest.
    """

    def __init__(
        self,
        width: int = DEFAULT_IMAGE_WIDTH,
        gradient: str = DEFAULT_GRADIENT,
    ) -> None:
        self.width = width
        self.gradient = gradient

    def target_size(self, image: "Image.Image") -> tuple[int, int]:
        """
        Compute the glyph grid size for an image.

        Assumes a character height to width ratio of 2:1.
        """
        orig_width, orig_height = image.size
        height = (orig_height * self.width) // (orig_width * 2)
        return self.width, height

    def render(self, item: "Item") -> str:
        """
        Open an item and convert it to ASCII art.

        Returns:
            Newline-terminated rows of glyphs, or "" if the item cannot be
            opened or decoded.
        """
        try:
            with item.open() as f:
                image = Image.open(f)
                image.load()
        except Exception as e:
            logger.warning(f"Could not load image {item.href}: {e}")
            return ""

        try:
            return self.render_image(image)
        except Exception as e:
            logger.warning(f"Could not convert image {item.href}: {e}")
            return ""

    def render_image(self, image: "Image.Image") -> str:
        """Convert an already decoded image to ASCII art."""
        width, height = self.target_size(image)
        if width <= 0 or height <= 0:
            logger.debug(f"Image of size {image.size} is too flat to render")
            return ""

        # Resample in color, then take luminance per pixel
        if image.mode != "RGB":
            image = image.convert("RGB")
        image = image.resize((width, height), Image.LANCZOS)
        luminance = image.convert("L").tobytes()

        steps = len(self.gradient) - 1
        rows = []
        for y in range(height):
            row = luminance[y * width:(y + 1) * width]
            rows.append("".join(self.gradient[steps * lum // 255] for lum in row))
            rows.append("\n")
        return "".join(rows)


def image_to_text(
    item: "Item",
    width: int = DEFAULT_IMAGE_WIDTH,
    gradient: str = DEFAULT_GRADIENT,
) -> str:
    """Convert an image resource to ASCII art, or "" on failure."""
    return GlyphRenderer(width=width, gradient=gradient).render(item)
