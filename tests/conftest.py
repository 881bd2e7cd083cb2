# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the epubgrid test suite.
# =============================================================================

from io import BytesIO

import pytest
from PIL import Image

from epubgrid.core import Item


def make_image_bytes(
    size: tuple[int, int],
    color,
    mode: str = "RGB",
    fmt: str = "PNG",
) -> bytes:
    """Encode a solid-color image in memory."""
    buf = BytesIO()
    Image.new(mode, size, color).save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture
def black_png():
    """A 40x20 black PNG (renders as 80x20 glyphs)."""
    return make_image_bytes((40, 20), (0, 0, 0))


@pytest.fixture
def white_png():
    """A 40x20 white PNG."""
    return make_image_bytes((40, 20), (255, 255, 255))


@pytest.fixture
def gray_jpeg():
    """A 64x32 mid-gray JPEG."""
    return make_image_bytes((64, 32), (128, 128, 128), fmt="JPEG")


@pytest.fixture
def sample_items(black_png):
    """Resources as a chapter would reference them."""
    return [
        Item.from_bytes("images/cover.png", black_png),
        Item.from_bytes("images/broken.png", b"not an image"),
    ]


@pytest.fixture
def sample_chapter():
    """Sample chapter markup exercising most rendering paths."""
    return (
        "<html><head><title>Chapter One</title>"
        "<style>p { text-indent: 1em; }</style></head>"
        "<body><h1>Chapter One</h1>"
        "<p>It was a <b>dark</b> and <i>stormy</i> night.</p>"
        '<img alt="Cover" src="images/cover.png"/>'
        "<table><tr><td>Name</td><td>Value</td></tr>"
        "<tr><td>alpha</td><td>1</td></tr></table>"
        "<hr/>"
        "</body></html>"
    )
