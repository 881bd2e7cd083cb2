# =============================================================================
# Resource References
# =============================================================================
# An e-book chapter refers to embedded resources (images) by href. The
# container format that owns those resources is not our concern: we only
# need a mapping from href to something that can be opened as a byte stream.
#
# The engine never mutates items, so a list of them can be shared across
# any number of independent renders.
# =============================================================================

from collections.abc import Callable
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import BinaryIO


@dataclass(frozen=True)
class Item:
    """
    A resource that markup can refer to by href.

    Attributes:
        href: Identifier used by the markup (e.g., "images/cover.png").
        opener: Zero-argument callable returning a readable binary stream.

    Example:
        >>> item = Item.from_bytes("images/logo.png", png_data)
        >>> with item.open() as f:
        ...     header = f.read(8)
    """
    href: str
    opener: Callable[[], BinaryIO]

    def open(self) -> BinaryIO:
        """Open the resource. Errors from the opener propagate."""
        return self.opener()

    @classmethod
    def from_bytes(cls, href: str, data: bytes) -> "Item":
        """Create an item backed by an in-memory buffer."""
        return cls(href=href, opener=lambda: BytesIO(data))

    @classmethod
    def from_path(cls, href: str, path: Path | str) -> "Item":
        """Create an item backed by a file on disk (opened lazily)."""
        path = Path(path)
        return cls(href=href, opener=lambda: open(path, "rb"))


def items_from_directory(root: Path | str) -> list[Item]:
    """
    Build items for every file below a directory.

    Each href is the file's POSIX path relative to the root, which is how
    chapter markup usually refers to resources in the same container.

    Args:
        root: Directory to scan.

    Returns:
        Items sorted by href.
    """
    root = Path(root)
    items = [
        Item.from_path(path.relative_to(root).as_posix(), path)
        for path in root.rglob("*")
        if path.is_file()
    ]
    return sorted(items, key=lambda item: item.href)
