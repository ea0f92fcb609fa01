"""Item definitions and image loading."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pygame


def load_image(filename: str) -> pygame.Surface:
    """Load an image file, raising FileNotFoundError if it is missing."""
    path = Path(filename)
    if not path.is_file():
        raise FileNotFoundError(f"failed to load image {filename}: no such file")
    return pygame.image.load(str(path))


@dataclass
class ItemData:
    """Static description of an item kind."""

    id: int
    name: str
    image_path: str
    _surface: pygame.Surface | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def image(self) -> pygame.Surface:
        """Return the item's image, loading it on first use."""
        if self._surface is None:
            self._surface = load_image(self.image_path)
        return self._surface


@dataclass
class Item:
    """A stack of items held in the bag."""

    data: ItemData
    count: int = 1


_CATALOG = (
    ItemData(1001, "Gold", "photos/type/jinBi.png"),
    ItemData(1002, "SwordXinShou", "photos/type/SwordXinShou.png"),
    ItemData(1003, "Sword1", "photos/type/Sword1.png"),
)


def item_catalog() -> dict[int, ItemData]:
    """Return every known item kind keyed by id."""
    return {data.id: data for data in _CATALOG}