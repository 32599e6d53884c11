"""Tile map layers and the tile set that holds them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, List, Tuple

_TILE_IMAGE_NAMES = {
    0: "ground",
    1: "object-1",
    2: "object-2",
    3: "object-3",
}


class TileImage(enum.Enum):
    """Which tile image a layer draws from."""

    GROUND = 0
    OBJECT1 = 1
    OBJECT2 = 2
    OBJECT3 = 3

    @property
    def label(self) -> str:
        return _TILE_IMAGE_NAMES[self.value]

    def __str__(self) -> str:
        return self.label


@dataclass
class TileLayer:
    """One layer of tile indexes plus the vertices built from them."""

    image: TileImage = TileImage.GROUND
    indexes: List[int] = field(default_factory=list)
    verts: List[Any] = field(default_factory=list)
    visible_verts: List[Any] = field(default_factory=list)


@dataclass
class TileSet:
    """Tile counts and sizes of a map, with its layers."""

    count: Tuple[int, int] = (0, 0)
    size: Tuple[int, int] = (0, 0)
    layers: List[TileLayer] = field(default_factory=list)

    def reset(self) -> None:
        """Drop every layer and zero the tile count and size."""
        self.layers.clear()
        self.count = (0, 0)
        self.size = (0, 0)