"""Textures of a material: pixel data plus the mip chain it generates."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TextureType(enum.Enum):
    DIFFUSE = 0
    SPECULAR = 1
    NORMAL = 2
    OTHER = 3


def mip_level_count(width, height) -> int:
    """Number of mip levels down to a single pixel for the larger dimension."""
    max_dim = max(int(width), int(height))
    levels = 1
    max_dim //= 2
    while max_dim:
        levels += 1
        max_dim //= 2
    return levels


@dataclass(eq=False)
class Texture:
    """An image with one byte per channel."""

    type: TextureType = TextureType.OTHER
    width: int = 0
    height: int = 0
    depth: int = 1
    nr_channels: int = 0
    mip_levels: int = 0
    data: bytes | None = None

    @property
    def has_image(self) -> bool:
        """Whether pixel data has been set."""
        return self.data is not None

    def set_data(self, data, width, height, nr_channels) -> None:
        """Store ``width * height * nr_channels`` bytes of pixel data."""
        if width <= 0 or height <= 0 or nr_channels <= 0:
            raise ValueError("width, height and nr_channels must be positive")
        size = width * height * nr_channels
        raw = bytes(data)
        if len(raw) < size:
            raise ValueError(f"expected at least {size} bytes, got {len(raw)}")
        self.width = width
        self.height = height
        self.depth = 1
        self.nr_channels = nr_channels
        self.mip_levels = mip_level_count(width, height)
        self.data = raw[:size]

    def mip_sizes(self) -> list[tuple[int, int]]:
        """Width and height of every mip level, starting with the full image."""
        sizes = []
        w, h = self.width, self.height
        for _ in range(self.mip_levels):
            sizes.append((w, h))
            if w > 1:
                w //= 2
            if h > 1:
                h //= 2
        return sizes

    def clean_up(self) -> None:
        """Release the pixel data."""
        self.data = None
        self.mip_levels = 0