"""RGBA images and cutting them into tiles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

BYTES_PER_PIXEL = 4


@dataclass(frozen=True)
class Image:
    """An RGBA image with four bytes per pixel, row by row."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        data = bytes(self.data)
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        if len(data) != self.width * self.height * BYTES_PER_PIXEL:
            raise ValueError("image data does not match its dimensions")
        object.__setattr__(self, "data", data)

    def sub_image(self, offset: Sequence[int], extent: Sequence[int]) -> Image:
        """Cut out a rectangle; its rows come out in reverse order."""
        offset_x, offset_y = offset
        extent_x, extent_y = extent
        if min(offset_x, offset_y, extent_x, extent_y) < 0:
            raise ValueError("offset and extent must not be negative")
        if offset_x + extent_x > self.width or offset_y + extent_y > self.height:
            raise ValueError("sub image is out of bounds")

        row_pitch = self.width * BYTES_PER_PIXEL
        row_length = extent_x * BYTES_PER_PIXEL
        rows = []
        for y in range(offset_y, offset_y + extent_y):
            start = y * row_pitch + offset_x * BYTES_PER_PIXEL
            rows.append(self.data[start : start + row_length])
        return Image(extent_x, extent_y, b"".join(reversed(rows)))


def split_tiles(image: Image, tile_width: int = 16, tile_height: int = 16) -> list[Image]:
    """Cut an atlas into whole tiles, left to right, then top to bottom."""
    if tile_width <= 0 or tile_height <= 0:
        raise ValueError("tile dimensions must be positive")
    return [
        image.sub_image((tile_x * tile_width, tile_y * tile_height), (tile_width, tile_height))
        for tile_y in range(image.height // tile_height)
        for tile_x in range(image.width // tile_width)
    ]