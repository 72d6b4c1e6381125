"""Decodes PLAYPAL style colour tables."""

from pydantic import BaseModel, Field
from typing import List, Tuple
from .exceptions import PaletteError

PALETTE_COLORS = 256
PALETTE_SIZE = PALETTE_COLORS * 3  # 768


class Palette(BaseModel):
    """
    A 256 entry colour lookup table.

    From `r_data.c`: the palette lump is a sequence of 256 RGB triples, one
    byte per channel. Colour index i in picture data maps to colors[i].
    """

    index: int = Field(0, description="Which table of a multi-palette lump this was read from")
    colors: List[Tuple[int, int, int]] = []

    def __init__(self, data: bytes, index: int = 0, **kwargs):
        super().__init__(index=index, **kwargs)
        self._parse(data)

    def _parse(self, data: bytes):
        count = palette_count(data)
        if count == 0:
            raise PaletteError(f"Palette data too short: {len(data)} < {PALETTE_SIZE} bytes")
        if self.index < 0 or self.index >= count:
            raise PaletteError(f"Palette index {self.index} out of range, lump holds {count} palette(s)")

        start = self.index * PALETTE_SIZE
        table = data[start : start + PALETTE_SIZE]
        self.colors = [(table[i], table[i + 1], table[i + 2]) for i in range(0, PALETTE_SIZE, 3)]

    def __len__(self) -> int:
        return len(self.colors)

    def __getitem__(self, color_index: int) -> Tuple[int, int, int]:
        return self.colors[color_index]


def palette_count(data: bytes) -> int:
    """Number of complete palettes stored in a palette lump."""
    return len(data) // PALETTE_SIZE


def decode_palette(data: bytes, index: int = 0) -> Palette:
    """
    Decodes one palette from a palette lump.

    The game only ever needs the first table; PLAYPAL carries 13 more for
    damage and pickup flashes, reachable through index.
    """
    return Palette(data, index=index)
