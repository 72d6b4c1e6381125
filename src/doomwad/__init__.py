"""
doomwad - Doom WAD file library for Python

A pure Python library for reading Doom WAD archives and decoding their
palettes and column based pictures.
"""

from .lib.wad import WadFile, load
from .lib.palette import Palette, decode_palette
from .lib.picture import DecodedImage, decode_picture
from .lib.exceptions import (
    WADError,
    WADIOError,
    WADFormatError,
    InvalidWADFileError,
    PaletteError,
    PictureError,
    LumpNotFoundError,
)

__version__ = "0.0.1"

__all__ = [
    "WadFile",
    "load",
    "Palette",
    "decode_palette",
    "DecodedImage",
    "decode_picture",
    "WADError",
    "WADIOError",
    "WADFormatError",
    "InvalidWADFileError",
    "PaletteError",
    "PictureError",
    "LumpNotFoundError",
]
