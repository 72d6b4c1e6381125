"""
doomwad.lib - Core library components

Internal modules for parsing WAD file structures.
"""

from .wad import WadFile, load
from .directory import Directory, DirectoryEntry, WADHeader
from .palette import Palette, decode_palette, palette_count
from .picture import Picture, PictureHeader, Column, Post, DecodedImage, decode_picture
from .reader import ByteReader
from .exceptions import (
    WADError,
    WADIOError,
    WADFormatError,
    InvalidWADFileError,
    PaletteError,
    PictureError,
    LumpNotFoundError,
)

__all__ = [
    "WadFile",
    "load",
    "Directory",
    "DirectoryEntry",
    "WADHeader",
    "Palette",
    "decode_palette",
    "palette_count",
    "Picture",
    "PictureHeader",
    "Column",
    "Post",
    "DecodedImage",
    "decode_picture",
    "ByteReader",
    "WADError",
    "WADIOError",
    "WADFormatError",
    "InvalidWADFileError",
    "PaletteError",
    "PictureError",
    "LumpNotFoundError",
]
