"""Tests for palette decoding."""

import pytest
from doomwad.lib.exceptions import PaletteError, WADFormatError
from doomwad.lib.palette import decode_palette, palette_count


def test_decode_sequential_palette(palette_data):
    """Tests that colour i is read from bytes 3i, 3i+1 and 3i+2."""
    palette = decode_palette(palette_data)

    assert len(palette) == 256
    for i in range(256):
        assert palette[i] == ((3 * i) % 256, (3 * i + 1) % 256, (3 * i + 2) % 256)


def test_decode_short_palette_fails(palette_data):
    """Tests that anything shorter than 768 bytes is rejected."""
    with pytest.raises(PaletteError):
        decode_palette(palette_data[:767])
    with pytest.raises(WADFormatError):
        decode_palette(b"")


def test_decode_uses_first_table_by_default(make_palette_data):
    """Tests that a multi-palette lump decodes its first table unless told otherwise."""
    data = bytes(768) + bytes([200] * 768)

    assert palette_count(data) == 2
    assert decode_palette(data)[0] == (0, 0, 0)
    assert decode_palette(data, index=1)[255] == (200, 200, 200)
    assert decode_palette(make_palette_data(14), index=13).index == 13


def test_decode_palette_index_out_of_range(palette_data):
    """Tests selecting a table the lump does not contain."""
    with pytest.raises(PaletteError):
        decode_palette(palette_data, index=1)
    with pytest.raises(PaletteError):
        decode_palette(palette_data, index=-1)


def test_trailing_partial_table_ignored(palette_data):
    """Tests that bytes after the last complete table do not count as a palette."""
    data = palette_data + b"\x01\x02\x03"

    assert palette_count(data) == 1
    assert decode_palette(data) == decode_palette(palette_data)
