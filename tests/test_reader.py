"""Tests for the bounds-checked byte reader."""

import pytest
from doomwad.lib.exceptions import WADFormatError
from doomwad.lib.reader import ByteReader


def test_read_little_endian_values():
    """Tests reading the integer types the formats use."""
    reader = ByteReader(b"\x07\xfe\xff\x01\x02\x03\x04")

    assert reader.read_u8() == 7
    assert reader.read_i16() == -2
    assert reader.read_u32() == 0x04030201
    assert reader.remaining() == 0


def test_read_bytes_and_skip():
    """Tests that read_bytes and skip advance the cursor."""
    reader = ByteReader(b"abcdef")
    reader.skip(1)

    assert reader.read_bytes(3) == b"bcd"
    assert reader.tell() == 4
    assert reader.read_bytes(0) == b""


def test_read_past_end_fails():
    """Tests that reads past the end of the buffer raise instead of returning short data."""
    reader = ByteReader(b"\x01\x02", label="picture")
    reader.read_u8()

    with pytest.raises(WADFormatError, match="picture"):
        reader.read_i16()
    # A failed read leaves the cursor where it was.
    assert reader.tell() == 1

    with pytest.raises(WADFormatError):
        reader.read_bytes(5)
    with pytest.raises(WADFormatError):
        reader.skip(2)


def test_seek_bounds():
    """Tests that seeking is limited to the buffer."""
    reader = ByteReader(b"\x00" * 4)

    reader.seek(4)
    assert reader.remaining() == 0
    with pytest.raises(WADFormatError):
        reader.read_u8()

    with pytest.raises(WADFormatError):
        reader.seek(5)
    with pytest.raises(WADFormatError):
        reader.seek(-1)


def test_unpack():
    """Tests unpacking a struct format at the cursor."""
    reader = ByteReader(b"\x01\x00\x02\x00\x03\x00\x04\x00")

    assert reader.unpack("<hhhh") == (1, 2, 3, 4)
    assert len(reader) == 8
