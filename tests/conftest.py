"""Builders for synthetic WAD files, palettes and pictures."""

import struct
import pytest


def build_wad(lumps, identification=b"IWAD"):
    """
    Builds a WAD image in memory.

    lumps is a list of (name, data) pairs, written in order. Names may be
    str or already padded bytes.
    """
    body = bytearray()
    entries = []
    offset = 12
    for name, data in lumps:
        if isinstance(name, str):
            name = name.encode("ascii")
        entries.append(struct.pack("<LL8s", offset, len(data), name))
        body += data
        offset += len(data)

    header = struct.pack("<4sLL", identification, len(lumps), 12 + len(body))
    return header + bytes(body) + b"".join(entries)


def build_picture(height, columns, left_offset=0, top_offset=0):
    """
    Builds a picture lump. columns is a list with one entry per column, each
    a list of (top_delta, palette_indices) posts.
    """
    width = len(columns)
    table_end = 8 + 4 * width
    column_data = bytearray()
    offsets = []
    for posts in columns:
        offsets.append(table_end + len(column_data))
        for top_delta, pixels in posts:
            column_data += bytes((top_delta, len(pixels), 0)) + bytes(pixels) + b"\x00"
        column_data.append(0xFF)

    header = struct.pack("<hhhh", width, height, left_offset, top_offset)
    return header + struct.pack(f"<{width}L", *offsets) + bytes(column_data)


def build_palette_data(tables=1):
    """Palette bytes 0, 1, 2, ... so colour i of table 0 is (3i, 3i+1, 3i+2) mod 256."""
    return bytes(i % 256 for i in range(768 * tables))


@pytest.fixture
def palette_data():
    return build_palette_data()


@pytest.fixture
def skull_picture():
    # 3x4, middle column empty, last column has two posts with a gap.
    return build_picture(4, [[(0, [1, 2, 3, 4])], [], [(0, [5]), (2, [6, 7])]], left_offset=-2, top_offset=7)


@pytest.fixture
def sample_wad_data(palette_data, skull_picture):
    return build_wad(
        [
            ("PLAYPAL", palette_data),
            ("M_SKULL1", skull_picture),
            ("DEMO1", b"not a picture at all"),
        ]
    )


@pytest.fixture
def sample_wad_path(tmp_path, sample_wad_data):
    path = tmp_path / "sample.wad"
    path.write_bytes(sample_wad_data)
    return path


@pytest.fixture
def make_wad():
    return build_wad


@pytest.fixture
def make_picture():
    return build_picture


@pytest.fixture
def make_palette_data():
    return build_palette_data
