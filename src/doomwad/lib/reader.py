"""Bounds-checked little-endian reader over a byte buffer."""

import struct
from .exceptions import WADFormatError


class ByteReader:
    """
    A cursor over immutable bytes.

    Every read is checked against the end of the buffer before it happens, so
    offsets taken from untrusted data fail with a WADFormatError instead of
    silently returning short slices.
    """

    def __init__(self, data: bytes, label: str = "data"):
        self.data = data
        self.label = label
        self.offset = 0

    def __len__(self) -> int:
        return len(self.data)

    def tell(self) -> int:
        return self.offset

    def remaining(self) -> int:
        return len(self.data) - self.offset

    def seek(self, offset: int):
        if offset < 0 or offset > len(self.data):
            raise WADFormatError(f"{self.label}: offset {offset} outside buffer of {len(self.data)} bytes")
        self.offset = offset

    def _require(self, size: int):
        if size < 0 or self.offset + size > len(self.data):
            raise WADFormatError(
                f"{self.label}: unexpected end of data reading {size} bytes at offset {self.offset} "
                f"(buffer is {len(self.data)} bytes)"
            )

    def unpack(self, fmt: str) -> tuple:
        """Unpacks a struct format at the cursor and advances past it."""
        size = struct.calcsize(fmt)
        self._require(size)
        values = struct.unpack_from(fmt, self.data, self.offset)
        self.offset += size
        return values

    def read_u8(self) -> int:
        self._require(1)
        value = self.data[self.offset]
        self.offset += 1
        return value

    def read_i16(self) -> int:
        return self.unpack("<h")[0]

    def read_u32(self) -> int:
        return self.unpack("<L")[0]

    def read_bytes(self, size: int) -> bytes:
        self._require(size)
        chunk = bytes(self.data[self.offset : self.offset + size])
        self.offset += size
        return chunk

    def skip(self, size: int):
        self._require(size)
        self.offset += size
