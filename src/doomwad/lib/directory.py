"""Parses the header and lump directory of a WAD file."""

from pydantic import BaseModel, Field
from typing import List, Optional
from .exceptions import InvalidWADFileError
from .reader import ByteReader
import struct

WAD_MAGICS = (b"IWAD", b"PWAD")

HEADER_FORMAT = "<4sLL"
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)  # 12

DIRECTORY_ENTRY_FORMAT = "<LL8s"
DIRECTORY_ENTRY_SIZE = struct.calcsize(DIRECTORY_ENTRY_FORMAT)  # 16


def decode_lump_name(raw_name: bytes) -> str:
    """
    Turns the 8 byte name field into a lookup key.

    Names are padded with NUL or spaces and are not necessarily NUL
    terminated. Anything after the first NUL is padding. Bytes outside ASCII
    map one to one through latin-1 so distinct names stay distinct.
    """
    return raw_name.split(b"\x00", 1)[0].rstrip(b" ").decode("latin-1")


class WADHeader(BaseModel):
    """
    The 12 byte header at the start of every WAD file.

    struct
    {
        char identification[4]   "IWAD" or "PWAD"
        uint32 numlumps          number of directory entries
        uint32 infotableofs      offset of the directory
    }
    """

    identification: str = Field(..., description="IWAD for a base archive, PWAD for a patch archive")
    num_lumps: int
    directory_offset: int
    raw_data: dict


class DirectoryEntry(BaseModel):
    """
    One 16 byte directory record.

    struct
    {
        uint32 filepos   offset of the lump data from the start of the file
        uint32 size      size of the lump in bytes
        char name[8]     NUL or space padded
    }
    """

    index: int
    file_offset: int
    size: int
    name: str
    raw_data: dict


class Directory(BaseModel):
    """
    The lump directory, in file order.

    Both the directory table and every entry it lists are checked against the
    file length; a single bad entry invalidates the whole directory.
    """

    header: Optional[WADHeader] = None
    entries: List[DirectoryEntry] = []

    def __init__(self, data: bytes, **kwargs):
        super().__init__(**kwargs)
        self._parse(data)

    def _parse(self, data: bytes):
        """
        Parses the header and directory table from the whole file contents.
        """
        self.header = self._parse_header(data)
        self.entries = self._parse_entries(data)

    def _parse_header(self, data: bytes) -> WADHeader:
        if len(data) < HEADER_SIZE:
            raise InvalidWADFileError(f"Invalid WAD header size: {len(data)} < {HEADER_SIZE} bytes")

        raw_bytes = data[:HEADER_SIZE]
        identification, num_lumps, directory_offset = struct.unpack(HEADER_FORMAT, raw_bytes)
        if identification not in WAD_MAGICS:
            raise InvalidWADFileError(f"Not a valid WAD file: identification is {identification!r}")

        parsed_header = {
            "identification": identification.decode("ascii"),
            "num_lumps": num_lumps,
            "directory_offset": directory_offset,
        }
        return WADHeader(**parsed_header, raw_data={"raw": raw_bytes, "parsed": parsed_header})

    def _parse_entries(self, data: bytes) -> List[DirectoryEntry]:
        directory_end = self.header.directory_offset + self.header.num_lumps * DIRECTORY_ENTRY_SIZE
        if directory_end > len(data):
            raise InvalidWADFileError(
                f"Directory of {self.header.num_lumps} entries at offset {self.header.directory_offset} "
                f"extends past end of file ({directory_end} > {len(data)})"
            )

        reader = ByteReader(data, "directory")
        reader.seek(self.header.directory_offset)

        entries = []
        for index in range(self.header.num_lumps):
            start = reader.tell()
            file_offset, size, raw_name = reader.unpack(DIRECTORY_ENTRY_FORMAT)
            name = decode_lump_name(raw_name)

            if file_offset + size > len(data):
                raise InvalidWADFileError(
                    f"Lump {name!r} (entry {index}) at offset {file_offset} with size {size} "
                    f"extends past end of file ({len(data)} bytes)"
                )

            parsed_entry = {
                "index": index,
                "file_offset": file_offset,
                "size": size,
                "name": name,
            }
            entries.append(
                DirectoryEntry(**parsed_entry, raw_data={"raw": data[start : reader.tell()], "parsed": parsed_entry})
            )

        return entries
