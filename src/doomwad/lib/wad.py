"""Main WAD file reader class."""

from pydantic import BaseModel
from typing import Dict, List, Optional
from ..config import PALETTE_LUMP_NAME, resolve_wad_path
from .directory import Directory, WADHeader
from .exceptions import LumpNotFoundError, WADIOError
from .palette import Palette, decode_palette
from .picture import DecodedImage, Picture, decode_picture
import logging

logger = logging.getLogger(__name__)


class WadFile(BaseModel):
    """
    The main class for reading a WAD file.

    The whole file is read into memory once and split into named lumps.
    When the directory lists a name more than once the later entry wins, the
    same way a PWAD overrides lumps of the IWAD it is loaded on top of.
    After construction nothing is modified, so decoding may happen from
    several threads at once.
    """

    filepath: str
    data: Optional[bytes] = None
    header: Optional[WADHeader] = None
    directory: Optional[Directory] = None
    lumps: Dict[str, bytes] = {}

    def __init__(self, filepath: str, **data):
        super().__init__(filepath=filepath, **data)
        if self.data is None:
            try:
                with open(self.filepath, "rb") as f:
                    self.data = f.read()
            except OSError as e:
                raise WADIOError(f"Could not read WAD file {self.filepath}: {e}") from e

        self.parse()

    def parse(self):
        """
        Parses the WAD file from the loaded data.
        """
        directory = Directory(self.data)
        lumps = {}
        for entry in directory.entries:
            if entry.name in lumps:
                logger.debug(f"Lump {entry.name} (entry {entry.index}) replaces an earlier entry of the same name")
            lumps[entry.name] = self.data[entry.file_offset : entry.file_offset + entry.size]

        # Only publish once every entry has been validated.
        self.directory = directory
        self.header = directory.header
        self.lumps = lumps
        logger.debug(
            f"Loaded {self.header.identification} {self.filepath}: "
            f"{len(directory.entries)} directory entries, {len(lumps)} unique lumps"
        )

    @property
    def identification(self) -> str:
        return self.header.identification

    @property
    def is_iwad(self) -> bool:
        return self.identification == "IWAD"

    @property
    def is_pwad(self) -> bool:
        return self.identification == "PWAD"

    def __contains__(self, name: str) -> bool:
        return name in self.lumps

    def __len__(self) -> int:
        return len(self.lumps)

    def lump_names(self) -> List[str]:
        """Unique lump names, in the order they were first seen in the directory."""
        return list(self.lumps)

    def get_lump(self, name: str) -> bytes:
        """Raw bytes of a lump. Names are case sensitive."""
        try:
            return self.lumps[name]
        except KeyError:
            raise LumpNotFoundError(name) from None

    def get_palette(self, index: int = 0) -> Palette:
        """Decodes one table of the PLAYPAL lump; the first unless told otherwise."""
        return decode_palette(self.get_lump(PALETTE_LUMP_NAME), index=index)

    def get_picture(self, name: str) -> Picture:
        """Parses a picture lump without applying a palette."""
        return Picture(self.get_lump(name))

    def get_image(self, name: str) -> DecodedImage:
        """Decodes a picture lump using the first palette in PLAYPAL."""
        lump = self.get_lump(name)
        return decode_picture(lump, self.get_palette())


def load(path) -> WadFile:
    """
    Loads a WAD file.

    A bare file name that does not exist relative to the working directory
    is looked up in the configured WAD directory.
    """
    return WadFile(filepath=str(resolve_wad_path(path)))
