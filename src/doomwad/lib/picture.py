"""Decodes column based patch pictures (sprites, menu graphics, wall patches)."""

from pydantic import BaseModel, Field
from typing import List, Optional, Tuple
from PIL import Image
from .exceptions import PictureError
from .palette import Palette
from .reader import ByteReader
import struct

PICTURE_HEADER_FORMAT = "<hhhh"
PICTURE_HEADER_SIZE = struct.calcsize(PICTURE_HEADER_FORMAT)  # 8

COLUMN_TERMINATOR = 0xFF

OPAQUE = 255
TRANSPARENT = 0


class PictureHeader(BaseModel):
    """
    Header of a picture lump.
    From `r_defs.h`: patch_t

    typedef struct
    {
        short width;        bounding box size
        short height;
        short leftoffset;   pixels to the left of origin
        short topoffset;    pixels below the origin
        int columnofs[8];   only [width] used
    } patch_t;
    """

    width: int
    height: int
    left_offset: int = Field(..., description="Draw position adjustment, not used by the decoder")
    top_offset: int = Field(..., description="Draw position adjustment, not used by the decoder")
    raw_data: dict


class Post(BaseModel):
    """
    A vertical run of opaque pixels.
    From `r_defs.h`: post_t

    typedef struct
    {
        byte topdelta;   -1 (0xFF) is the last post in a column
        byte length;     length data bytes follow
    } post_t;

    On disk the data is surrounded by one unused byte either side.
    """

    top_delta: int
    length: int
    data: bytes


class Column(BaseModel):
    """All posts of one picture column."""

    x: int
    offset: int
    posts: List[Post] = []


class DecodedImage(BaseModel):
    """
    A dense RGBA raster decoded from a picture.

    Pixels no post covered have alpha 0, so a post that paints palette black
    stays distinguishable from an undrawn pixel.
    """

    width: int
    height: int
    left_offset: int = 0
    top_offset: int = 0
    rgba: bytes = Field(..., description="Row-major, 4 bytes per pixel")

    def _pixel_offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return (y * self.width + x) * 4

    def is_drawn(self, x: int, y: int) -> bool:
        return self.rgba[self._pixel_offset(x, y) + 3] != TRANSPARENT

    def get_pixel(self, x: int, y: int) -> Optional[Tuple[int, int, int]]:
        """Returns the RGB colour at (x, y), or None if nothing was drawn there."""
        pos = self._pixel_offset(x, y)
        if self.rgba[pos + 3] == TRANSPARENT:
            return None
        return (self.rgba[pos], self.rgba[pos + 1], self.rgba[pos + 2])

    def to_pil(self) -> Image.Image:
        return Image.frombytes("RGBA", (self.width, self.height), self.rgba)

    def save(self, path, image_format: Optional[str] = None):
        self.to_pil().save(path, format=image_format)


class Picture(BaseModel):
    """
    The structure of a picture lump: header, column offsets and posts.

    Parsing only validates geometry; colour lookup happens in render().
    """

    header: Optional[PictureHeader] = None
    column_offsets: List[int] = []
    columns: List[Column] = []

    def __init__(self, data: bytes, **kwargs):
        super().__init__(**kwargs)
        self._parse(data)

    def _parse(self, data: bytes):
        reader = ByteReader(data, "picture")
        self._parse_header(reader)
        self._parse_column_offsets(reader)
        self._parse_columns(reader)

    def _parse_header(self, reader: ByteReader):
        start_offset = reader.tell()
        width, height, left_offset, top_offset = reader.unpack(PICTURE_HEADER_FORMAT)
        if width < 0 or height < 0:
            raise PictureError(f"Invalid picture dimensions {width}x{height}")

        parsed_header = {
            "width": width,
            "height": height,
            "left_offset": left_offset,
            "top_offset": top_offset,
        }
        self.header = PictureHeader(
            **parsed_header, raw_data={"raw": reader.data[start_offset : reader.tell()], "parsed": parsed_header}
        )

    def _parse_column_offsets(self, reader: ByteReader):
        self.column_offsets = list(reader.unpack(f"<{self.header.width}L"))

    def _parse_columns(self, reader: ByteReader):
        for x, offset in enumerate(self.column_offsets):
            reader.seek(offset)
            self.columns.append(Column(x=x, offset=offset, posts=self._parse_posts(reader, x)))

    def _parse_posts(self, reader: ByteReader, x: int) -> List[Post]:
        """
        Reads posts until the 0xFF terminator.

        Each post is: top_delta, length, unused byte, length data bytes,
        unused byte. top_delta is absolute within the column.
        """
        posts = []
        while True:
            top_delta = reader.read_u8()
            if top_delta == COLUMN_TERMINATOR:
                break

            length = reader.read_u8()
            reader.skip(1)
            data = reader.read_bytes(length)
            reader.skip(1)

            if top_delta + length > self.header.height:
                raise PictureError(
                    f"Post in column {x} covers rows {top_delta}..{top_delta + length - 1}, "
                    f"picture height is {self.header.height}"
                )
            posts.append(Post(top_delta=top_delta, length=length, data=data))

        return posts

    def render(self, palette: Palette) -> DecodedImage:
        """Composites every post into a dense raster using the palette."""
        width = self.header.width
        height = self.header.height
        pixels = bytearray(width * height * 4)

        for column in self.columns:
            for post in column.posts:
                for y, color_index in enumerate(post.data):
                    if color_index >= len(palette):
                        raise PictureError(
                            f"Colour index {color_index} in column {column.x} outside palette of {len(palette)}"
                        )
                    r, g, b = palette[color_index]
                    pos = ((post.top_delta + y) * width + column.x) * 4
                    pixels[pos : pos + 4] = bytes((r, g, b, OPAQUE))

        return DecodedImage(
            width=width,
            height=height,
            left_offset=self.header.left_offset,
            top_offset=self.header.top_offset,
            rgba=bytes(pixels),
        )


def decode_picture(data: bytes, palette: Palette) -> DecodedImage:
    """Decodes a picture lump into an RGBA raster."""
    return Picture(data).render(palette)
