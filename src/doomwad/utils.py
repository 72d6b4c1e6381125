"""Utility functions for working with decoded WAD pictures.

Covers what the game and tooling do with pictures after decoding:
- scaling 320x200 era graphics up to window size
- telling picture lumps apart from sounds, maps and other data
- dumping every picture in an archive to PNG files
"""

from typing import List, Union
from pathlib import Path
from PIL import Image
from .lib.exceptions import WADFormatError
from .lib.picture import DecodedImage, PICTURE_HEADER_FORMAT, PICTURE_HEADER_SIZE
from .lib.wad import WadFile
import logging
import struct

logger = logging.getLogger(__name__)

# Vanilla Doom never has a picture wider or taller than this.
MAX_PICTURE_DIMENSION = 4096


def scale_image(image: Union[DecodedImage, Image.Image], factor: float) -> Image.Image:
    """
    Scales an image by factor using nearest neighbour sampling.

    Nearest neighbour keeps the hard pixel edges and leaves the alpha
    channel either fully opaque or fully transparent.
    """
    if factor <= 0:
        raise ValueError(f"Scale factor must be positive, got {factor}")
    if isinstance(image, DecodedImage):
        image = image.to_pil()

    width, height = image.size
    new_size = (max(1, int(round(width * factor))), max(1, int(round(height * factor))))
    return image.resize(new_size, Image.Resampling.NEAREST)


def looks_like_picture(data: bytes) -> bool:
    """
    Cheap check whether a lump is laid out like a picture.

    Looks at the header and column offset table only; a True result does not
    guarantee the columns decode.
    """
    if len(data) < PICTURE_HEADER_SIZE:
        return False

    width, height, _, _ = struct.unpack_from(PICTURE_HEADER_FORMAT, data, 0)
    if not (0 < width <= MAX_PICTURE_DIMENSION and 0 < height <= MAX_PICTURE_DIMENSION):
        return False

    table_end = PICTURE_HEADER_SIZE + width * 4
    if len(data) < table_end:
        return False

    column_offsets = struct.unpack_from(f"<{width}L", data, PICTURE_HEADER_SIZE)
    return all(table_end <= offset < len(data) for offset in column_offsets)


def picture_filename(name: str) -> str:
    """Lump name made safe for use as a file name; sprite names such as VILE\\1 contain separators."""
    return name.replace("\\", "^").replace("/", "^")


def export_pictures(wad: WadFile, output_dir, scale: float = 1) -> List[Path]:
    """
    Decodes every picture lump in the archive and writes it as a PNG file.

    Lumps that are not pictures, or fail to decode, are skipped and logged.

    Returns:
        List of output file paths created
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    palette = wad.get_palette()

    output_files = []
    for name in wad.lump_names():
        data = wad.get_lump(name)
        if not looks_like_picture(data):
            continue

        try:
            image = wad.get_picture(name).render(palette)
        except WADFormatError as e:
            logger.warning(f"Skipping {name}: {e}")
            continue

        pil_image = scale_image(image, scale) if scale != 1 else image.to_pil()
        output_file = output_dir / f"{picture_filename(name)}.png"
        pil_image.save(output_file)
        output_files.append(output_file)
        logger.debug(f"Wrote {output_file}")

    logger.info(f"Exported {len(output_files)} pictures to {output_dir}")
    return output_files
