import argparse
import json
import logging
import sys
import base64
from doomwad.config import resolve_wad_path
from doomwad.lib.exceptions import WADError
from doomwad.lib.wad import load
from doomwad.utils import export_pictures, picture_filename, scale_image


class BytesEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, bytes):
            return base64.b64encode(obj).decode("ascii")
        return json.JSONEncoder.default(self, obj)


def setup_logging(verbose: bool = False) -> None:
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Dump WAD file structure to JSON or extract pictures as PNG.")
    parser.add_argument("wad_filepath", help="Path to the WAD file, or a name inside $DOOMWAD_DIR.")
    parser.add_argument("--image", metavar="LUMP", help="Decode a single picture lump.")
    parser.add_argument("-o", "--output", help="Output PNG path for --image (default: LUMP.png).")
    parser.add_argument("--extract-all", metavar="DIR", help="Decode every picture lump into DIR.")
    parser.add_argument("--scale", type=float, default=1, help="Scale factor for written pictures.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)
    if args.scale <= 0:
        parser.error("--scale must be positive")

    setup_logging(args.verbose)

    wad_path = resolve_wad_path(args.wad_filepath)
    if not wad_path.is_file():
        logging.error(f"File not found at {wad_path}")
        return 1

    try:
        wad = load(wad_path)

        if args.image:
            image = wad.get_image(args.image)
            output = args.output or f"{picture_filename(args.image)}.png"
            pil_image = scale_image(image, args.scale) if args.scale != 1 else image.to_pil()
            pil_image.save(output)
            logging.info(f"Wrote {args.image} ({image.width}x{image.height}) to {output}")
        elif args.extract_all:
            export_pictures(wad, args.extract_all, scale=args.scale)
        else:
            print(json.dumps(wad.model_dump(exclude={"data", "lumps"}), indent=2, cls=BytesEncoder))
        return 0
    except WADError as e:
        logging.error(f"Error reading WAD file: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
