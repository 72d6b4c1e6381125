"""Well-known lump names and WAD file location."""

import os
from pathlib import Path

PALETTE_LUMP_NAME = "PLAYPAL"

WAD_DIR_ENV = "DOOMWAD_DIR"
DEFAULT_WAD_DIR = "wad"


def get_wad_dir() -> Path:
    """
    Directory that holds the game's WAD files.

    $DOOMWAD_DIR wins when set, otherwise a "wad" directory under the
    current working directory.
    """
    env_dir = os.environ.get(WAD_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return Path.cwd() / DEFAULT_WAD_DIR


def resolve_wad_path(name) -> Path:
    """Returns name itself if it is an existing file, else name inside the WAD directory."""
    path = Path(name)
    if path.is_file():
        return path
    return get_wad_dir() / path
