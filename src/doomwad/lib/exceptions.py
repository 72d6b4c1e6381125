"""Custom exceptions for the WAD file reader library."""


class WADError(Exception):
    """Base class for exceptions in this module."""

    pass


class WADIOError(WADError):
    """Raised when the WAD file cannot be read from disk."""

    pass


class WADFormatError(WADError):
    """Raised when data inside the WAD file is malformed."""

    pass


class InvalidWADFileError(WADFormatError):
    """Raised when the file is not a valid WAD file."""

    pass


class PaletteError(WADFormatError):
    """Raised for errors related to palette decoding."""

    pass


class PictureError(WADFormatError):
    """Raised for errors related to picture decoding."""

    pass


class LumpNotFoundError(WADError, KeyError):
    """Raised when a lump name is not present in the archive."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"Lump not found: {self.name!r}"
