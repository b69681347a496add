"""
Exceptions raised by exif-view.

Every error derives from ExifError so callers can catch the whole family.
Per-tag errors carry the ExifTag they concern.
"""

from pathlib import Path
from typing import Union

from exif_view.models.enums import ExifTag


class ExifError(Exception):
    """Base class for all exif-view errors."""


class TagNotFoundError(ExifError):
    """A tag is absent from the store, or cannot be read as the requested type."""

    def __init__(self, tag: ExifTag):
        self.tag = tag
        super().__init__(f"Could not read EXIF tag {tag.label} (0x{tag.value:04X}).")


class InvalidTagValueError(ExifError):
    """A tag is present but holds a value outside its legal domain."""

    def __init__(self, tag: ExifTag, reason: str):
        self.tag = tag
        self.reason = reason
        super().__init__(f"Illegal value for {tag.label}: {reason}")


class InsufficientDataError(ExifError):
    """Every derivation path for a composite quantity was exhausted."""

    def __init__(self, quantity: str):
        self.quantity = quantity
        super().__init__(f"Insufficient EXIF information to compute {quantity}.")


class ExifImportError(ExifError):
    """EXIF data could not be parsed out of a file."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f'Could not parse EXIF data out of "{path}": {reason}')
