"""
exif-view - derived photographic quantities from EXIF metadata.

Cameras record exposure settings inconsistently: some write the f-number,
some only the APEX aperture value, some neither the 35mm equivalent focal
length nor anything but the focal plane resolution. exif-view reads the raw
tags once and derives every quantity it can from whatever is present.

Core Concepts:
- TagStore: the raw EXIF tags of one file (tag id -> int, float or str)
- ExifDerivedView: accessors computing derived quantities from a TagStore

Usage:
    from exif_view import ExifDerivedView
    from pathlib import Path

    view = ExifDerivedView.from_file(Path("/photos/IMG_1234.jpg"))
    print(f"f/{view.get_f_number():.1f}, {view.get_exposure_time()}s")
"""

from exif_view.__version__ import __version__
from exif_view.exceptions import (
    ExifError,
    ExifImportError,
    InsufficientDataError,
    InvalidTagValueError,
    TagNotFoundError,
)
from exif_view.models import ExifTag, FileFormat, ResolutionUnit
from exif_view.scanner import scan_directory, views_to_dataframe
from exif_view.store import TagStore, read_tag_store
from exif_view.view import ExifDerivedView

__all__ = [
    "__version__",
    # Errors
    "ExifError",
    "ExifImportError",
    "InsufficientDataError",
    "InvalidTagValueError",
    "TagNotFoundError",
    # Models
    "ExifTag",
    "FileFormat",
    "ResolutionUnit",
    # Store
    "TagStore",
    "read_tag_store",
    # View
    "ExifDerivedView",
    # Scanner
    "scan_directory",
    "views_to_dataframe",
]
