"""Data models for exif-view."""

from exif_view.models.enums import ExifTag, FileFormat, ResolutionUnit

__all__ = [
    "ExifTag",
    "FileFormat",
    "ResolutionUnit",
]
