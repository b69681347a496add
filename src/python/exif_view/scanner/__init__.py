"""Scanner module for summarizing directories of images."""

from exif_view.scanner.directory import scan_directory, views_to_dataframe

__all__ = [
    "scan_directory",
    "views_to_dataframe",
]
