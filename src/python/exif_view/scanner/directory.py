"""
Directory scanning for derived EXIF summaries.

This module reads every image file in a directory and returns the derived
quantities as a pandas DataFrame for easy analysis.
"""

import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from exif_view.config import get_reader_backend, get_scan_config, load_config
from exif_view.exceptions import ExifImportError
from exif_view.models.enums import FileFormat
from exif_view.view import ExifDerivedView

logger = logging.getLogger(__name__)


def scan_directory(
    directory: Path,
    recursive: Optional[bool] = None,
    include_hidden: Optional[bool] = None,
    backend: Optional[str] = None,
) -> pd.DataFrame:
    """
    Scan a directory for image files and summarize their EXIF data.

    Files without readable EXIF data are logged and left out. Settings
    left as None are taken from the config file (see config.load_config),
    falling back to a non-recursive scan of visible files with the "auto"
    backend when no config file exists.

    Args:
        directory: Directory to scan
        recursive: If True, scan subdirectories recursively
        include_hidden: If True, include files whose name starts with "."
        backend: EXIF reader backend passed to ExifDerivedView.from_file

    Returns:
        DataFrame with one row per image file: filename, file_path and
        every derived quantity (None where it cannot be derived)

    Example:
        >>> df = scan_directory(Path("/photos/2025/01/01"))
        >>> print(df[['filename', 'f_number', 'exposure_time', 'iso']].head())
    """
    if not directory.exists():
        raise FileNotFoundError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")

    if recursive is None or include_hidden is None or backend is None:
        config = load_config()
        scan_config = get_scan_config(config)
        if recursive is None:
            recursive = scan_config["recursive"]
        if include_hidden is None:
            include_hidden = scan_config["include_hidden"]
        if backend is None:
            backend = get_reader_backend(config)

    rows = []
    for path in _collect_files(directory, recursive=recursive, include_hidden=include_hidden):
        try:
            view = ExifDerivedView.from_file(path, backend=backend)
        except ExifImportError as e:
            logger.warning("Skipping %s: %s", path, e.reason)
            continue

        row = {"filename": path.name, "file_path": path}
        row.update(view.to_dict())
        rows.append(row)

    logger.info("Summarized %d image files in %s", len(rows), directory)

    if not rows:
        return pd.DataFrame()
    return pd.DataFrame(rows)


def _collect_files(
    directory: Path,
    recursive: bool = False,
    include_hidden: bool = False,
) -> List[Path]:
    """
    Collect image files from a directory, sorted by path.
    """
    files = []

    iterator = directory.rglob("*") if recursive else directory.iterdir()

    for path in iterator:
        if not path.is_file():
            continue

        if not include_hidden and path.name.startswith("."):
            continue

        if FileFormat.from_filename(path.name).is_image:
            files.append(path)

    return sorted(files)


def views_to_dataframe(views: List[ExifDerivedView]) -> pd.DataFrame:
    """
    Convert a list of views to a pandas DataFrame.

    Args:
        views: List of ExifDerivedView objects

    Returns:
        DataFrame with one row per view
    """
    if not views:
        return pd.DataFrame()

    data = [view.to_dict() for view in views]
    return pd.DataFrame(data)
