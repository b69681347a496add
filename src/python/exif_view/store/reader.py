"""
Reading EXIF tags out of image files into a TagStore.

Decoding is done by third-party libraries:
- RAW/TIFF structured files and HEIC/HEIF: exifread
- Standard formats (JPEG, PNG, WEBP): Pillow

Both produce library specific tag objects; this module normalizes them to
plain int/float/str values keyed by numeric tag id, and locates the EXIF
base offset so IFD relative offsets (e.g. the thumbnail) can be resolved
to absolute file positions.
"""

import logging
import struct
from pathlib import Path
from typing import BinaryIO, Dict, Optional, Union

import exifread
from PIL import ExifTags
from PIL import Image as PILImage
from PIL.TiffImagePlugin import IFDRational

from exif_view.exceptions import ExifImportError
from exif_view.models.enums import ExifTag, FileFormat
from exif_view.store.tag_store import TagStore, TagValue
from exif_view.utils import clean_string

logger = logging.getLogger(__name__)

BACKENDS = ("auto", "exifread", "pillow")

# IFD1 only matters for locating the embedded thumbnail
THUMBNAIL_TAGS = (ExifTag.THUMBNAIL_OFFSET, ExifTag.THUMBNAIL_LENGTH)

# exifread FIELD_TYPES indices
_ASCII = 2
_UNDEFINED = 7
_RATIONAL_TYPES = (5, 10)
_FLOAT_TYPES = (11, 12)

_JPEG_SOI = b"\xff\xd8"
_TIFF_HEADERS = (b"II*\x00", b"MM\x00*")
_EXIF_IDENTIFIER = b"Exif\x00\x00"


def read_tag_store(file_path: Union[str, Path], backend: str = "auto") -> TagStore:
    """
    Read the EXIF tags of an image file.

    Args:
        file_path: Path to the image file
        backend: "auto" (choose by file format), "exifread" or "pillow"

    Returns:
        TagStore holding every recognized tag

    Raises:
        ExifImportError: If the file is missing, empty, unreadable or has no EXIF data
        ValueError: If backend is not one of BACKENDS

    Example:
        >>> store = read_tag_store(Path("/photos/IMG_1234.CR2"))
        >>> store.lookup(ExifTag.F_NUMBER)
        4.0
    """
    if backend not in BACKENDS:
        raise ValueError(f"Unknown EXIF reader backend: {backend!r} (expected one of {BACKENDS})")

    file_path = Path(file_path)

    if not file_path.exists() or not file_path.is_file():
        raise ExifImportError(file_path, "file not found or not a file")

    if file_path.stat().st_size == 0:
        raise ExifImportError(file_path, "file is empty")

    if backend == "auto":
        file_format = FileFormat.from_filename(file_path.name)
        # Pillow often can't handle RAW or HEIC/HEIF without plugins
        if file_format.is_raw or file_format in (FileFormat.HEIC, FileFormat.HEIF):
            backend = "exifread"
        else:
            backend = "pillow"

    try:
        if backend == "exifread":
            values = _read_with_exifread(file_path)
        else:
            values = _read_with_pillow(file_path)

        with open(file_path, "rb") as f:
            exif_offset = locate_exif_offset(f)
    except ExifImportError:
        raise
    except Exception as e:
        raise ExifImportError(file_path, f"{backend} failed: {e}") from e

    if not values:
        raise ExifImportError(file_path, "no EXIF data found")

    logger.debug(
        "Read %d EXIF tags from %s with %s (EXIF offset %d)",
        len(values), file_path, backend, exif_offset,
    )
    return TagStore(values, exif_offset=exif_offset, source=file_path)


def _read_with_exifread(file_path: Path) -> Dict[int, TagValue]:
    """
    Collect tag values using the exifread library.

    exifread keys its result by "<IFD> <TagName>"; the IFD prefix decides
    which entries are kept, the numeric id on the tag object decides where
    they go.
    """
    with open(file_path, "rb") as f:
        tags = exifread.process_file(f, details=False)

    values: Dict[int, TagValue] = {}
    for key, tag in tags.items():
        # JPEGThumbnail and friends are raw bytes, not IfdTag objects
        if not hasattr(tag, "field_type"):
            continue

        ifd = key.split(" ", 1)[0]
        if ifd == "Thumbnail":
            if tag.tag not in THUMBNAIL_TAGS:
                continue
        elif ifd not in ("Image", "EXIF"):
            continue

        if ExifTag.from_value(tag.tag) is None:
            continue

        value = _convert_exifread_value(tag)
        if value is None:
            logger.debug("Skipping unreadable value for %s in %s", key, file_path)
            continue
        values[tag.tag] = value

    return values


def _convert_exifread_value(tag) -> Optional[TagValue]:
    """Convert an exifread IfdTag to a single plain value."""
    field_type = int(tag.field_type)

    if field_type == _ASCII:
        return clean_string(tag.values)
    if field_type == _UNDEFINED:
        return None

    values = tag.values
    if not isinstance(values, (list, tuple)):
        values = [values]
    if not values:
        return None

    first = values[0]
    if field_type in _RATIONAL_TYPES:
        if not first.den:
            return None
        return first.num / first.den
    if field_type in _FLOAT_TYPES:
        return float(first)
    return int(first)


def _read_with_pillow(file_path: Path) -> Dict[int, TagValue]:
    """Collect tag values from IFD0, the Exif IFD and IFD1 using Pillow."""
    values: Dict[int, TagValue] = {}

    with PILImage.open(file_path) as img:
        exif_data = img.getexif()

        if not exif_data or isinstance(exif_data, int):
            return values

        sources = [
            (exif_data.items(), None),
            (exif_data.get_ifd(ExifTags.IFD.Exif).items(), None),
            (exif_data.get_ifd(ExifTags.IFD.IFD1).items(), THUMBNAIL_TAGS),
        ]

        for items, allowed in sources:
            for tag_id, raw in items:
                if ExifTag.from_value(tag_id) is None:
                    continue
                if allowed is not None and tag_id not in allowed:
                    continue

                value = _convert_pillow_value(raw)
                if value is None:
                    logger.debug("Skipping unreadable value for tag 0x%04X in %s", tag_id, file_path)
                    continue
                values[tag_id] = value

    return values


def _convert_pillow_value(raw) -> Optional[TagValue]:
    """Convert a Pillow EXIF value to a single plain value."""
    if isinstance(raw, tuple):
        if not raw:
            return None
        raw = raw[0]

    if isinstance(raw, bytes):
        return None
    if isinstance(raw, str):
        return clean_string(raw)
    if isinstance(raw, IFDRational):
        if not raw.denominator:
            return None
        return float(raw)
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return raw

    return None


def locate_exif_offset(f: BinaryIO) -> int:
    """
    Find the absolute file offset of the EXIF TIFF header.

    - TIFF structured files (TIFF, most RAW formats): the file starts with
      the TIFF header, so the offset is 0.
    - JPEG: the TIFF header follows the "Exif\\0\\0" identifier of the
      first APP1 segment carrying one.
    - Anything else: 0, logged at debug level.

    Args:
        f: Binary file object, positioned anywhere

    Returns:
        Offset in bytes from the start of the file
    """
    f.seek(0)
    head = f.read(4)

    if head in _TIFF_HEADERS:
        return 0

    if head[:2] != _JPEG_SOI:
        logger.debug("Not a JPEG or TIFF container, assuming EXIF offset 0")
        return 0

    pos = 2
    while True:
        f.seek(pos)
        segment = f.read(4)
        if len(segment) < 4 or segment[0] != 0xFF:
            break

        marker = segment[1]
        # Start of scan / end of image: no more metadata segments
        if marker in (0xDA, 0xD9):
            break

        (length,) = struct.unpack(">H", segment[2:4])
        if marker == 0xE1 and f.read(len(_EXIF_IDENTIFIER)) == _EXIF_IDENTIFIER:
            return pos + 4 + len(_EXIF_IDENTIFIER)

        pos += 2 + length

    logger.debug("No APP1 Exif segment found, assuming EXIF offset 0")
    return 0
