"""Enumerations for exif-view models."""

from enum import Enum, IntEnum
from typing import Optional


class ExifTag(IntEnum):
    """
    Known EXIF fields, valued with their numeric tag ids.

    Only the fields the derived accessors (and the batch summary) read are
    listed. Tags outside this vocabulary are dropped when a TagStore is built.
    """
    # IFD0
    MAKE = 0x010F
    MODEL = 0x0110
    ORIENTATION = 0x0112

    # IFD1 (thumbnail)
    THUMBNAIL_OFFSET = 0x0201    # JPEGInterchangeFormat
    THUMBNAIL_LENGTH = 0x0202    # JPEGInterchangeFormatLength

    # Exif IFD
    EXPOSURE_TIME = 0x829A
    F_NUMBER = 0x829D
    ISO_SPEED_RATINGS = 0x8827
    DATE_TIME_ORIGINAL = 0x9003
    SHUTTER_SPEED_VALUE = 0x9201  # APEX Tv
    APERTURE_VALUE = 0x9202       # APEX Av
    BRIGHTNESS_VALUE = 0x9203     # APEX Bv
    EXPOSURE_BIAS_VALUE = 0x9204
    FOCAL_LENGTH = 0x920A
    PIXEL_X_DIMENSION = 0xA002
    PIXEL_Y_DIMENSION = 0xA003
    FOCAL_PLANE_X_RESOLUTION = 0xA20E
    FOCAL_PLANE_Y_RESOLUTION = 0xA20F
    FOCAL_PLANE_RESOLUTION_UNIT = 0xA210
    EXPOSURE_INDEX = 0xA215
    FOCAL_LENGTH_IN_35MM_FILM = 0xA405
    LENS_MODEL = 0xA434

    @classmethod
    def from_value(cls, value: int) -> Optional["ExifTag"]:
        """
        Get the ExifTag for a numeric tag id.

        Args:
            value: Numeric EXIF tag id

        Returns:
            The matching ExifTag, or None if the id is not in the vocabulary
        """
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def label(self) -> str:
        """Human readable name, e.g. 'FocalPlaneXResolution'."""
        return _LABELS[self]


_LABELS = {
    ExifTag.MAKE: "Make",
    ExifTag.MODEL: "Model",
    ExifTag.ORIENTATION: "Orientation",
    ExifTag.THUMBNAIL_OFFSET: "ThumbnailOffset",
    ExifTag.THUMBNAIL_LENGTH: "ThumbnailLength",
    ExifTag.EXPOSURE_TIME: "ExposureTime",
    ExifTag.F_NUMBER: "FNumber",
    ExifTag.ISO_SPEED_RATINGS: "ISOSpeedRatings",
    ExifTag.DATE_TIME_ORIGINAL: "DateTimeOriginal",
    ExifTag.SHUTTER_SPEED_VALUE: "ShutterSpeedValue",
    ExifTag.APERTURE_VALUE: "ApertureValue",
    ExifTag.BRIGHTNESS_VALUE: "BrightnessValue",
    ExifTag.EXPOSURE_BIAS_VALUE: "ExposureBiasValue",
    ExifTag.FOCAL_LENGTH: "FocalLength",
    ExifTag.PIXEL_X_DIMENSION: "PixelXDimension",
    ExifTag.PIXEL_Y_DIMENSION: "PixelYDimension",
    ExifTag.FOCAL_PLANE_X_RESOLUTION: "FocalPlaneXResolution",
    ExifTag.FOCAL_PLANE_Y_RESOLUTION: "FocalPlaneYResolution",
    ExifTag.FOCAL_PLANE_RESOLUTION_UNIT: "FocalPlaneResolutionUnit",
    ExifTag.EXPOSURE_INDEX: "ExposureIndex",
    ExifTag.FOCAL_LENGTH_IN_35MM_FILM: "FocalLengthIn35mmFilm",
    ExifTag.LENS_MODEL: "LensModel",
}


class ResolutionUnit(IntEnum):
    """
    FocalPlaneResolutionUnit codes.

    EXIF only defines inches and centimeters for the focal plane; code 1
    ("no absolute unit") is legal in TIFF but meaningless here.
    """
    NONE = 1
    INCH = 2
    CENTIMETER = 3

    @property
    def millimeters(self) -> Optional[float]:
        """Length of one unit in millimeters, or None if the unit is not absolute."""
        if self is ResolutionUnit.INCH:
            return 25.4
        if self is ResolutionUnit.CENTIMETER:
            return 10.0
        return None


class FileFormat(Enum):
    """
    Image file formats the tag reader understands.

    Grouped by type:
    - RAW formats: Camera-specific raw files (TIFF structured)
    - Standard formats: Common image formats
    """
    # RAW formats
    CR2 = "cr2"      # Canon RAW 2
    NEF = "nef"      # Nikon RAW
    ARW = "arw"      # Sony RAW
    DNG = "dng"      # Adobe Digital Negative
    ORF = "orf"      # Olympus RAW
    RW2 = "rw2"      # Panasonic RAW

    # Standard image formats
    JPEG = "jpg"
    PNG = "png"
    TIFF = "tiff"
    HEIC = "heic"
    HEIF = "heif"
    WEBP = "webp"

    # Unknown
    UNKNOWN = "unknown"

    @classmethod
    def from_extension(cls, extension: str) -> "FileFormat":
        """
        Get FileFormat from a file extension.

        Args:
            extension: File extension (with or without leading dot)

        Returns:
            The matching FileFormat, or UNKNOWN if not recognized
        """
        ext = extension.lower().lstrip(".")

        # Handle common variations
        if ext in {"jpg", "jpeg"}:
            return cls.JPEG
        if ext in {"tif", "tiff"}:
            return cls.TIFF

        for fmt in cls:
            if fmt.value == ext:
                return fmt

        return cls.UNKNOWN

    @classmethod
    def from_filename(cls, filename: str) -> "FileFormat":
        """
        Get FileFormat from a filename or file path.

        Examples:
            >>> FileFormat.from_filename("photo.jpg")
            FileFormat.JPEG
            >>> FileFormat.from_filename("/photos/2025/01/IMG_1234.CR2")
            FileFormat.CR2
        """
        from pathlib import Path
        ext = Path(filename).suffix
        return cls.from_extension(ext)

    @property
    def is_raw(self) -> bool:
        """Check if this format is TIFF structured (RAW files and TIFF itself)."""
        return self in (
            FileFormat.CR2, FileFormat.NEF, FileFormat.ARW,
            FileFormat.DNG, FileFormat.ORF, FileFormat.RW2,
            FileFormat.TIFF,
        )

    @property
    def is_image(self) -> bool:
        """Check if this format is a readable image format."""
        return self in (
            FileFormat.JPEG, FileFormat.PNG,
            FileFormat.HEIC, FileFormat.HEIF, FileFormat.WEBP
        ) or self.is_raw
