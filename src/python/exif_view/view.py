"""
Derived photographic quantities from raw EXIF tags.

Cameras are free to record either the linear physical value of a setting
(f-number, exposure time in seconds) or its logarithmic APEX counterpart
(aperture value, time value), and many record only one of them. The
accessors here hide that choice: each one prefers the tag matching its own
unit and derives the value from the alternate tag when the primary one is
absent.

APEX relations used (EXIF 2.2, Annex C):
    Av = 2 * log2(F)        F  = 2 ** (Av / 2)
    Tv = log2(1 / t)        t  = 2 ** -Tv
    Sv = log2(N * ISO)      N  = 1 / 3.125
    Bv = Av + Tv - Sv

The average scene luminance uses the reflected light meter equation
    B = F**2 * K / (t * S)  with calibration constant K = 12.5
"""

import logging
import math
from pathlib import Path
from typing import Callable, Dict, Optional, Type, Union

from exif_view.exceptions import (
    ExifError,
    InsufficientDataError,
    InvalidTagValueError,
    TagNotFoundError,
)
from exif_view.models.enums import ExifTag, ResolutionUnit
from exif_view.store.reader import read_tag_store
from exif_view.store.tag_store import TagStore, TagValue

logger = logging.getLogger(__name__)

# Film speed calibration constant relating ASA arithmetic speed to Sv
FILM_SPEED_CONSTANT = 1 / 3.125

# Reflected light meter calibration constant
REFLECTED_LIGHT_CONSTANT = 12.5

# Diagonal of a 36x24mm film frame
FULL_FRAME_DIAGONAL_MM = math.hypot(36.0, 24.0)

DEFAULT_RESOLUTION_UNIT = ResolutionUnit.INCH


class ExifDerivedView:
    """
    Read-only view computing derived quantities from a TagStore.

    The view holds nothing but the store; every accessor recomputes its
    result from the raw tags, so repeated calls return identical results.

    Example:
        >>> view = ExifDerivedView.from_file(Path("/photos/IMG_1234.jpg"))
        >>> view.get_f_number()
        2.8
        >>> view.get_focal_length_35mm_equiv()
        35.0
    """

    def __init__(self, store: TagStore):
        self._store = store

    @classmethod
    def from_file(cls, file_path: Union[str, Path], backend: str = "auto") -> "ExifDerivedView":
        """
        Build a view over the EXIF tags of an image file.

        Raises:
            ExifImportError: If no EXIF data can be parsed out of the file
        """
        return cls(read_tag_store(file_path, backend=backend))

    @property
    def store(self) -> TagStore:
        return self._store

    # ------------------------------------------------------------------
    # Raw tag access
    # ------------------------------------------------------------------

    def lookup(self, tag: ExifTag, kind: Type = float) -> Optional[TagValue]:
        """Look up a tag as kind, returning None when it is absent."""
        return self._store.lookup(tag, kind)

    def query(self, tag: ExifTag, kind: Type = float) -> TagValue:
        """
        Look up a tag as kind.

        Raises:
            TagNotFoundError: If the tag is absent or cannot be read as kind
        """
        value = self._store.lookup(tag, kind)
        if value is None:
            raise TagNotFoundError(tag)
        return value

    def _first_available(
        self,
        primary: ExifTag,
        alternate: ExifTag,
        convert: Callable[[float], float],
    ) -> float:
        """
        Read primary, or else read alternate and convert it.

        Only absence of the primary tag falls through to the alternate.
        When both are absent the error names the alternate tag.
        """
        value = self.lookup(primary, float)
        if value is not None:
            return value
        return convert(self.query(alternate, float))

    # ------------------------------------------------------------------
    # Camera identity
    # ------------------------------------------------------------------

    def get_make(self) -> str:
        return self.query(ExifTag.MAKE, str)

    def get_model(self) -> str:
        return self.query(ExifTag.MODEL, str)

    # ------------------------------------------------------------------
    # Exposure parameters
    # ------------------------------------------------------------------

    def get_f_number(self) -> float:
        """f-number, from FNumber or else from the APEX ApertureValue."""
        return self._first_available(
            ExifTag.F_NUMBER,
            ExifTag.APERTURE_VALUE,
            lambda av: _pow2(ExifTag.APERTURE_VALUE, av / 2.0),
        )

    def get_exposure_time(self) -> float:
        """Exposure time in seconds, from ExposureTime or else from ShutterSpeedValue."""
        return self._first_available(
            ExifTag.EXPOSURE_TIME,
            ExifTag.SHUTTER_SPEED_VALUE,
            lambda tv: _pow2(ExifTag.SHUTTER_SPEED_VALUE, -tv),
        )

    def get_iso(self) -> float:
        """ISO speed, from ISOSpeedRatings or else from ExposureIndex."""
        # Cameras that record neither usually bury it in the MakerNote
        return self._first_available(
            ExifTag.ISO_SPEED_RATINGS,
            ExifTag.EXPOSURE_INDEX,
            lambda index: index,
        )

    def get_aperture_value(self) -> float:
        """APEX aperture value Av, from ApertureValue or else from FNumber."""
        return self._first_available(
            ExifTag.APERTURE_VALUE,
            ExifTag.F_NUMBER,
            lambda f_number: 2.0 * _log2_positive(ExifTag.F_NUMBER, f_number),
        )

    def get_time_value(self) -> float:
        """APEX time value Tv, from ShutterSpeedValue or else from ExposureTime."""
        return self._first_available(
            ExifTag.SHUTTER_SPEED_VALUE,
            ExifTag.EXPOSURE_TIME,
            lambda seconds: -_log2_positive(ExifTag.EXPOSURE_TIME, seconds),
        )

    def _iso_tag(self) -> ExifTag:
        """The tag get_iso() reads its value from."""
        if self.lookup(ExifTag.ISO_SPEED_RATINGS, float) is not None:
            return ExifTag.ISO_SPEED_RATINGS
        return ExifTag.EXPOSURE_INDEX

    def get_exposure_value(self) -> float:
        """APEX exposure value Ev = Tv + Av."""
        return self.get_time_value() + self.get_aperture_value()

    def get_film_speed_value(self) -> float:
        """APEX speed value Sv = log2(N * ISO)."""
        iso = self.get_iso()
        return _log2_positive(self._iso_tag(), iso * FILM_SPEED_CONSTANT)

    # ------------------------------------------------------------------
    # Lens geometry
    # ------------------------------------------------------------------

    def get_focal_length_35mm_equiv(self) -> float:
        """
        Focal length in mm as if the sensor were a 36x24mm film frame.

        Uses FocalLengthIn35mmFilm when recorded (0 means unknown). Otherwise
        the sensor size is reconstructed from the pixel dimensions and the
        focal plane resolution, and the focal length is scaled by the ratio
        of the full frame diagonal to the sensor diagonal.

        Raises:
            TagNotFoundError: If a tag needed by the computation is absent
            InvalidTagValueError: If the focal plane geometry is nonsensical
        """
        recorded = self.lookup(ExifTag.FOCAL_LENGTH_IN_35MM_FILM, float)
        if recorded is not None and recorded > 0:
            return recorded

        focal_length = self.query(ExifTag.FOCAL_LENGTH, float)
        pixel_x_dimension = self.query(ExifTag.PIXEL_X_DIMENSION, float)
        pixel_y_dimension = self.query(ExifTag.PIXEL_Y_DIMENSION, float)

        x_resolution = self.query(ExifTag.FOCAL_PLANE_X_RESOLUTION, float)
        if x_resolution <= 0:
            raise InvalidTagValueError(ExifTag.FOCAL_PLANE_X_RESOLUTION, f"{x_resolution} is not positive")

        y_resolution = self.query(ExifTag.FOCAL_PLANE_Y_RESOLUTION, float)
        if y_resolution <= 0:
            raise InvalidTagValueError(ExifTag.FOCAL_PLANE_Y_RESOLUTION, f"{y_resolution} is not positive")

        unit_in_mm = self._resolution_unit_in_mm()

        sensor_width_mm = unit_in_mm / x_resolution * pixel_x_dimension
        sensor_height_mm = unit_in_mm / y_resolution * pixel_y_dimension
        sensor_diagonal_mm = math.hypot(sensor_width_mm, sensor_height_mm)
        if sensor_diagonal_mm == 0:
            raise InvalidTagValueError(ExifTag.PIXEL_X_DIMENSION, "sensor diagonal is zero")

        return focal_length * FULL_FRAME_DIAGONAL_MM / sensor_diagonal_mm

    def _resolution_unit_in_mm(self) -> float:
        code = self.lookup(ExifTag.FOCAL_PLANE_RESOLUTION_UNIT, int)
        if code is None:
            code = DEFAULT_RESOLUTION_UNIT

        try:
            millimeters = ResolutionUnit(code).millimeters
        except ValueError:
            millimeters = None

        if millimeters is None:
            raise InvalidTagValueError(ExifTag.FOCAL_PLANE_RESOLUTION_UNIT, f"unsupported unit code {code}")
        return millimeters

    # ------------------------------------------------------------------
    # Luminance
    # ------------------------------------------------------------------

    def get_luminance_value(self) -> float:
        """
        APEX brightness value Bv.

        BrightnessValue when recorded, otherwise Av + Tv - Sv.

        Raises:
            InsufficientDataError: If neither path has the tags it needs
        """
        brightness = self.lookup(ExifTag.BRIGHTNESS_VALUE, float)
        if brightness is not None:
            return brightness

        try:
            aperture_value = self.get_aperture_value()
            time_value = self.get_time_value()
            film_speed_value = self.get_film_speed_value()
        except TagNotFoundError as e:
            raise InsufficientDataError("brightness value") from e

        return aperture_value + time_value - film_speed_value

    def get_average_luminance(self) -> float:
        """
        Average scene luminance B = F**2 * K / (t * S).

        Raises:
            InsufficientDataError: If f-number, exposure time or ISO is unavailable
        """
        try:
            f_number = self.get_f_number()
            exposure_time = self.get_exposure_time()
            iso = self.get_iso()
        except TagNotFoundError as e:
            raise InsufficientDataError("average scene luminance") from e

        if exposure_time <= 0:
            raise InvalidTagValueError(ExifTag.EXPOSURE_TIME, f"{exposure_time} is not positive")
        if iso <= 0:
            raise InvalidTagValueError(self._iso_tag(), f"{iso} is not positive")

        return (f_number * f_number * REFLECTED_LIGHT_CONSTANT) / (exposure_time * iso)

    # ------------------------------------------------------------------
    # File layout
    # ------------------------------------------------------------------

    def get_thumbnail_location(self) -> int:
        """Absolute file offset of the embedded JPEG thumbnail."""
        offset = self.query(ExifTag.THUMBNAIL_OFFSET, int)
        return offset + self._store.exif_offset

    def to_dict(self) -> Dict[str, Optional[Union[str, float, int]]]:
        """
        Every derived quantity keyed by name, None where it cannot be derived.
        """
        result = {}
        for name, accessor in _SUMMARY_ACCESSORS.items():
            try:
                result[name] = accessor(self)
            except ExifError as e:
                logger.debug("%s unavailable for %s: %s", name, self._store.source, e)
                result[name] = None
        return result

    def __repr__(self) -> str:
        return f"ExifDerivedView({self._store!r})"


def _log2_positive(tag: ExifTag, value: float) -> float:
    if value <= 0:
        raise InvalidTagValueError(tag, f"{value} is not positive")
    return math.log2(value)


def _pow2(tag: ExifTag, exponent: float) -> float:
    try:
        return 2.0 ** exponent
    except OverflowError as e:
        raise InvalidTagValueError(tag, f"{exponent} is out of range") from e


_SUMMARY_ACCESSORS: Dict[str, Callable[[ExifDerivedView], Union[str, float, int]]] = {
    "make": ExifDerivedView.get_make,
    "model": ExifDerivedView.get_model,
    "f_number": ExifDerivedView.get_f_number,
    "exposure_time": ExifDerivedView.get_exposure_time,
    "iso": ExifDerivedView.get_iso,
    "aperture_value": ExifDerivedView.get_aperture_value,
    "time_value": ExifDerivedView.get_time_value,
    "exposure_value": ExifDerivedView.get_exposure_value,
    "film_speed_value": ExifDerivedView.get_film_speed_value,
    "luminance_value": ExifDerivedView.get_luminance_value,
    "average_luminance": ExifDerivedView.get_average_luminance,
    "focal_length_35mm_equiv": ExifDerivedView.get_focal_length_35mm_equiv,
    "thumbnail_location": ExifDerivedView.get_thumbnail_location,
}
