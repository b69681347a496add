"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Callable, Dict, Optional

import pytest
from PIL import ExifTags
from PIL import Image as PILImage

from exif_view.models.enums import ExifTag
from exif_view.store.tag_store import TagStore
from exif_view.view import ExifDerivedView


@pytest.fixture
def make_view() -> Callable[..., ExifDerivedView]:
    """Build an ExifDerivedView over an in-memory set of tags."""
    def _make_view(exif_offset: int = 0, **tags) -> ExifDerivedView:
        values = {ExifTag[name.upper()]: value for name, value in tags.items()}
        return ExifDerivedView(TagStore(values, exif_offset=exif_offset))
    return _make_view


@pytest.fixture
def focal_plane_tags() -> Dict[str, float]:
    """Focal plane geometry of a 101.6 x 76.2 mm sensor at 50mm."""
    return {
        "focal_length": 50.0,
        "pixel_x_dimension": 4000,
        "pixel_y_dimension": 3000,
        "focal_plane_x_resolution": 1000.0,
        "focal_plane_y_resolution": 1000.0,
        "focal_plane_resolution_unit": 2,
    }


@pytest.fixture
def write_jpeg(tmp_path: Path) -> Callable[..., Path]:
    """Write a small JPEG carrying the given IFD0 and Exif IFD tags."""
    def _write_jpeg(
        name: str = "IMG_1234.jpg",
        ifd0: Optional[Dict[int, object]] = None,
        exif_ifd: Optional[Dict[int, object]] = None,
    ) -> Path:
        path = tmp_path / name
        img = PILImage.new("RGB", (64, 48), color="red")
        exif = PILImage.Exif()
        for tag, value in (ifd0 or {}).items():
            exif[tag] = value
        if exif_ifd:
            exif[ExifTags.IFD.Exif] = dict(exif_ifd)
        img.save(path, exif=exif)
        return path
    return _write_jpeg
