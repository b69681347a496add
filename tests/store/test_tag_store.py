"""Unit tests for store.tag_store module."""

from pathlib import Path

import pytest

from exif_view.models.enums import ExifTag
from exif_view.store.tag_store import TagStore


class TestTagStoreConstruction:
    """Tests for building a TagStore."""

    def test_accepts_enum_and_int_keys(self):
        store = TagStore({ExifTag.F_NUMBER: 4.0, 0x010F: "Canon"})

        assert ExifTag.F_NUMBER in store
        assert ExifTag.MAKE in store
        assert len(store) == 2

    def test_drops_unknown_tags(self):
        store = TagStore({0x9999: 1, ExifTag.F_NUMBER: 4.0})

        assert len(store) == 1
        assert list(store) == [ExifTag.F_NUMBER]

    @pytest.mark.parametrize("value", [b"\x00\x01", (1, 2), None, True])
    def test_drops_unsupported_values(self, value):
        store = TagStore({ExifTag.F_NUMBER: value})
        assert len(store) == 0

    def test_defaults(self):
        store = TagStore({})

        assert store.exif_offset == 0
        assert store.source is None

    def test_offset_and_source(self):
        store = TagStore({}, exif_offset=30, source=Path("photo.jpg"))

        assert store.exif_offset == 30
        assert store.source == Path("photo.jpg")

    def test_copies_input_mapping(self):
        values = {ExifTag.F_NUMBER: 4.0}
        store = TagStore(values)
        values[ExifTag.F_NUMBER] = 8.0

        assert store.lookup(ExifTag.F_NUMBER) == 4.0


class TestTagStoreLookup:
    """Tests for TagStore.lookup()."""

    def test_absent(self):
        assert TagStore({}).lookup(ExifTag.F_NUMBER, float) is None

    def test_float_from_float(self):
        assert TagStore({ExifTag.F_NUMBER: 2.8}).lookup(ExifTag.F_NUMBER, float) == 2.8

    def test_float_from_int(self):
        value = TagStore({ExifTag.ISO_SPEED_RATINGS: 400}).lookup(ExifTag.ISO_SPEED_RATINGS, float)

        assert value == 400.0
        assert isinstance(value, float)

    def test_int_from_int(self):
        assert TagStore({ExifTag.THUMBNAIL_OFFSET: 1200}).lookup(ExifTag.THUMBNAIL_OFFSET, int) == 1200

    def test_int_from_integral_float(self):
        value = TagStore({ExifTag.FOCAL_PLANE_RESOLUTION_UNIT: 2.0}).lookup(
            ExifTag.FOCAL_PLANE_RESOLUTION_UNIT, int
        )

        assert value == 2
        assert isinstance(value, int)

    def test_int_from_fractional_float(self):
        assert TagStore({ExifTag.F_NUMBER: 2.8}).lookup(ExifTag.F_NUMBER, int) is None

    def test_str_from_str(self):
        assert TagStore({ExifTag.MAKE: "Nikon"}).lookup(ExifTag.MAKE, str) == "Nikon"

    def test_str_is_not_a_number(self):
        store = TagStore({ExifTag.MAKE: "Nikon"})

        assert store.lookup(ExifTag.MAKE, float) is None
        assert store.lookup(ExifTag.MAKE, int) is None

    def test_number_is_not_a_str(self):
        assert TagStore({ExifTag.F_NUMBER: 4.0}).lookup(ExifTag.F_NUMBER, str) is None

    def test_default_kind_is_float(self):
        assert TagStore({ExifTag.ISO_SPEED_RATINGS: 100}).lookup(ExifTag.ISO_SPEED_RATINGS) == 100.0

    def test_unsupported_kind(self):
        with pytest.raises(TypeError):
            TagStore({ExifTag.F_NUMBER: 4.0}).lookup(ExifTag.F_NUMBER, bytes)


class TestTagStoreToDict:
    """Tests for TagStore.to_dict()."""

    def test_keyed_by_label(self):
        store = TagStore({ExifTag.F_NUMBER: 4.0, ExifTag.MAKE: "Canon"})
        assert store.to_dict() == {"FNumber": 4.0, "Make": "Canon"}

    def test_repr(self):
        assert "2 tags" in repr(TagStore({ExifTag.F_NUMBER: 4.0, ExifTag.MAKE: "Canon"}))
