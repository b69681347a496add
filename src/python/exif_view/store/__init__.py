"""Tag storage and file reading."""

from exif_view.store.reader import BACKENDS, locate_exif_offset, read_tag_store
from exif_view.store.tag_store import TagStore, TagValue

__all__ = [
    "BACKENDS",
    "TagStore",
    "TagValue",
    "locate_exif_offset",
    "read_tag_store",
]
