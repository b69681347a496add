"""
Immutable store of raw EXIF tag values.

A TagStore is what the reader produces and what ExifDerivedView consumes.
It maps ExifTag to a single value (int, float or str) and remembers the
absolute file offset of the TIFF header the EXIF offsets are relative to.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Type, Union

from exif_view.models.enums import ExifTag

logger = logging.getLogger(__name__)

TagValue = Union[int, float, str]


class TagStore:
    """
    Read-only mapping from ExifTag to TagValue.

    Attributes:
        exif_offset: Absolute file offset of the EXIF TIFF header
        source: Path the tags were read from, if any
    """

    def __init__(
        self,
        values: Mapping[Union[ExifTag, int], TagValue],
        exif_offset: int = 0,
        source: Optional[Path] = None,
    ):
        tags: Dict[ExifTag, TagValue] = {}
        for key, value in values.items():
            tag = ExifTag.from_value(int(key))
            if tag is None:
                logger.debug("Dropping unknown EXIF tag 0x%04X", int(key))
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float, str)):
                logger.debug("Dropping %s with unsupported value type %s", tag.label, type(value))
                continue
            tags[tag] = value

        self._tags = MappingProxyType(tags)
        self.exif_offset = exif_offset
        self.source = source

    def lookup(self, tag: ExifTag, kind: Type = float) -> Optional[TagValue]:
        """
        Look up a tag as a given type.

        Ints read as floats; floats read as ints only when integral.
        Text only reads as text.

        Args:
            tag: Tag to look up
            kind: One of int, float or str

        Returns:
            The value converted to kind, or None if absent or not representable
        """
        value = self._tags.get(tag)
        if value is None:
            return None

        if kind is str:
            return value if isinstance(value, str) else None
        if isinstance(value, str):
            return None
        if kind is float:
            return float(value)
        if kind is int:
            if isinstance(value, int):
                return value
            return int(value) if value.is_integer() else None

        raise TypeError(f"Unsupported lookup type: {kind!r}")

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __iter__(self) -> Iterator[ExifTag]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return f"TagStore({len(self._tags)} tags, exif_offset={self.exif_offset}, source={self.source})"

    def to_dict(self) -> Dict[str, TagValue]:
        """Raw values keyed by tag label."""
        return {tag.label: value for tag, value in self._tags.items()}
