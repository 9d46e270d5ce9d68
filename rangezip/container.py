"""Zip-longest aggregation over ranges, iterables and plain values."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from itertools import zip_longest
from typing import Any, Optional
import logging

from rangezip.config import RangeSettings, current_settings
from rangezip.point import Point
from rangezip.range import NumberRange, Range

logger = logging.getLogger("rangezip.container")

_UNSET = object()


def _is_drainable(value: Any) -> bool:
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    if callable(getattr(value, "iter_values", None)):
        return True
    return isinstance(value, Iterable) or hasattr(value, "__next__")


def _drain(value: Any) -> list[Any]:
    if callable(getattr(value, "iter_values", None)):
        return list(value.iter_values())
    if isinstance(value, Iterable):
        return list(value)
    items = []
    while True:
        try:
            items.append(next(value))
        except StopIteration:
            return items


def normalize_source(source: Any) -> Any:
    """Reduce a source to a concrete list, or to the scalar it stands for."""
    if isinstance(source, Point):
        source = source.effective_value()
    if _is_drainable(source):
        return _drain(source)
    return source


class Container:
    """Collects sources and zips them row-major to the longest one.

    Sources shorter than the longest are padded with the fill value (``None``
    unless configured otherwise); a scalar source fills only the first row.
    """

    def __init__(self, settings: Optional[RangeSettings] = None):
        self.sources: list[Any] = []
        self.value: Optional[list[list[Any]]] = None
        self._settings = settings

    @property
    def settings(self) -> RangeSettings:
        if self._settings is not None:
            return self._settings
        return current_settings()

    def add_sources(self, *items: Any) -> "Container":
        for item in items:
            if isinstance(item, (Range, Point)):
                self.sources.append(item)
            else:
                self.sources.append(Point.stop(0, [item]))
        return self

    def add_number_range(self, start: Any, end: Any) -> "Container":
        self.sources.append(NumberRange(start, end, settings=self._settings))
        return self

    def zip(self, fill_value: Any = _UNSET) -> "Container":
        if fill_value is _UNSET:
            fill_value = self.settings.fill_value

        self.sources[:] = [normalize_source(source) for source in self.sources]
        columns = [source if isinstance(source, list) else [source] for source in self.sources]
        self.value = [list(row) for row in zip_longest(*columns, fillvalue=fill_value)]

        logger.debug("Zipped %d sources into %d rows", len(columns), len(self.value))
        return self

    def __repr__(self) -> str:
        return f"Container(sources={self.sources!r})"
