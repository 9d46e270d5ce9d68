"""Stops and steps: the addressable locations of a range chain."""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Sized
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class PointKind(str, Enum):
    """Role of a point inside a chain."""

    STOP = "stop"
    STEP = "step"


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _source_is_empty(source: Any) -> bool:
    if source is None:
        return True
    if isinstance(source, Sized):
        return len(source) == 0
    return not source


@dataclass(frozen=True)
class Point:
    """A literal value, or an index into an attached source collection.

    A ``STOP`` always emits its own resolved value. A ``STEP`` paired with an
    adjacent ``STEP`` bounds a derived run instead.
    """

    kind: PointKind
    value: Any
    source: Any = None

    @classmethod
    def stop(cls, value: Any, source: Any = None) -> "Point":
        return cls(PointKind.STOP, value, source)

    @classmethod
    def step(cls, value: Any, source: Any = None) -> "Point":
        return cls(PointKind.STEP, value, source)

    @property
    def is_step(self) -> bool:
        return self.kind is PointKind.STEP

    @property
    def is_stop(self) -> bool:
        return self.kind is PointKind.STOP

    @property
    def has_source(self) -> bool:
        return not _source_is_empty(self.source)

    def lookup(self, index: Any) -> Optional[Any]:
        """Resolve ``index`` against the source; ``None`` when it cannot."""
        if not self.has_source:
            return None
        source = self.source
        at = getattr(source, "at", None)
        if callable(at):
            return at(index)
        try:
            if isinstance(source, Mapping):
                return source.get(index)
            if isinstance(source, Sequence):
                if _is_index(index) and 0 <= index < len(source):
                    return source[index]
                return None
            return source[index]
        except (IndexError, KeyError, TypeError):
            return None

    def effective_value(self) -> Optional[Any]:
        if self.has_source:
            return self.lookup(self.value)
        return self.value

    def __repr__(self) -> str:
        name = "Step" if self.is_step else "Stop"
        if self.source is None:
            return f"{name}({self.value!r})"
        return f"{name}({self.value!r}, source={self.source!r})"
