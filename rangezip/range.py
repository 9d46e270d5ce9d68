"""Ranges: chains of points materialized into lazy sequences."""

from __future__ import annotations

from enum import IntEnum
from itertools import islice
from typing import Any, Iterable, Iterator, Optional
import logging

from rangezip.config import RangeSettings, current_settings
from rangezip.error_msg import RunLengthError
from rangezip.point import Point
from rangezip.sequence import SequenceValue

logger = logging.getLogger("rangezip.range")


class Direction(IntEnum):
    """Order in which a chain's points are scanned."""

    FORWARD = 1
    BACKWARD = -1


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _as_int(value: Any, *, name: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise ValueError(f"{name} must be an integer, got float: {value!r}")
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise ValueError(f"{name} must be an integer, got string: {value!r}") from exc
    raise ValueError(f"{name} must be an integer, got: {type(value).__name__}")


class Range:
    """An ordered chain of stops and steps.

    Iterating a range interprets each point together with its successor in
    scan order:

    - two adjacent steps derive the run from the first effective value
      toward the second, end excluded, resolved through the first step's
      source when it has one;
    - any other point emits its own effective value, except a trailing step
      that closes a step pair, which only bounds the run before it.

    Each call to ``iter()`` starts from the beginning of the chain.
    """

    def __init__(
        self,
        points: Iterable[Point] = (),
        direction: Direction = Direction.FORWARD,
        settings: Optional[RangeSettings] = None,
    ):
        self._points: list[Point] = []
        for point in points:
            if not isinstance(point, Point):
                raise TypeError(f"Range points must be Point instances, got: {type(point).__name__}")
            self._points.append(point)
        self.direction = Direction(direction)
        self._settings = settings

    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    @property
    def settings(self) -> RangeSettings:
        if self._settings is not None:
            return self._settings
        return current_settings()

    def append_step(self, value: Any, source: Any = None) -> "Range":
        self._points.append(Point.step(value, source))
        return self

    def append_stop(self, value: Any, source: Any = None) -> "Range":
        self._points.append(Point.stop(value, source))
        return self

    def _scan_order(self) -> list[Point]:
        if self.direction is Direction.BACKWARD:
            return list(reversed(self._points))
        return list(self._points)

    def __iter__(self) -> Iterator[Any]:
        chain = self._scan_order()
        limit = self.settings.max_run_length
        for position, current in enumerate(chain):
            following = chain[position + 1] if position + 1 < len(chain) else None
            previous = chain[position - 1] if position > 0 else None

            if current.is_step and following is not None and following.is_step:
                yield from _derive_run(current, following, limit)
                continue

            # Exclusive end of the run derived from the previous pair.
            if following is None and current.is_step and previous is not None and previous.is_step:
                continue

            yield current.effective_value()

    def collect(self) -> list[Any]:
        return list(self)

    def bounds(self) -> tuple[Optional[Any], Optional[Any]]:
        if not self._points:
            return (None, None)
        return (self._points[0].effective_value(), self._points[-1].effective_value())

    def at(self, index: Any) -> Optional[Any]:
        """Return the ``index``-th emitted value, or ``None`` past the end."""
        if not _is_index(index) or index < 0:
            return None
        return next(islice(iter(self), index, None), None)

    def contains(self, value: Any) -> bool:
        return any(item == value for item in self)

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def sequence(self) -> SequenceValue:
        return SequenceValue(lambda: iter(self))

    def __bool__(self) -> bool:
        return bool(self._points)

    def __repr__(self) -> str:
        points = ", ".join(repr(point) for point in self._points)
        return f"{type(self).__name__}([{points}], direction={self.direction.name})"


def _derive_run(current: Point, following: Point, limit: int) -> Iterator[Any]:
    start = current.effective_value()
    end = following.effective_value()
    if not (_is_index(start) and _is_index(end)) or start == end:
        return
    if abs(end - start) > limit:
        raise RunLengthError(start, end, limit)

    step = 1 if end > start else -1
    logger.debug("Deriving run %d -> %d (step %d)", start, end, step)
    if current.has_source:
        for index in range(start, end, step):
            yield current.lookup(index)
    else:
        yield from range(start, end, step)


class NumberRange(Range):
    """Half-open integer run from ``start`` toward ``end``.

    ``end`` is never emitted; the run walks downwards when ``end < start``
    and is empty when they are equal.

    ``direction`` is the scan order of the two steps and is always
    ``FORWARD``; the walking direction, ``sign(end - start)``, is ``step``.
    """

    def __init__(self, start: Any, end: Any, settings: Optional[RangeSettings] = None):
        self.start = _as_int(start, name="start")
        self.end = _as_int(end, name="end")
        super().__init__([Point.step(self.start), Point.step(self.end)], settings=settings)

    @property
    def step(self) -> int:
        if self.end == self.start:
            return 0
        return 1 if self.end > self.start else -1

    def append_step(self, value: Any, source: Any = None) -> "Range":
        raise TypeError("NumberRange has a fixed pair of steps")

    def append_stop(self, value: Any, source: Any = None) -> "Range":
        raise TypeError("NumberRange has a fixed pair of steps")

    def bounds(self) -> tuple[int, int]:
        return (self.start, self.end)

    def __len__(self) -> int:
        return abs(self.end - self.start)

    def __bool__(self) -> bool:
        return self.start != self.end

    def at(self, index: Any) -> Optional[int]:
        if not _is_index(index) or not 0 <= index < len(self):
            return None
        return self.start + index * self.step

    def contains(self, value: Any) -> bool:
        if not _is_index(value):
            return False
        if self.step > 0:
            return self.start <= value < self.end
        if self.step < 0:
            return self.end < value <= self.start
        return False

    def sequence(self) -> SequenceValue:
        return SequenceValue(lambda: iter(self), total_size=len(self))

    def __repr__(self) -> str:
        return f"NumberRange({self.start}, {self.end})"
