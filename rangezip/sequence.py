"""Lazily iterable, restartable sequence with optional size hint."""

from __future__ import annotations

from itertools import islice
from typing import Any, Callable, Iterable, Iterator


class SequenceValue:
    """Lazily iterable sequence artifact with optional pagination hint.

    Every call to :meth:`iter_values` asks the factory for a new iterator, so
    the sequence can be walked any number of times.
    """

    def __init__(
        self,
        iterator_factory: Callable[[], Iterable[Any]],
        total_size: int | None = None,
    ):
        self._iterator_factory = iterator_factory
        self._total_size = total_size

    def iter_values(self) -> Iterator[Any]:
        return iter(self._iterator_factory())

    def __iter__(self) -> Iterator[Any]:
        return self.iter_values()

    def page(self, offset: int, limit: int) -> list[Any]:
        if offset < 0 or limit < 0:
            raise ValueError("offset and limit must be non-negative")
        return list(islice(self.iter_values(), offset, offset + limit))

    @property
    def total_size(self) -> int | None:
        return self._total_size

    def __repr__(self) -> str:
        return f"SequenceValue(total_size={self._total_size!r})"
