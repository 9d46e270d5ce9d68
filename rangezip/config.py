"""Runtime settings for range derivation and zipping."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator
import os

from pydantic import BaseModel, ConfigDict, Field

MAX_RUN_LENGTH_ENV = "RANGEZIP_MAX_RUN_LENGTH"
DEFAULT_MAX_RUN_LENGTH = 1_000_000


class RangeSettings(BaseModel):
    """Limits and defaults applied while ranges are iterated and zipped."""

    model_config = ConfigDict(frozen=True)

    max_run_length: int = Field(default=DEFAULT_MAX_RUN_LENGTH, ge=1)
    fill_value: Any = None


_CURRENT_SETTINGS: ContextVar[RangeSettings | None] = ContextVar(
    "rangezip_settings",
    default=None,
)


def load_settings() -> RangeSettings:
    """Build settings from environment variables, falling back to defaults."""
    raw = os.environ.get(MAX_RUN_LENGTH_ENV, "").strip()
    if not raw:
        return RangeSettings()
    try:
        limit = int(raw)
    except ValueError as exc:
        raise ValueError(f"{MAX_RUN_LENGTH_ENV} must be an integer, got: {raw!r}") from exc
    return RangeSettings(max_run_length=limit)


def current_settings() -> RangeSettings:
    """Return the settings active in the current context."""
    settings = _CURRENT_SETTINGS.get()
    if settings is None:
        return load_settings()
    return settings


@contextmanager
def settings_scope(settings: RangeSettings) -> Iterator[RangeSettings]:
    """Temporarily install settings for the current context."""
    token = _CURRENT_SETTINGS.set(settings)
    try:
        yield settings
    finally:
        _CURRENT_SETTINGS.reset(token)
