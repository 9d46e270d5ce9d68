from __future__ import annotations

import pytest
from pydantic import ValidationError

from rangezip.config import (
    DEFAULT_MAX_RUN_LENGTH,
    MAX_RUN_LENGTH_ENV,
    RangeSettings,
    current_settings,
    load_settings,
    settings_scope,
)
from rangezip.error_msg import RunLengthError
from rangezip.range import NumberRange


@pytest.mark.unit
def test_defaults():
    settings = RangeSettings()
    assert settings.max_run_length == DEFAULT_MAX_RUN_LENGTH
    assert settings.fill_value is None
    assert current_settings() == settings


@pytest.mark.unit
def test_validation():
    with pytest.raises(ValidationError):
        RangeSettings(max_run_length=0)
    with pytest.raises(ValidationError):
        RangeSettings(max_run_length="many")


@pytest.mark.unit
def test_load_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(MAX_RUN_LENGTH_ENV, " 2 ")
    assert load_settings().max_run_length == 2
    with pytest.raises(RunLengthError):
        NumberRange(0, 3).collect()

    monkeypatch.setenv(MAX_RUN_LENGTH_ENV, "lots")
    with pytest.raises(ValueError):
        load_settings()


@pytest.mark.unit
def test_scope_overrides_and_restores():
    scoped = RangeSettings(max_run_length=7, fill_value=0)
    with settings_scope(scoped) as active:
        assert active is scoped
        assert current_settings() is scoped
        with settings_scope(RangeSettings(max_run_length=3)):
            assert current_settings().max_run_length == 3
        assert current_settings() is scoped
    assert current_settings() == RangeSettings()
