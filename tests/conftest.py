"""Shared pytest fixtures for hue_actions tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from hue_actions.tasks import ClockForTesting

from tests.helpers import RecordingSetter


@pytest.fixture
def clock() -> ClockForTesting:
    """Fake clock starting at t=0."""
    return ClockForTesting(0.0)


@pytest.fixture
def setter(clock: ClockForTesting) -> RecordingSetter:
    """Setter that records every call and never fails."""
    return RecordingSetter(clock)


@pytest.fixture
def make_setter(clock: ClockForTesting):
    """Factory for recording setters that fail with a given error."""

    def _make(error: Exception | None = None, fail_on: set[int] | None = None) -> RecordingSetter:
        return RecordingSetter(clock, error=error, fail_on=fail_on)

    return _make


@pytest.fixture
def write_yaml(tmp_path: Path):
    """Write text to a YAML file under tmp_path and return its path."""

    def _write(text: str, name: str = "action.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write
