"""Top-level pytest configuration for errpolicy."""

from __future__ import annotations

import os
from typing import Any

import pytest

from errpolicy.defaults import reset_defaults
from errpolicy.logging import reset_logging


class Recorder:
    """Callable standing in for a log or print function."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> None:
        self.calls.append(args)

    @property
    def called(self) -> bool:
        return bool(self.calls)


@pytest.fixture(autouse=True)
def clean_state(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from the environment and from each other's defaults.

    Package records propagate to the root logger so that ``caplog`` sees them.
    """
    for key in list(os.environ):
        if key.startswith("ERRPOLICY_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("ERRPOLICY_PROPAGATE", "true")
    reset_defaults()
    reset_logging()
    yield
    reset_defaults()
    reset_logging()


@pytest.fixture
def log_recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def print_recorder() -> Recorder:
    return Recorder()
