"""Test configuration helpers."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_src_on_path() -> None:
    src = Path(__file__).resolve().parent.parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


_ensure_src_on_path()


class ScriptedRandom:
    """Random source that replays a fixed list of values."""

    def __init__(self, values):
        self._values = list(values)
        self.calls = []

    def randrange(self, start, stop):
        self.calls.append((start, stop))
        return self._values.pop(0)


@pytest.fixture
def scripted_random():
    return ScriptedRandom
