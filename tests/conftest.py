from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Tuple

import pytest


# Ensure src/ is importable for all tests (CI and local)
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for p in (ROOT, SRC):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


def pytest_collection_modifyitems(config, items):
    """Default all tests to 'unit' unless explicitly marked otherwise."""
    for item in items:
        marks = {m.name for m in item.iter_markers()}
        if not ("integ" in marks or "smoke" in marks or "unit" in marks):
            item.add_marker(pytest.mark.unit)


class RecordingDiagnostics:
    """Collects diagnostic calls instead of logging them."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, str]] = []

    def __call__(self, message: str, level: str, source: str) -> None:
        self.records.append((message, level, source))

    def messages(self, level: str | None = None) -> List[str]:
        return [m for m, lvl, _ in self.records if level is None or lvl == level]


@pytest.fixture
def diagnostics() -> RecordingDiagnostics:
    return RecordingDiagnostics()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("CUSTOM_EVENTS_THROW_ERRORS", raising=False)
