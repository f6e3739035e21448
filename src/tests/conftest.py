"""Test configuration ensuring src package discoverability & settings reset helpers."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]  # points to src/
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def reset_settings_cache():  # convenience for tests toggling env flags
    from utils.settings import get_settings
    get_settings.cache_clear()


class StubSource:
    """Alignment source returning canned text (or raising) instead of calling Pfam."""

    def __init__(self, text: str = "", exc: Exception | None = None):
        self.text = text
        self.exc = exc
        self.accessions = []

    def fetch_alignment(self, accession: str) -> str:
        self.accessions.append(accession)
        if self.exc is not None:
            raise self.exc
        return self.text


@pytest.fixture
def stub_source():
    return StubSource


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings_cache()
    yield
    reset_settings_cache()
