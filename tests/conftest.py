"""Pytest configuration for header-tool tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Ensure the src directory is importable during tests."""
    root = Path(__file__).resolve().parents[1]
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for key in ("HEADERTOOL_ENV", "HEADERTOOL_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
