# tests/conftest.py

from __future__ import annotations
from pathlib import Path

import pytest


@pytest.fixture
def write_file():
    """Return a helper that writes bytes to a path, creating parent dirs."""
    def _write(path: Path, data: bytes) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path
    return _write
