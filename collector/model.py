# collector/model.py

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ImageKind(Enum):
    """Classification of a byte prefix. Value is the canonical extension (no dot)."""
    JPEG = "jpg"
    PNG = "png"
    UNKNOWN = ""


@dataclass
class CollectRow:
    """Represents one visited file (also a row in the CSV report)."""
    path: str
    size_bytes: int
    current_ext: str
    detected_ext: str
    action: str       # one of: copied | skipped | error
    new_path: str
    error: str
    reason: str


@dataclass
class CollectResult:
    """Outcome of a whole collection run."""
    copied: int = 0
    errors: List[CollectRow] = field(default_factory=list)
    rows: List[CollectRow] = field(default_factory=list)
