# collector/signature.py

from __future__ import annotations
from pathlib import Path

from .model import ImageKind

# Longest prefix any rule needs. Every file is read this far, whatever it turns out to be.
PREFIX_LEN = 8

JPEG_SOI = b"\xFF\xD8"
PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def read_prefix(path: Path, size: int = PREFIX_LEN) -> bytes:
    """Read up to `size` bytes from the start of a file.

    A file shorter than `size` yields what it has. OS errors propagate.
    """
    with path.open("rb") as f:
        return f.read(size)


def _is_jpeg(head: bytes) -> bool:
    return len(head) >= 2 and head[:2] == JPEG_SOI


def _is_png(head: bytes) -> bool:
    return len(head) >= 8 and head[:8] == PNG_SIGNATURE


def classify(prefix: bytes) -> ImageKind:
    """Classify a byte prefix as JPEG, PNG or UNKNOWN."""
    if _is_jpeg(prefix):
        return ImageKind.JPEG
    if _is_png(prefix):
        return ImageKind.PNG
    return ImageKind.UNKNOWN
