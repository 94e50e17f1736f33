# collector/naming.py

from __future__ import annotations
from pathlib import Path

from .model import ImageKind


def canonical_name(path: Path, kind: ImageKind) -> str:
    """Return the file's base name with its extension replaced by the one for `kind`.

    Whatever extension the source carries is dropped, matching or not:
    `holiday.dat` detected as PNG becomes `holiday.png`.
    A bare trailing dot counts as an empty extension: `photo.` becomes `photo.jpg`.
    """
    stem = path.name[:-1] if path.name.endswith(".") else path.stem
    return f"{stem}.{kind.value}"


def _taken(candidate: Path) -> bool:
    # dangling symlinks count as taken
    return candidate.exists() or candidate.is_symlink()


def unique_destination(dest_dir: Path, name: str) -> Path:
    """Return a path in `dest_dir` for `name` that does not exist yet.

    If `name` is taken, appends `_1`, `_2`, etc. before the extension
    until an unused name is found.

    Args:
        dest_dir (Path): Flat destination directory.
        name (str): Desired file name, e.g. `photo.jpg`.

    Returns:
        Path: First free candidate.
    """
    desired = Path(name)
    stem, suffix = desired.stem, desired.suffix
    candidate = dest_dir / name

    i = 1
    while _taken(candidate):
        candidate = dest_dir / f"{stem}_{i}{suffix}"
        i += 1
    return candidate
