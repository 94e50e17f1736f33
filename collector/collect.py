# collector/collect.py

"""
Walk a source tree, sniff each file's signature and copy JPEG/PNG images
into one flat destination directory without overwriting anything there.
"""
from __future__ import annotations
import shutil
from pathlib import Path
from typing import Iterator

from .model import CollectResult, CollectRow, ImageKind
from .naming import canonical_name, unique_destination
from .signature import classify, read_prefix
from .walk import iter_files

_REASONS = {
    ImageKind.JPEG: "jpeg-soi",
    ImageKind.PNG: "png-signature",
    ImageKind.UNKNOWN: "no-signature",
}


def ensure_destination(dest_root: Path) -> Path:
    """Create the destination directory (and parents) if needed.

    Raises:
        OSError: If it cannot be created. Callers treat this as fatal.
    """
    dest_root.mkdir(parents=True, exist_ok=True)
    return dest_root


def copy_file(src: Path, dest_dir: Path, name: str) -> Path:
    """Copy `src` into `dest_dir` under `name`, or a `_N` variant if taken.

    The target is created with exclusive mode, so an existing file is never
    truncated; if the name is grabbed between the check and the create, a new
    name is resolved. A partially written target is left behind on failure.

    Returns:
        Path: Where the file was written.
    """
    with src.open("rb") as fin:
        while True:
            target = unique_destination(dest_dir, name)
            try:
                fout = target.open("xb")
            except FileExistsError:
                continue
            with fout:
                shutil.copyfileobj(fin, fout)
            return target


def _size_of(fp: Path) -> int:
    try:
        return fp.stat().st_size
    except OSError:
        return 0


def _error_row(fp: Path, exc: Exception, reason: str, new_path: str = "") -> CollectRow:
    return CollectRow(
        path=str(fp),
        size_bytes=_size_of(fp),
        current_ext=fp.suffix[1:].lower() if fp.suffix else "",
        detected_ext="",
        action="error",
        new_path=new_path,
        error=f"{type(exc).__name__}: {exc}",
        reason=reason,
    )


def process_file(fp: Path, dest_root: Path) -> CollectRow:
    """Classify a single file and copy it if it is an image.

    Per-file failures are returned as rows with `action="error"`; they never raise.
    """
    current_ext = fp.suffix[1:].lower() if fp.suffix else ""

    try:
        head = read_prefix(fp)
    except OSError as exc:
        return _error_row(fp, exc, "read-error")

    kind = classify(head)
    if kind is ImageKind.UNKNOWN:
        return CollectRow(
            path=str(fp),
            size_bytes=_size_of(fp),
            current_ext=current_ext,
            detected_ext="",
            action="skipped",
            new_path="",
            error="",
            reason=_REASONS[kind],
        )

    name = canonical_name(fp, kind)
    try:
        target = copy_file(fp, dest_root, name)
    except OSError as exc:
        row = _error_row(fp, exc, "copy-error", new_path=str(dest_root / name))
        row.detected_ext = kind.value
        return row

    return CollectRow(
        path=str(fp),
        size_bytes=_size_of(fp),
        current_ext=current_ext,
        detected_ext=kind.value,
        action="copied",
        new_path=str(target),
        error="",
        reason=_REASONS[kind],
    )


def iter_collect(source_root: Path, dest_root: Path) -> Iterator[CollectRow]:
    """Lazily process every file under `source_root`, one row per entry.

    `dest_root` must already exist (see `ensure_destination`). When it lies
    inside the source tree it is left out of the walk.

    Raises:
        OSError: If the walk cannot start on `source_root`.
    """
    for fp, walk_err in iter_files(source_root, prune=dest_root):
        if walk_err is not None:
            yield _error_row(fp, walk_err, "walk-error")
            continue
        yield process_file(fp, dest_root)


def collect(source_root: Path, dest_root: Path) -> CollectResult:
    """Run a whole collection and return the copy count and recoverable errors."""
    result = CollectResult()
    for row in iter_collect(source_root, dest_root):
        result.rows.append(row)
        if row.action == "copied":
            result.copied += 1
        elif row.action == "error":
            result.errors.append(row)
    return result
