# collector/walk.py

from __future__ import annotations
import os
from pathlib import Path
from typing import Iterator, List, Optional, Tuple


def iter_files(root: Path, prune: Optional[Path] = None) -> Iterator[Tuple[Path, Optional[OSError]]]:
    """Iterate over all files under a path, recursively if it's a directory.

    Directories are visited in lexical order and never yielded themselves.
    A symlink to a directory is yielded like a file, not followed.
    A directory that cannot be listed is yielded as `(path, error)` and the
    walk goes on; failing to list `root` itself is raised instead.

    Args:
        root (Path): File or directory to scan.
        prune (Path | None): Directory to leave out of the walk (e.g. the
            destination when it sits inside the source tree).

    Yields:
        tuple[Path, OSError | None]: Each file found, or an inaccessible path
        together with the error.
    """
    if not root.is_dir():
        yield root, None
        return

    pending: List[OSError] = []
    root_key = os.path.abspath(root)
    prune_key = os.path.realpath(prune) if prune is not None else None

    def _onerror(exc: OSError) -> None:
        if exc.filename is not None and os.path.abspath(exc.filename) == root_key:
            raise exc
        pending.append(exc)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_onerror):
        while pending:
            exc = pending.pop(0)
            yield Path(exc.filename or dirpath), exc

        if prune_key is not None:
            dirnames[:] = [d for d in dirnames if os.path.realpath(os.path.join(dirpath, d)) != prune_key]
        # symlinked directories are not descended into but still visited as entries
        links = [d for d in dirnames if os.path.islink(os.path.join(dirpath, d))]
        dirnames[:] = sorted(d for d in dirnames if d not in links)

        for name in sorted(filenames + links):
            yield Path(dirpath) / name, None

    while pending:
        exc = pending.pop(0)
        yield Path(exc.filename or root), exc
