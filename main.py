# main.py

"""
Orchestrator: read params (JSON + CLI), create the destination, walk the
source tree, copy JPEG/PNG images by signature, optionally write a CSV report.
"""
from __future__ import annotations
import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from collector.collect import ensure_destination, iter_collect
from collector.model import CollectRow
from collector.report import write_csv

DEFAULT_DEST = "collected_images"


def load_config(path: Path | None) -> Dict[str, Any]:
    """Load configuration from a JSON file.

    Args:
        path (Path | None): Path to the JSON configuration file.

    Returns:
        Dict[str, Any]: Configuration dictionary. Empty if no file is provided or read fails.
    """
    if not path:
        return {}
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as exc:
        print(f"[WARN] Failed to read config {path}: {exc}", file=sys.stderr)
        return {}


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments.

    Returns:
        argparse.Namespace: Parsed command-line arguments.
    """
    p = argparse.ArgumentParser(
        description="Copy every JPEG/PNG under a directory (detected by content) into one flat folder."
    )
    p.add_argument("source", nargs="?", help="Directory tree to scan.")
    p.add_argument("dest", nargs="?", help=f"Destination directory (default: {DEFAULT_DEST}).")
    p.add_argument("--report", type=str, help="Optional CSV report of every visited file.")
    p.add_argument("--config", type=str, help="Optional JSON config (arguments override).")
    return p.parse_args(argv)


def _get_effective_config(args: argparse.Namespace) -> Tuple[Dict[str, Any], Path]:
    """Load CLI + JSON configuration, giving precedence to CLI arguments."""
    script_dir = Path(__file__).parent
    default_config_path = script_dir / "params.json"
    config_path = Path(args.config) if args.config else default_config_path
    cfg = load_config(config_path if config_path.exists() else None)
    return cfg, config_path


def _resolve_paths(
    args: argparse.Namespace,
    cfg: Dict[str, Any],
    config_path: Path
) -> Tuple[Path, Path, Path | None]:
    """Resolve and validate source, destination and report paths."""
    source = args.source or cfg.get("source", "")
    if not source:
        print(
            f"[ERR] Usage: image-collector <source-directory> [destination-directory] "
            f"(or set 'source' in {config_path.name}).",
            file=sys.stderr,
        )
        raise SystemExit(2)
    source_path = Path(source)
    if not source_path.exists():
        print(f"[ERR] Source not found: {source_path}", file=sys.stderr)
        raise SystemExit(2)

    dest_path = Path(args.dest or cfg.get("dest", DEFAULT_DEST))
    report = args.report or cfg.get("report")
    report_path = Path(report) if report else None
    return source_path, dest_path, report_path


def _print_row(row: CollectRow) -> None:
    """Print progress for one processed file; skipped files stay silent."""
    if row.action == "copied":
        print(f"Copied {row.path} -> {row.new_path}")
    elif row.action == "error":
        print(f"[WARN] {row.reason} {row.path}: {row.error}", file=sys.stderr)


def _print_summary(rows: List[CollectRow], report_path: Path | None) -> None:
    """Print summary information to stdout."""
    copied = sum(1 for r in rows if r.action == "copied")
    skipped = sum(1 for r in rows if r.action == "skipped")
    errors = sum(1 for r in rows if r.action == "error")
    print(f"[INFO] Done. Scanned: {len(rows)} | Copied: {copied} | Skipped: {skipped} | Errors: {errors}")
    if report_path is not None:
        print(f"[INFO] Report: {report_path.resolve()}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main orchestration function.

    Per-file errors are reported but do not change the exit code.

    Returns:
        int: Exit code.
    """
    args = parse_args(argv)
    cfg, config_path = _get_effective_config(args)
    source_path, dest_path, report_path = _resolve_paths(args, cfg, config_path)

    try:
        ensure_destination(dest_path)
    except OSError as exc:
        print(f"[ERR] Cannot create destination {dest_path}: {exc}", file=sys.stderr)
        return 1

    rows: List[CollectRow] = []
    print(f"[INFO] Scanning: {source_path} -> {dest_path}")
    try:
        for row in iter_collect(source_path, dest_path):
            _print_row(row)
            rows.append(row)
    except OSError as exc:
        print(f"[ERR] Cannot walk {source_path}: {exc}", file=sys.stderr)
        return 2

    if report_path is not None:
        write_csv(report_path, rows)
    _print_summary(rows, report_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
