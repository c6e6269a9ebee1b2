"""Recursive directory copy used for skill directories."""

from __future__ import annotations

import shutil
from pathlib import Path


def copy_tree(source: Path, destination: Path) -> list[Path]:
    """Copy every file under *source* into *destination*, overwriting same-named files.

    *destination* is always created, even when *source* does not exist.
    Files already in *destination* that have no counterpart in *source* are
    left alone. Returns the destination paths written.
    """
    destination.mkdir(parents=True, exist_ok=True)
    if not source.is_dir():
        return []

    written: list[Path] = []
    for entry in sorted(source.iterdir()):
        target = destination / entry.name
        if entry.is_dir():
            written.extend(copy_tree(entry, target))
        else:
            shutil.copyfile(entry, target)
            written.append(target)
    return written


def count_subdirectories(path: Path) -> int:
    if not path.is_dir():
        return 0
    return sum(1 for entry in path.iterdir() if entry.is_dir())
