"""Alternate file names for collision diversion.

Both helpers are pure: they take the set of names already present in the
destination directory and return the first free candidate.
"""

from __future__ import annotations

from collections.abc import Collection
from pathlib import Path, PurePath


def next_available_name(existing: Collection[str], base_name: str) -> str:
    """Return ``<base>.baton.new``, then ``<base>.baton2.new``, ``<base>.baton3.new``, ...

    The first candidate not found in *existing* wins.
    """
    index = 1
    name = f"{base_name}.baton.new"
    while name in existing:
        index += 1
        name = f"{base_name}.baton{index}.new"
    return name


def next_numbered_name(existing: Collection[str], base_name: str, *, start: int = 2) -> str:
    """Return ``<stem><n><suffix>`` for the first free ``n`` starting at *start*.

    ``AGENTS.md`` yields ``AGENTS2.md``, then ``AGENTS3.md``, ...
    """
    path = PurePath(base_name)
    stem, suffix = path.stem, path.suffix
    index = start
    name = f"{stem}{index}{suffix}"
    while name in existing:
        index += 1
        name = f"{stem}{index}{suffix}"
    return name


def list_names(directory: Path) -> frozenset[str]:
    """Names of the entries directly inside *directory* (empty if it does not exist)."""
    if not directory.is_dir():
        return frozenset()
    return frozenset(entry.name for entry in directory.iterdir())
