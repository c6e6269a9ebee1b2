"""Location of the bundled template tree."""

from __future__ import annotations

import os
from importlib.resources import files
from pathlib import Path

TEMPLATES_DIR_ENV = "BATON_TEMPLATES_DIR"


def templates_root() -> Path:
    """Directory holding ``BATON_v3.1.md``, ``skills/`` and ``ide/``.

    ``$BATON_TEMPLATES_DIR`` takes precedence over the copy shipped inside the
    ``baton`` package.
    """
    override = os.environ.get(TEMPLATES_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path(str(files("baton").joinpath("templates")))
