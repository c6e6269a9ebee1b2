"""Console-script entrypoint.

Checks the interpreter version before anything version-sensitive is imported,
so an old Python gets a one-line error instead of an import traceback. Keep
this module's imports limited to the standard library and
:mod:`baton.contracts.exceptions`.
"""

from __future__ import annotations

import sys

from baton.contracts.exceptions import RuntimeVersionError

MIN_PYTHON: tuple[int, int] = (3, 11)


def check_runtime(version_info: tuple[int, ...] | None = None) -> None:
    """Raise :class:`RuntimeVersionError` when running below :data:`MIN_PYTHON`."""
    if version_info is None:
        version_info = tuple(sys.version_info)
    if tuple(version_info[:2]) < MIN_PYTHON:
        required = ".".join(str(part) for part in MIN_PYTHON)
        actual = ".".join(str(part) for part in version_info[:3])
        raise RuntimeVersionError(required=required, actual=actual)


def main(argv: list[str] | None = None) -> int:
    try:
        check_runtime()
    except RuntimeVersionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    from baton.cli.app import main as run_cli

    return run_cli(argv)


__all__ = ["MIN_PYTHON", "check_runtime", "main"]
