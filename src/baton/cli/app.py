"""CLI app flow and error mapping.

The runtime check runs earlier, in :mod:`baton.launcher`.
"""

from __future__ import annotations

import sys
from pathlib import Path

from baton.contracts.exceptions import ScaffoldError, TemplateError


def main(argv: list[str] | None = None) -> int:
    import baton.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    report = cli.ScaffoldReport()
    report.banner()

    try:
        answers = cli.ask_questions()
    except KeyboardInterrupt:
        print("\nAborted.")
        return 0

    report.setting_up()
    try:
        results = cli.scaffold(Path.cwd(), answers)
    except TemplateError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except ScaffoldError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1

    report.results(results)
    report.next_steps()
    return 0


__all__ = ["main"]
