"""Public contracts for Baton.

:mod:`baton.contracts.answers` is loaded on first access; the runtime check
imports :mod:`baton.contracts.exceptions` on interpreters that lack
:class:`enum.StrEnum`.
"""

from __future__ import annotations

import importlib
from typing import Any

from baton.contracts.exceptions import BatonError, RuntimeVersionError, ScaffoldError, TemplateError

_ANSWERS_EXPORTS = frozenset({"Answers", "Stack", "Tool"})


def __getattr__(name: str) -> Any:
    if name not in _ANSWERS_EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return getattr(importlib.import_module("baton.contracts.answers"), name)


__all__ = [
    "Answers",
    "BatonError",
    "RuntimeVersionError",
    "ScaffoldError",
    "Stack",
    "TemplateError",
    "Tool",
]
