"""Public API surface for Baton.

Names are resolved on first access so that importing :mod:`baton.launcher`
does not pull in pydantic or :class:`enum.StrEnum` before the runtime check.
"""

from __future__ import annotations

import importlib
from typing import Any

__version__ = "3.1.0"

_EXPORTS: dict[str, str] = {
    "Answers": "baton.contracts.answers",
    "Stack": "baton.contracts.answers",
    "Tool": "baton.contracts.answers",
    "BatonError": "baton.contracts.exceptions",
    "RuntimeVersionError": "baton.contracts.exceptions",
    "ScaffoldError": "baton.contracts.exceptions",
    "TemplateError": "baton.contracts.exceptions",
    "ALWAYS_INCLUDED": "baton.core.mappings",
    "IDE_MAP": "baton.core.mappings",
    "STACK_LABEL": "baton.core.mappings",
    "STACK_MAP": "baton.core.mappings",
    "IdeTarget": "baton.core.mappings",
    "copy_tree": "baton.core.copying",
    "next_available_name": "baton.core.naming",
    "next_numbered_name": "baton.core.naming",
    "PLACEHOLDERS": "baton.core.rendering",
    "render_template": "baton.core.rendering",
    "template_values": "baton.core.rendering",
    "scaffold": "baton.core.scaffold",
    "templates_root": "baton.core.templates",
}


def __getattr__(name: str) -> Any:
    module_name = _EXPORTS.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    value = getattr(importlib.import_module(module_name), name)
    globals()[name] = value
    return value


__all__ = [
    "ALWAYS_INCLUDED",
    "IDE_MAP",
    "PLACEHOLDERS",
    "STACK_LABEL",
    "STACK_MAP",
    "Answers",
    "BatonError",
    "IdeTarget",
    "RuntimeVersionError",
    "ScaffoldError",
    "Stack",
    "TemplateError",
    "Tool",
    "__version__",
    "copy_tree",
    "next_available_name",
    "next_numbered_name",
    "render_template",
    "scaffold",
    "template_values",
    "templates_root",
]
