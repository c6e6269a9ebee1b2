"""``{{TOKEN}}`` substitution for IDE config templates."""

from __future__ import annotations

import re
from collections.abc import Mapping

from baton.contracts.exceptions import TemplateError

_PLACEHOLDER_RE = re.compile(r"\{\{([A-Z][A-Z0-9_]*)\}\}")

CURRENT_SESSION = "1"
NEXT_SESSION = "2"
BUILD_COMMAND = "npm run build"
DEV_COMMAND = "npm run dev"
TYPECHECK_COMMAND = "npx tsc --noEmit"
PROJECT_RULES = "<!-- AI will add project-specific rules here -->"

PLACEHOLDERS: tuple[str, ...] = (
    "PROJECT_NAME",
    "STACK",
    "CURRENT_SESSION",
    "NEXT_SESSION",
    "BUILD_COMMAND",
    "DEV_COMMAND",
    "TYPECHECK_COMMAND",
    "PROJECT_RULES",
)


def template_values(project_name: str, stack_label: str) -> dict[str, str]:
    """Substitution table for every recognised placeholder."""
    return {
        "PROJECT_NAME": project_name,
        "STACK": stack_label,
        "CURRENT_SESSION": CURRENT_SESSION,
        "NEXT_SESSION": NEXT_SESSION,
        "BUILD_COMMAND": BUILD_COMMAND,
        "DEV_COMMAND": DEV_COMMAND,
        "TYPECHECK_COMMAND": TYPECHECK_COMMAND,
        "PROJECT_RULES": PROJECT_RULES,
    }


def find_placeholders(text: str) -> list[str]:
    """Distinct placeholder names in *text*, in order of first appearance."""
    seen: dict[str, None] = {}
    for match in _PLACEHOLDER_RE.finditer(text):
        seen.setdefault(match.group(1), None)
    return list(seen)


def render_template(text: str, values: Mapping[str, str]) -> str:
    """Replace each ``{{NAME}}`` in *text* with ``values[NAME]``.

    Replacement is literal and single-pass: substituted values are never
    scanned again, so a project name containing braces is written as-is.

    Raises:
        TemplateError: If *text* uses a placeholder that *values* does not cover.
    """
    unknown = [name for name in find_placeholders(text) if name not in values]
    if unknown:
        names = ", ".join("{{" + name + "}}" for name in unknown)
        raise TemplateError(f"unrecognised template placeholder(s): {names}")
    return _PLACEHOLDER_RE.sub(lambda match: values[match.group(1)], text)
