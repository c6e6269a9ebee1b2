"""Static lookup tables: tool -> IDE config file, stack -> skills and label.

All tables are read-only views; nothing mutates them after import.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

from baton.contracts.answers import Stack, Tool


class IdeTarget(BaseModel):
    """Config file written for a tool, and the IDE template it is rendered from."""

    model_config = ConfigDict(frozen=True)

    file: str
    template: str | None = None


_CLAUDE = IdeTarget(file="CLAUDE.md", template="CLAUDE.md.template")

IDE_MAP: Mapping[Tool, IdeTarget] = MappingProxyType(
    {
        Tool.CLAUDE_CODE: _CLAUDE,
        Tool.CURSOR: IdeTarget(file=".cursorrules", template="cursorrules.template"),
        Tool.WINDSURF: IdeTarget(file=".windsurfrules", template="cursorrules.template"),
        # Codex reads AGENTS.md directly, which is always generated.
        Tool.CODEX: IdeTarget(file="AGENTS.md"),
        Tool.KIRO: _CLAUDE,
        Tool.WARP: _CLAUDE,
        Tool.OTHER: _CLAUDE,
    }
)

STACK_MAP: Mapping[Stack, tuple[str, ...]] = MappingProxyType(
    {
        Stack.NEXTJS_SUPABASE: ("nextjs", "supabase", "tailwind", "shadcn", "typescript", "vercel"),
        Stack.NEXTJS_OTHER: ("nextjs", "tailwind", "shadcn", "typescript", "vercel"),
        Stack.REACT_NODE: ("tailwind", "typescript", "prisma"),
        Stack.PYTHON: (),
        Stack.OTHER: (),
    }
)

STACK_LABEL: Mapping[Stack, str] = MappingProxyType(
    {
        Stack.NEXTJS_SUPABASE: "Next.js, Supabase",
        Stack.NEXTJS_OTHER: "Next.js",
        Stack.REACT_NODE: "React, Node.js",
        Stack.PYTHON: "Python",
        Stack.OTHER: "",
    }
)

# Skill categories copied regardless of stack, in copy order.
ALWAYS_INCLUDED: tuple[str, ...] = ("core", "patterns", "domains")


def ide_target_for(tool: Tool) -> IdeTarget:
    return IDE_MAP.get(tool, IDE_MAP[Tool.OTHER])


def stack_skills_for(stack: Stack) -> tuple[str, ...]:
    return STACK_MAP.get(stack, ())


def stack_label_for(stack: Stack) -> str:
    return STACK_LABEL.get(stack, "")
