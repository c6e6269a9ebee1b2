"""Answers collected by the interactive prompt."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class Tool(StrEnum):
    """AI coding tool the scaffold is configured for."""

    CLAUDE_CODE = "Claude Code"
    CURSOR = "Cursor"
    WINDSURF = "Windsurf"
    CODEX = "Codex"
    KIRO = "Kiro"
    WARP = "Warp"
    OTHER = "Other"


class Stack(StrEnum):
    """Primary project stack; drives which stack skills are copied."""

    NEXTJS_SUPABASE = "Next.js + Supabase"
    NEXTJS_OTHER = "Next.js + other"
    REACT_NODE = "React + Node"
    PYTHON = "Python"
    OTHER = "Other"


class Answers(BaseModel):
    """One invocation's answers. Immutable once collected."""

    model_config = ConfigDict(frozen=True)

    tool: Tool
    stack: Stack
    project_name: str
