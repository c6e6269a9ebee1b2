"""Content generated without a template: rule stubs, AGENTS.md, tracking documents."""

from __future__ import annotations

PROTOCOL_FILE = "BATON_v3.1.md"
AGENTS_FILE = "AGENTS.md"


def rule_stubs(project_name: str) -> dict[str, str]:
    """The four ``.ai-rules/`` stubs, keyed by file name."""
    return {
        "project.md": f"# Project Rules — {project_name}\n\n> AI will fill this during discovery session.\n",
        "tech-stack.md": f"# Tech Stack — {project_name}\n\n> AI will fill this during discovery session.\n",
        "patterns.md": (
            f"# Patterns & Quirks — {project_name}\n\n"
            "> AI adds entries here as it discovers gotchas and solutions.\n"
        ),
        "structure.md": (
            f"# Project Structure — {project_name}\n\n> AI will fill this once the project scaffolding is set up.\n"
        ),
    }


def tracking_documents(project_name: str) -> dict[str, str]:
    """``PROGRESS.md``, ``BACKLOG.md`` and ``FEATURES.md`` bodies, keyed by file name."""
    return {
        "PROGRESS.md": f"# Progress — {project_name}\n\n## Sessions\n\n_No sessions yet. AI will log progress here._\n",
        "BACKLOG.md": f"# Backlog — {project_name}\n\n_Deferred items go here. AI adds items during sessions._\n",
        "FEATURES.md": (
            f"# Features — {project_name}\n\n_User-facing feature documentation. AI updates this as features ship._\n"
        ),
    }


def agents_md(project_name: str, stack_label: str) -> str:
    """Universal instructions file read by AI coding agents."""
    if stack_label:
        stack_line = f"- **Stack:** {stack_label}"
    else:
        stack_line = "- **Stack:** (to be determined during Session Zero)"

    return f"""# AGENTS.md

This file provides guidance to AI coding agents working with this repository.

## Project Overview

{project_name} — bootstrapped with the Baton protocol.

{stack_line}
- **Protocol:** Baton v3.1 (AI orchestration protocol)
- **Architecture:** See `.ai-rules/` for project context (generated during Session Zero)

## Getting Started

This project uses the Baton protocol for AI-assisted development.

1. Read `{PROTOCOL_FILE}` — the orchestration protocol
2. Read `.ai-rules/` — project context files (AI-generated)
3. Read `skills/` — curated best practices for this stack
4. Check `handoff/` — session handoff files for continuity

## Build & Development Commands

```bash
# Install dependencies
npm install

# Development
npm run dev

# Build
npm run build
```

## Code Style & Conventions

See `.ai-rules/patterns.md` for project-specific patterns.
See `skills/core/` for universal rules (security, testing, anti-overengineering).

## Project Structure

```
{PROTOCOL_FILE}          # AI orchestration protocol
.ai-rules/             # Project context (AI-generated)
skills/                # Best practice skills
  core/                # Universal rules
  stacks/              # Stack-specific patterns
  patterns/            # Implementation patterns
  domains/             # Domain knowledge
handoff/               # Session handoff files
PROGRESS.md            # Session progress log
BACKLOG.md             # Deferred items
FEATURES.md            # Feature documentation
```

## Agent Boundaries

This project follows the Baton protocol. Key rules:
- Read {PROTOCOL_FILE} before starting work
- Check skills/ before web searching
- Document discoveries in .ai-rules/patterns.md
- Create handoff files at session end
- Update PROGRESS.md after each session
"""
