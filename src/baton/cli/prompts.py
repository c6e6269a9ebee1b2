"""Interactive questions asked before scaffolding."""

from __future__ import annotations

from pathlib import Path

from baton.contracts.answers import Answers, Stack, Tool


def default_project_name(cwd: Path | None = None) -> str:
    return (cwd or Path.cwd()).name


def ask_questions(cwd: Path | None = None) -> Answers:
    """Ask for tool, stack and project name.

    Raises :class:`KeyboardInterrupt` as soon as any question is cancelled, so
    no scaffold is written for a partial set of answers.
    """
    import questionary

    tool = questionary.select(
        "What AI coding tool are you using?",
        choices=[questionary.Choice(member.value, value=member.value) for member in Tool],
        default=Tool.CLAUDE_CODE.value,
    ).ask()
    if tool is None:
        raise KeyboardInterrupt

    stack = questionary.select(
        "What's your primary stack?",
        choices=[questionary.Choice(member.value, value=member.value) for member in Stack],
        default=Stack.NEXTJS_SUPABASE.value,
    ).ask()
    if stack is None:
        raise KeyboardInterrupt

    default_name = default_project_name(cwd)
    project_name = questionary.text("Project name?", default=default_name).ask()
    if project_name is None:
        raise KeyboardInterrupt

    return Answers(tool=tool, stack=stack, project_name=project_name.strip() or default_name)
