"""Shared test fixtures for baton tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from template_tree import make_templates

from baton.contracts.answers import Answers, Stack, Tool


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """A minimal template tree (protocol, both IDE templates, a few skills)."""
    return make_templates(tmp_path / "templates")


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """An empty destination directory."""
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def make_answers() -> Callable[..., Answers]:
    def _make(
        tool: Tool | str = Tool.CURSOR,
        stack: Stack | str = Stack.NEXTJS_SUPABASE,
        project_name: str = "Foo",
    ) -> Answers:
        return Answers(tool=tool, stack=stack, project_name=project_name)

    return _make
