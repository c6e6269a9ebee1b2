"""Tests for generated (template-free) documents."""

from __future__ import annotations

from baton.core.documents import agents_md, rule_stubs, tracking_documents


def test_rule_stubs_names_and_project_name() -> None:
    stubs = rule_stubs("Foo")

    assert list(stubs) == ["project.md", "tech-stack.md", "patterns.md", "structure.md"]
    assert stubs["project.md"].startswith("# Project Rules — Foo\n")
    assert all("Foo" in content for content in stubs.values())
    assert all(content.endswith("\n") for content in stubs.values())


def test_tracking_documents_names_and_project_name() -> None:
    docs = tracking_documents("Foo")

    assert list(docs) == ["PROGRESS.md", "BACKLOG.md", "FEATURES.md"]
    assert docs["PROGRESS.md"].startswith("# Progress — Foo\n")
    assert docs["BACKLOG.md"].startswith("# Backlog — Foo\n")
    assert docs["FEATURES.md"].startswith("# Features — Foo\n")


def test_agents_md_includes_project_and_stack() -> None:
    content = agents_md("Foo", "Next.js, Supabase")

    assert content.startswith("# AGENTS.md\n")
    assert "Foo — bootstrapped with the Baton protocol." in content
    assert "- **Stack:** Next.js, Supabase" in content
    assert "BATON_v3.1.md" in content


def test_agents_md_without_stack_defers_to_session_zero() -> None:
    content = agents_md("Foo", "")

    assert "- **Stack:** (to be determined during Session Zero)" in content
