"""Write the Baton scaffold into a destination directory.

:func:`scaffold` runs a fixed sequence of independent steps and returns the
ordered log of what it did. Files a user may have authored (protocol, IDE
config, ``AGENTS.md``, tracking documents) are never overwritten: an existing
file diverts the write to an alternate name. Files the tool owns (skill
copies, ``.ai-rules/`` stubs, the handoff marker) are always refreshed.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable, Collection, Iterator
from contextlib import contextmanager
from pathlib import Path

from baton.contracts.answers import Answers
from baton.contracts.exceptions import ScaffoldError, TemplateError
from baton.core.copying import copy_tree, count_subdirectories
from baton.core.documents import AGENTS_FILE, PROTOCOL_FILE, agents_md, rule_stubs, tracking_documents
from baton.core.mappings import ALWAYS_INCLUDED, ide_target_for, stack_label_for, stack_skills_for
from baton.core.naming import list_names, next_available_name, next_numbered_name
from baton.core.rendering import render_template, template_values
from baton.core.templates import templates_root

logger = logging.getLogger(__name__)

RULES_DIR = ".ai-rules"
HANDOFF_DIR = "handoff"
SKILLS_DIR = "skills"

AltNamer = Callable[[Collection[str], str], str]


@contextmanager
def _step(name: str) -> Iterator[None]:
    logger.debug("scaffold step: %s", name)
    try:
        yield
    except OSError as exc:
        raise ScaffoldError(f"{name} failed: {exc}", step=name) from exc


def _write_or_divert(
    destination: Path,
    file_name: str,
    content: str,
    *,
    alt_namer: AltNamer,
    created_message: str,
) -> str:
    """Write *content* to *file_name* unless it exists; then write to the next free alternate name."""
    target = destination / file_name
    if target.exists():
        alt_name = alt_namer(list_names(destination), file_name)
        (destination / alt_name).write_text(content, encoding="utf-8")
        logger.debug("%s exists, diverted to %s", file_name, alt_name)
        return f"{file_name} exists - created {alt_name} (review and merge manually if needed)"
    target.write_text(content, encoding="utf-8")
    return created_message


def _copy_protocol(destination: Path, templates: Path) -> str:
    target = destination / PROTOCOL_FILE
    if target.exists():
        logger.debug("%s exists, leaving it untouched", PROTOCOL_FILE)
        return f"{PROTOCOL_FILE} exists - skipped (delete it first to overwrite)"
    source = templates / PROTOCOL_FILE
    if not source.is_file():
        raise TemplateError(f"protocol template not found: {source}")
    shutil.copyfile(source, target)
    return f"Copied {PROTOCOL_FILE}"


def _copy_skills(destination: Path, templates: Path, answers: Answers) -> str:
    skills_src = templates / SKILLS_DIR
    skills_dest = destination / SKILLS_DIR

    for category in ALWAYS_INCLUDED:
        copy_tree(skills_src / category, skills_dest / category)

    (skills_dest / "stacks").mkdir(parents=True, exist_ok=True)
    copied_stack = 0
    for skill in stack_skills_for(answers.stack):
        source = skills_src / "stacks" / skill
        if not source.is_dir():
            logger.debug("stack skill %s not bundled, skipping", skill)
            continue
        copy_tree(source, skills_dest / "stacks" / skill)
        copied_stack += 1

    core = count_subdirectories(skills_dest / "core")
    patterns = count_subdirectories(skills_dest / "patterns")
    domains = count_subdirectories(skills_dest / "domains")
    return f"Copied {SKILLS_DIR}/ ({core} core + {copied_stack} stack + {patterns} pattern + {domains} domain)"


def _write_rule_stubs(destination: Path, answers: Answers) -> str:
    rules_dir = destination / RULES_DIR
    rules_dir.mkdir(parents=True, exist_ok=True)
    stubs = rule_stubs(answers.project_name)
    for file_name, content in stubs.items():
        (rules_dir / file_name).write_text(content, encoding="utf-8")
    return f"Created {RULES_DIR}/ ({len(stubs)} stub files)"


def _write_handoff(destination: Path) -> str:
    handoff_dir = destination / HANDOFF_DIR
    handoff_dir.mkdir(parents=True, exist_ok=True)
    (handoff_dir / ".gitkeep").write_text("", encoding="utf-8")
    return f"Created {HANDOFF_DIR}/"


def _write_ide_config(destination: Path, templates: Path, answers: Answers) -> str:
    ide = ide_target_for(answers.tool)
    if ide.template is None:
        return f"Using {AGENTS_FILE} as IDE config ({answers.tool})"

    template_path = templates / "ide" / ide.template
    if not template_path.is_file():
        raise TemplateError(f"IDE template not found: {template_path}")
    rendered = render_template(
        template_path.read_text(encoding="utf-8"),
        template_values(answers.project_name, stack_label_for(answers.stack)),
    )
    return _write_or_divert(
        destination,
        ide.file,
        rendered,
        alt_namer=next_available_name,
        created_message=f"Created {ide.file}",
    )


def _write_agents(destination: Path, answers: Answers) -> str:
    return _write_or_divert(
        destination,
        AGENTS_FILE,
        agents_md(answers.project_name, stack_label_for(answers.stack)),
        alt_namer=next_numbered_name,
        created_message=f"Generated {AGENTS_FILE}",
    )


def _write_tracking_documents(destination: Path, answers: Answers) -> list[str]:
    return [
        _write_or_divert(
            destination,
            file_name,
            content,
            alt_namer=next_available_name,
            created_message=f"Created {file_name}",
        )
        for file_name, content in tracking_documents(answers.project_name).items()
    ]


def scaffold(destination: Path, answers: Answers, *, templates_dir: Path | None = None) -> list[str]:
    """Scaffold Baton into *destination* and return the ordered result log.

    Args:
        destination: Existing directory to write into (normally the cwd).
        answers: Tool, stack and project name collected from the user.
        templates_dir: Template tree to copy from; defaults to :func:`templates_root`.

    Raises:
        TemplateError: If the protocol file or the selected IDE template is missing,
            or the IDE template uses an unknown placeholder.
        ScaffoldError: On any other file-system failure. Steps already completed
            are not rolled back.
    """
    templates = templates_dir if templates_dir is not None else templates_root()
    logger.debug("scaffolding %s from %s (tool=%s, stack=%s)", destination, templates, answers.tool, answers.stack)

    results: list[str] = []
    with _step("copy protocol"):
        results.append(_copy_protocol(destination, templates))
    with _step("copy skills"):
        results.append(_copy_skills(destination, templates, answers))
    with _step("write rule stubs"):
        results.append(_write_rule_stubs(destination, answers))
    with _step("create handoff"):
        results.append(_write_handoff(destination))
    with _step("write IDE config"):
        results.append(_write_ide_config(destination, templates, answers))
    with _step("write agents file"):
        results.append(_write_agents(destination, answers))
    with _step("write tracking documents"):
        results.extend(_write_tracking_documents(destination, answers))
    return results


__all__ = ["HANDOFF_DIR", "RULES_DIR", "SKILLS_DIR", "scaffold"]
