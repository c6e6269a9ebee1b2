"""Core scaffolding domain: static tables, pure helpers and the scaffolder."""

from baton.core.copying import copy_tree, count_subdirectories
from baton.core.mappings import ALWAYS_INCLUDED, IDE_MAP, STACK_LABEL, STACK_MAP, IdeTarget
from baton.core.naming import next_available_name, next_numbered_name
from baton.core.rendering import PLACEHOLDERS, render_template, template_values
from baton.core.scaffold import scaffold
from baton.core.templates import templates_root

__all__ = [
    "ALWAYS_INCLUDED",
    "IDE_MAP",
    "PLACEHOLDERS",
    "STACK_LABEL",
    "STACK_MAP",
    "IdeTarget",
    "copy_tree",
    "count_subdirectories",
    "next_available_name",
    "next_numbered_name",
    "render_template",
    "scaffold",
    "template_values",
    "templates_root",
]
