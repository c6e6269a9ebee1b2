"""Command-line interface for Baton."""

from __future__ import annotations

import logging as logging

from baton.cli.app import main as main
from baton.cli.output import ScaffoldReport as ScaffoldReport
from baton.cli.parser import build_parser as build_parser
from baton.cli.prompts import ask_questions as ask_questions
from baton.core.scaffold import scaffold as scaffold
