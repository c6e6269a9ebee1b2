"""Exception hierarchy for Baton."""

from __future__ import annotations


class BatonError(Exception):
    """Base exception for all Baton errors."""


class RuntimeVersionError(BatonError):
    """Interpreter is older than the minimum supported version."""

    def __init__(self, *, required: str, actual: str) -> None:
        super().__init__(f"Baton requires Python {required} or higher. You are running {actual}")
        self.required = required
        self.actual = actual


class TemplateError(BatonError):
    """Template source is missing or cannot be rendered."""


class ScaffoldError(BatonError):
    """File-system failure while writing the scaffold."""

    def __init__(self, message: str, *, step: str) -> None:
        super().__init__(message)
        self.step = step
