"""Tests for the baton exception hierarchy."""

from __future__ import annotations

import pytest

from baton.contracts.exceptions import BatonError, RuntimeVersionError, ScaffoldError, TemplateError


class TestExceptionHierarchy:
    """Tests for exception inheritance."""

    @pytest.mark.parametrize("exc_type", [RuntimeVersionError, TemplateError, ScaffoldError])
    def test_all_exceptions_inherit_from_baton_error(self, exc_type: type[Exception]) -> None:
        assert issubclass(exc_type, BatonError)

    def test_runtime_version_error_names_both_versions(self) -> None:
        exc = RuntimeVersionError(required="3.11", actual="3.8.10")

        assert "3.11" in str(exc)
        assert "3.8.10" in str(exc)

    def test_scaffold_error_keeps_step(self) -> None:
        exc = ScaffoldError("copy skills failed: disk full", step="copy skills")

        assert exc.step == "copy skills"
        assert str(exc) == "copy skills failed: disk full"
