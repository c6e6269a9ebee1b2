"""Tests for the runtime check that runs before the CLI is imported."""

from __future__ import annotations

import enum
import importlib
import runpy
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from baton.contracts.exceptions import RuntimeVersionError
from baton.launcher import check_runtime, main

OLD_VERSION_INFO = (3, 10, 12, "final", 0)


def _baton_module_names() -> list[str]:
    return [name for name in sys.modules if name == "baton" or name.startswith("baton.")]


@pytest.fixture
def unloaded_baton() -> Iterator[None]:
    """Drop every cached ``baton`` module for the test, then put the originals back."""
    saved = {name: sys.modules[name] for name in _baton_module_names()}
    for name in saved:
        del sys.modules[name]
    try:
        yield
    finally:
        for name in _baton_module_names():
            del sys.modules[name]
        sys.modules.update(saved)


@pytest.mark.parametrize("version_info", [(3, 11, 0), (3, 12, 4), (4, 0, 0)])
def test_check_runtime_accepts_supported_versions(version_info: tuple[int, ...]) -> None:
    check_runtime(version_info)


def test_check_runtime_rejects_old_versions() -> None:
    with pytest.raises(RuntimeVersionError) as exc_info:
        check_runtime((3, 10, 2))

    assert exc_info.value.required == "3.11"
    assert exc_info.value.actual == "3.10.2"
    assert str(exc_info.value) == "Baton requires Python 3.11 or higher. You are running 3.10.2"


def test_check_runtime_defaults_to_running_interpreter() -> None:
    check_runtime()


def test_main_rejects_old_interpreter_before_prompting(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    def _never_called() -> None:
        raise AssertionError("prompts must not run on an unsupported runtime")

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("baton.cli.ask_questions", _never_called)
    monkeypatch.setattr(sys, "version_info", OLD_VERSION_INFO)

    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.err == "error: Baton requires Python 3.11 or higher. You are running 3.10.12\n"
    assert captured.out == ""
    assert list(tmp_path.iterdir()) == []


def test_main_hands_off_to_cli_on_supported_interpreter(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    def _cancel() -> None:
        raise KeyboardInterrupt

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("baton.cli.ask_questions", _cancel)

    assert main([]) == 0
    assert "Aborted." in capsys.readouterr().out


@pytest.mark.usefixtures("unloaded_baton")
def test_console_script_reports_old_interpreter_without_strenum(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.delattr(enum, "StrEnum")
    monkeypatch.setattr(sys, "version_info", OLD_VERSION_INFO)

    launcher = importlib.import_module("baton.launcher")

    assert launcher.main([]) == 1
    err = capsys.readouterr().err
    assert err.startswith("error: Baton requires Python 3.11")
    assert "3.10.12" in err
    assert "baton.contracts.answers" not in sys.modules
    assert "baton.cli" not in sys.modules


@pytest.mark.usefixtures("unloaded_baton")
def test_python_m_baton_reports_old_interpreter_without_strenum(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.delattr(enum, "StrEnum")
    monkeypatch.setattr(sys, "version_info", OLD_VERSION_INFO)

    with pytest.raises(SystemExit) as exc_info:
        runpy.run_module("baton", run_name="__main__")

    assert exc_info.value.code == 1
    assert "You are running 3.10.12" in capsys.readouterr().err
