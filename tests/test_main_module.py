"""Tests for ``python -m stm_annotations`` and the console script."""

from __future__ import annotations

import importlib
import runpy
import sys
import tomllib
from pathlib import Path

import pytest

import stm_annotations.cli


def _count_cli_calls(monkeypatch: pytest.MonkeyPatch, exit_code: int) -> list[None]:
    calls: list[None] = []

    def fake_main() -> int:
        calls.append(None)
        return exit_code

    monkeypatch.setattr(stm_annotations.cli, "main", fake_main)
    monkeypatch.delitem(sys.modules, "stm_annotations.__main__", raising=False)
    return calls


def test_importing_main_module_does_not_run_cli(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = _count_cli_calls(monkeypatch, exit_code=0)

    importlib.import_module("stm_annotations.__main__")

    assert calls == []


def test_running_main_module_exits_with_cli_status(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = _count_cli_calls(monkeypatch, exit_code=4)

    with pytest.raises(SystemExit) as exc_info:
        runpy.run_module("stm_annotations.__main__", run_name="__main__")

    assert len(calls) == 1
    assert exc_info.value.code == 4


def test_pyproject_defines_console_script() -> None:
    pyproject_path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    pyproject_data = tomllib.loads(pyproject_path.read_text(encoding="utf-8"))

    assert pyproject_data["project"]["scripts"]["stm-annotations"] == "stm_annotations.cli:main"
