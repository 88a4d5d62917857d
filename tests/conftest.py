"""Shared test fixtures for stm-annotations tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from stm_annotations.parser import AnnotationParser


@pytest.fixture
def parser() -> AnnotationParser:
    return AnnotationParser()


@pytest.fixture
def annotated_source(tmp_path: Path) -> Path:
    """A test source file with one annotation of each kind plus noise."""
    path = tmp_path / "login_test.go"
    path.write_text(
        "\n".join(
            [
                "package login",
                "// stm:header; type=unit; system=auth;",
                "",
                "// stm:scenarios; behaviors=login, logout;",
                "func TestLogin(t *testing.T) {",
                "    // stm:@; @=true;",
                "    // stm:bogus; type=unit;",
                "}",
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    return path
