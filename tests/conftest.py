"""Shared test fixtures for infostep tests."""

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from infostep.core import parse
from infostep.models import ParsedDocument


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def workdir(tmp_path: Path) -> Generator[Path, None, None]:
    """Change cwd to a temporary directory for the duration of the test."""
    original_cwd = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_cwd)


@pytest.fixture
def numbered_text() -> str:
    """Return a numbered process description."""
    return "1. Plan: Define scope\n2. Build: Ship code\n3. Launch: Go live"


@pytest.fixture
def arrow_text() -> str:
    """Return an arrow-chained process description."""
    return "Start -> Process -> End"


@pytest.fixture
def numbered_document(numbered_text: str) -> ParsedDocument:
    """Return the parsed numbered description."""
    return parse(numbered_text)


@pytest.fixture
def input_file(workdir: Path, numbered_text: str) -> Path:
    """Write the numbered description to a file in the working directory."""
    path = workdir / "process.txt"
    path.write_text(numbered_text)
    return path
