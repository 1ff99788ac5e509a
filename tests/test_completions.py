"""Tests for infostep.completions module."""

from pathlib import Path

import pytest

from infostep.completions import (
    complete_border_variant,
    complete_corner_style,
    complete_export_format,
    complete_input_file,
    complete_layout,
)
from infostep.models import LayoutType


@pytest.mark.unit
class TestCompleteLayout:
    """Tests for complete_layout function."""

    def test_empty_prefix_returns_all_layouts(self) -> None:
        assert sorted(complete_layout("")) == sorted(layout.value for layout in LayoutType)

    def test_prefix_filters_results(self) -> None:
        assert complete_layout("ti") == ["timeline-flow"]

    def test_prefix_case_insensitive(self) -> None:
        assert complete_layout("VERT") == ["vertical-cards"]

    def test_nonmatching_prefix_returns_empty(self) -> None:
        assert complete_layout("xyz") == []


@pytest.mark.unit
class TestCompleteStyleValues:
    """Tests for format, corner and border completion."""

    def test_export_formats_sorted(self) -> None:
        assert complete_export_format("") == ["html", "svg", "txt"]

    def test_corner_prefix(self) -> None:
        assert complete_corner_style("s") == ["sharp", "soft"]

    def test_border_prefix(self) -> None:
        assert complete_border_variant("d") == ["dashed"]


@pytest.mark.unit
class TestCompleteInputFile:
    """Tests for complete_input_file function."""

    def test_lists_text_files_and_directories(self, workdir: Path) -> None:
        (workdir / "steps.txt").write_text("a -> b")
        (workdir / "notes.md").write_text("# notes")
        (workdir / "image.png").write_bytes(b"")
        (workdir / "docs").mkdir()
        (workdir / ".hidden.txt").write_text("")

        assert complete_input_file("") == ["docs/", "notes.md", "steps.txt"]

    def test_prefix_filters_results(self, workdir: Path) -> None:
        (workdir / "steps.txt").write_text("a -> b")
        (workdir / "notes.md").write_text("# notes")

        assert complete_input_file("st") == ["steps.txt"]

    def test_missing_directory_returns_empty(self, workdir: Path) -> None:
        assert complete_input_file("missing/dir/") == []
