"""Shell completion helpers for infostep CLI."""

from pathlib import Path

from .models import BorderVariant, CornerStyle, ExportFormat, LayoutType

INPUT_SUFFIXES = {".txt", ".md"}


def _complete_enum(values: list[str], incomplete: str) -> list[str]:
    return [v for v in values if v.startswith(incomplete.lower())]


def complete_layout(incomplete: str) -> list[str]:
    """Return layout identifiers that start with the given prefix.

    Args:
        incomplete: The partial string typed by the user

    Returns:
        List of matching layout identifiers
    """
    return _complete_enum([layout.value for layout in LayoutType], incomplete)


def complete_export_format(incomplete: str) -> list[str]:
    """Return export formats that start with the given prefix, sorted."""
    return sorted(_complete_enum([f.value for f in ExportFormat], incomplete))


def complete_corner_style(incomplete: str) -> list[str]:
    """Return corner styles that start with the given prefix."""
    return _complete_enum([c.value for c in CornerStyle], incomplete)


def complete_border_variant(incomplete: str) -> list[str]:
    """Return border variants that start with the given prefix."""
    return _complete_enum([b.value for b in BorderVariant], incomplete)


def _split_incomplete(incomplete: str) -> tuple[Path, str]:
    """Return (directory to list, name prefix) for a partial path."""
    path = Path(incomplete)
    if not incomplete or incomplete.endswith(("/", "\\")) or path.is_dir():
        return path, ""
    return path.parent, path.name.lower()


def complete_input_file(incomplete: str) -> list[str]:
    """Return input files (.txt/.md) and directories under a partial path.

    Directories carry a trailing slash; hidden entries are skipped and at
    most 20 sorted results are returned.
    """
    search_dir, prefix = _split_incomplete(incomplete)
    if not search_dir.is_dir():
        return []

    results: list[str] = []
    try:
        for entry in search_dir.iterdir():
            if entry.name.startswith(".") or not entry.name.lower().startswith(prefix):
                continue
            if entry.is_dir():
                results.append(f"{entry}/")
            elif entry.suffix.lower() in INPUT_SUFFIXES:
                results.append(str(entry))
    except PermissionError:
        return []

    return sorted(results)[:20]
