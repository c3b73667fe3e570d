"""Class manifest embedded in generated files, used for change detection."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Set

from .errors import ManifestParseError
from .logging import get_logger

MANIFEST_PREFIX = "//"

_logger = get_logger("manifest")


def format_manifest_line(class_names: Iterable[str]) -> str:
    """Return the comment line listing ``class_names`` in iteration order."""
    return f"{MANIFEST_PREFIX} {','.join(class_names)}"


def parse_manifest_line(line: str) -> Set[str]:
    """Return the class names recorded on a manifest line."""
    line = line.rstrip("\r\n")
    if not line.startswith(MANIFEST_PREFIX):
        raise ManifestParseError(f"Expected manifest comment, found {line!r}")
    remainder = line[len(MANIFEST_PREFIX):]
    if remainder.startswith(" "):
        remainder = remainder[1:]
    if not remainder:
        return set()
    return set(remainder.split(","))


def read_manifest(output_path: Path) -> Set[str]:
    """Read the class manifest from the second line of a generated file."""
    with output_path.open("r", encoding="utf-8") as handle:
        handle.readline()
        line = handle.readline()
    if not line:
        raise ManifestParseError(f"{output_path} has no manifest line")
    return parse_manifest_line(line)


def needs_regeneration(output_path: Path, class_names: Iterable[str]) -> bool:
    """Return True unless ``output_path`` already records exactly ``class_names``.

    Unreadable or malformed files are reported and treated as stale.
    """
    if not output_path.exists():
        return True
    try:
        current = read_manifest(output_path)
    except (OSError, UnicodeDecodeError, ManifestParseError) as exc:
        _logger.warning("A parsing error occurred in %s (%s). Regenerating file.", output_path, exc)
        return True
    return current != set(class_names)


__all__ = [
    "MANIFEST_PREFIX",
    "format_manifest_line",
    "needs_regeneration",
    "parse_manifest_line",
    "read_manifest",
]
