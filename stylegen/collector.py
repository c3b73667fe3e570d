"""Style-sheet scanning and class-name extraction."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Dict, Iterable, Iterator, List

from .errors import TargetDirectoryError
from .logging import get_logger
from .models import DEFAULT_EXTENSION, DEFAULT_RESERVED_PREFIX

# A class selector: `.name` not preceded by a digit (so `1.5em` is skipped) and
# followed by a selector delimiter. The lookahead is required, so a selector
# that ends the file with no trailing character is not reported.
CLASS_PATTERN = re.compile(r"(?<![0-9])\.([a-zA-Z_][a-zA-Z0-9_\-]*)(?=[\s\.\{\:\#\,])")

_logger = get_logger("collector")


def _normalise_extension(extension: str) -> str:
    return extension.strip().lstrip(".").lower()


def iter_style_files(root: Path, extension: str = DEFAULT_EXTENSION) -> Iterator[Path]:
    """Yield files under ``root`` whose extension matches, in a stable order."""
    wanted = _normalise_extension(extension)
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        current_dir = Path(dirpath)
        for filename in sorted(filenames):
            path = current_dir / filename
            if _normalise_extension(path.suffix) == wanted:
                yield path


def extract_class_names(
    text: str,
    *,
    include_reserved: bool = False,
    reserved_prefix: str = DEFAULT_RESERVED_PREFIX,
) -> List[str]:
    """Return class names referenced by selectors in ``text``, in match order."""
    names: List[str] = []
    for match in CLASS_PATTERN.finditer(text):
        name = match.group(1)
        if not include_reserved and reserved_prefix and name.startswith(reserved_prefix):
            continue
        names.append(name)
    return names


def _add_unique(found: Dict[str, None], names: Iterable[str]) -> None:
    for name in names:
        found.setdefault(name, None)


def collect(
    root_dir: Path | str,
    extension: str = DEFAULT_EXTENSION,
    include_reserved: bool = False,
    *,
    reserved_prefix: str = DEFAULT_RESERVED_PREFIX,
) -> List[str]:
    """Collect the unique class names declared by every style sheet under ``root_dir``.

    Names keep their discovery order: files in sorted walk order, then matches in
    the order they appear. Raises :class:`TargetDirectoryError` when the root is
    missing; read and decode failures propagate to the caller.
    """
    root = Path(root_dir)
    if not root.is_dir():
        raise TargetDirectoryError(root)

    found: Dict[str, None] = {}
    for path in iter_style_files(root, extension):
        text = path.read_text(encoding="utf-8")
        names = extract_class_names(
            text,
            include_reserved=include_reserved,
            reserved_prefix=reserved_prefix,
        )
        _logger.debug("Found %d class selectors in %s", len(names), path)
        _add_unique(found, names)
    return list(found)


__all__ = ["CLASS_PATTERN", "collect", "extract_class_names", "iter_style_files"]
