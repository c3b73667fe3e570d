"""Rendering of class-name constants into a C# source file."""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Sequence

from .errors import ConstantNameCollisionError
from .manifest import format_manifest_line
from .models import DEFAULT_CLASS_NAME, TargetConfig

HEADER = "// This file is auto-generated by Style Class Generator. Do not edit."
LINT_SUPPRESSION = "// ReSharper disable All"
INDENT = "\t"

_SEPARATORS = re.compile(r"[-_]")


class SourceBuilder:
    """Accumulates lines, tracking indentation from brace tokens.

    A line containing ``}`` is written one level shallower; a line containing
    ``{`` deepens every line after it.
    """

    def __init__(self, indent: str = INDENT) -> None:
        self._indent = indent
        self._level = 0
        self._lines: List[str] = []

    @property
    def level(self) -> int:
        return self._level

    def add_line(self, line: str = "") -> None:
        if "}" in line:
            self._level -= 1
        self._lines.append(f"{self._indent * self._level}{line}\n")
        if "{" in line:
            self._level += 1

    def build(self) -> str:
        return "".join(self._lines)


def to_pascal_case(name: str) -> str:
    """``btn-primary_large`` -> ``BtnPrimaryLarge``."""
    words = [word for word in _SEPARATORS.split(name) if word]
    return "".join(word[:1].upper() + word[1:].lower() for word in words)


def constant_name(class_name: str) -> str:
    """Return a valid C# identifier for ``class_name``.

    Names made only of separators keep their underscores, and a leading digit
    gets an underscore prefix.
    """
    result = to_pascal_case(class_name)
    if not result:
        return class_name.replace("-", "_")
    if result[0].isdigit():
        return f"_{result}"
    return result


def constant_names(class_names: Sequence[str], container: str | None = None) -> Dict[str, str]:
    """Map each class name to its constant name, rejecting collisions.

    A member may not share the enclosing class name (C# error CS0542).
    """
    owners: Dict[str, str] = {}
    mapping: Dict[str, str] = {}
    for class_name in class_names:
        constant = constant_name(class_name)
        if constant == container:
            raise ConstantNameCollisionError(constant, [class_name], container=True)
        previous = owners.get(constant)
        if previous is not None and previous != class_name:
            raise ConstantNameCollisionError(constant, [previous, class_name])
        owners[constant] = class_name
        mapping[class_name] = constant
    return mapping


def render(
    target: TargetConfig,
    class_names: Iterable[str],
    *,
    default_class_name: str = DEFAULT_CLASS_NAME,
) -> str:
    """Render the generated source file for ``class_names`` in iteration order."""
    names = list(class_names)
    container = target.class_name(default_class_name)
    constants = constant_names(names, container)
    use_namespace = bool(target.namespace)
    builder = SourceBuilder()

    builder.add_line(HEADER)
    builder.add_line(format_manifest_line(names))
    builder.add_line("")
    builder.add_line(LINT_SUPPRESSION)

    if use_namespace:
        builder.add_line(f"namespace {target.namespace}")
        builder.add_line("{")

    builder.add_line(f"public static class {container}")
    builder.add_line("{")

    for name in names:
        builder.add_line(f'public const string {constants[name]} = "{name}";')

    builder.add_line("}")

    if use_namespace:
        builder.add_line("}")

    return builder.build()


__all__ = ["SourceBuilder", "constant_name", "constant_names", "render", "to_pascal_case"]
