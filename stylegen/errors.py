"""Exception types raised by stylegen."""

from __future__ import annotations

from typing import Sequence


class StyleGenError(Exception):
    """Base class for stylegen failures."""


class ConfigError(StyleGenError):
    """Raised when the configuration file cannot be parsed."""


class TargetDirectoryError(StyleGenError, FileNotFoundError):
    """Raised when a target's style directory cannot be resolved."""

    def __init__(self, path: object) -> None:
        super().__init__(f"Style generator cannot resolve path: {path}")
        self.path = path


class ManifestParseError(StyleGenError, ValueError):
    """Raised when a generated file carries no readable class manifest."""


class ConstantNameCollisionError(StyleGenError):
    """Raised when a class name maps to a constant that is already taken."""

    def __init__(self, constant: str, class_names: Sequence[str], *, container: bool = False) -> None:
        joined = ", ".join(repr(name) for name in class_names)
        if container:
            message = f"Class name {joined} maps to constant {constant!r}, which is the enclosing class name"
        else:
            message = f"Class names {joined} all map to constant {constant!r}"
        super().__init__(message)
        self.constant = constant
        self.class_names = list(class_names)
        self.container = container


__all__ = [
    "ConfigError",
    "ConstantNameCollisionError",
    "ManifestParseError",
    "StyleGenError",
    "TargetDirectoryError",
]
