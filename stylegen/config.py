"""Configuration loading for stylegen (.stylegen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigError
from .models import (
    DEFAULT_CLASS_NAME,
    DEFAULT_EXTENSION,
    DEFAULT_RESERVED_PREFIX,
    TargetConfig,
)

CONFIG_FILENAME = ".stylegen.yml"
DEFAULT_ASSET_ROOT = "Assets"


@dataclass
class StyleGenConfig:
    """Represents the settings defined in .stylegen.yml."""

    root: Path
    asset_root: Path
    extension: str = DEFAULT_EXTENSION
    reserved_prefix: str = DEFAULT_RESERVED_PREFIX
    default_class_name: str = DEFAULT_CLASS_NAME
    targets: List[TargetConfig] = field(default_factory=list)


def load_config(config_path: Path) -> StyleGenConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return StyleGenConfig(root=root, asset_root=root / DEFAULT_ASSET_ROOT)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    asset_root_str = _as_str(data.get("asset_root")) or DEFAULT_ASSET_ROOT
    asset_root = (root / asset_root_str).resolve()

    reserved_prefix = _as_str(data.get("reserved_prefix"))

    targets_data = data.get("targets")
    if targets_data is None:
        targets_data = []
    if not isinstance(targets_data, list):
        raise ConfigError("'targets' must be a list of target mappings")

    targets = [_parse_target(entry, index) for index, entry in enumerate(targets_data)]

    return StyleGenConfig(
        root=root,
        asset_root=asset_root,
        extension=_as_str(data.get("extension")) or DEFAULT_EXTENSION,
        reserved_prefix=DEFAULT_RESERVED_PREFIX if reserved_prefix is None else reserved_prefix,
        default_class_name=_as_str(data.get("default_class_name")) or DEFAULT_CLASS_NAME,
        targets=targets,
    )


def _parse_target(entry: Any, index: int) -> TargetConfig:
    target_data = _as_dict(entry)
    if not target_data:
        raise ConfigError(f"Target #{index + 1} must be a mapping")
    directory = _as_str(target_data.get("directory"))
    if not directory:
        raise ConfigError(f"Target #{index + 1} is missing 'directory'")

    include_reserved = _as_bool(target_data.get("include_reserved"))
    auto_generate = _as_bool(target_data.get("auto_generate"))
    return TargetConfig(
        directory=directory,
        file_name=_as_str(target_data.get("file_name")) or None,
        namespace=_as_str(target_data.get("namespace")) or None,
        include_reserved=bool(include_reserved),
        auto_generate=True if auto_generate is None else auto_generate,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None
