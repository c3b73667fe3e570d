"""Core data models shared across stylegen components."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_CLASS_NAME = "StyleClasses"
DEFAULT_EXTENSION = "uss"
DEFAULT_RESERVED_PREFIX = "unity-"
GENERATED_SUFFIX = ".cs"


@dataclass(frozen=True)
class TargetConfig:
    """One directory of style sheets and the constants file generated for it."""

    directory: str
    file_name: Optional[str] = None
    namespace: Optional[str] = None
    include_reserved: bool = False
    auto_generate: bool = True

    def class_name(self, default: str = DEFAULT_CLASS_NAME) -> str:
        return self.file_name or default

    def style_root(self, asset_root: Path) -> Path:
        return asset_root / self.directory

    def output_path(self, asset_root: Path, default: str = DEFAULT_CLASS_NAME) -> Path:
        """Return where the generated file for this target lives."""
        return self.style_root(asset_root) / f"{self.class_name(default)}{GENERATED_SUFFIX}"


@dataclass
class TargetOutcome:
    """Result of processing a single target during a pass."""

    target: TargetConfig
    status: str
    output_path: Optional[Path] = None
    class_count: int = 0
    message: Optional[str] = None

    @property
    def wrote(self) -> bool:
        return self.status == "written"
