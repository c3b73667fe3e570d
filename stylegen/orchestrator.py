"""Pass driver: collect, compare and emit for every configured target."""

from __future__ import annotations

import errno
from pathlib import Path
from typing import Iterable, List, Optional

from .collector import collect
from .config import StyleGenConfig
from .emitter import render
from .errors import ConstantNameCollisionError, TargetDirectoryError
from .hooks import AssetRefreshHook, NullRefreshHook
from .logging import get_logger
from .manifest import needs_regeneration
from .models import (
    DEFAULT_CLASS_NAME,
    DEFAULT_EXTENSION,
    DEFAULT_RESERVED_PREFIX,
    TargetConfig,
    TargetOutcome,
)


class Orchestrator:
    """Runs the collect / change-detect / emit pipeline over targets in sequence."""

    def __init__(
        self,
        asset_root: Path | str,
        *,
        targets: Optional[Iterable[TargetConfig]] = None,
        extension: str = DEFAULT_EXTENSION,
        reserved_prefix: str = DEFAULT_RESERVED_PREFIX,
        default_class_name: str = DEFAULT_CLASS_NAME,
        refresh_hook: AssetRefreshHook | None = None,
    ) -> None:
        self.asset_root = Path(asset_root)
        self.targets = list(targets) if targets is not None else []
        self.extension = extension
        self.reserved_prefix = reserved_prefix
        self.default_class_name = default_class_name
        self.refresh_hook = refresh_hook or NullRefreshHook()
        self.logger = get_logger("orchestrator")

    @classmethod
    def from_config(
        cls, config: StyleGenConfig, *, refresh_hook: AssetRefreshHook | None = None
    ) -> "Orchestrator":
        return cls(
            config.asset_root,
            targets=config.targets,
            extension=config.extension,
            reserved_prefix=config.reserved_prefix,
            default_class_name=config.default_class_name,
            refresh_hook=refresh_hook,
        )

    def run(
        self, targets: Optional[Iterable[TargetConfig]] = None, *, auto: bool = False
    ) -> List[TargetOutcome]:
        """Regenerate stale targets.

        In auto mode targets that opted out of automatic generation are skipped
        without being scanned.
        """
        selected = self._select(targets)
        self.logger.debug("Processing %d targets (auto=%s)", len(selected), auto)
        return [self._process(target, auto=auto, write=True) for target in selected]

    def check(self, targets: Optional[Iterable[TargetConfig]] = None) -> List[TargetOutcome]:
        """Report which targets are stale without writing anything."""
        return [self._process(target, auto=False, write=False) for target in self._select(targets)]

    def _select(self, targets: Optional[Iterable[TargetConfig]]) -> List[TargetConfig]:
        return list(targets) if targets is not None else list(self.targets)

    def _process(self, target: TargetConfig, *, auto: bool, write: bool) -> TargetOutcome:
        if auto and not target.auto_generate:
            return TargetOutcome(target=target, status="skipped")

        output_path = target.output_path(self.asset_root, self.default_class_name)
        try:
            outcome = self._generate(target, output_path, write=write)
        except TargetDirectoryError as exc:
            self.logger.warning("%s", exc)
            return TargetOutcome(target=target, status="missing", message=str(exc))
        except OSError as exc:
            if exc.errno == errno.ENOSPC:
                raise
            return self._failed(target, output_path, exc)
        except (UnicodeDecodeError, ConstantNameCollisionError) as exc:
            return self._failed(target, output_path, exc)

        if outcome.wrote:
            self._notify_refresh(output_path)
        return outcome

    def _generate(self, target: TargetConfig, output_path: Path, *, write: bool) -> TargetOutcome:
        class_names = collect(
            target.style_root(self.asset_root),
            self.extension,
            target.include_reserved,
            reserved_prefix=self.reserved_prefix,
        )

        if not needs_regeneration(output_path, class_names):
            self.logger.debug("%s is up to date", output_path)
            return TargetOutcome(
                target=target,
                status="unchanged",
                output_path=output_path,
                class_count=len(class_names),
            )

        content = render(target, class_names, default_class_name=self.default_class_name)
        if not write:
            return TargetOutcome(
                target=target,
                status="stale",
                output_path=output_path,
                class_count=len(class_names),
            )

        _write_artifact(output_path, content)
        self.logger.info("Generated %s with %d classes", output_path, len(class_names))
        return TargetOutcome(
            target=target,
            status="written",
            output_path=output_path,
            class_count=len(class_names),
        )

    def _notify_refresh(self, output_path: Path) -> None:
        try:
            self.refresh_hook.notify_assets_changed()
        except Exception as exc:
            self.logger.warning("Asset refresh after writing %s failed: %s", output_path, exc)

    def _failed(self, target: TargetConfig, output_path: Path, exc: Exception) -> TargetOutcome:
        self.logger.warning("Failed to generate %s: %s", output_path, exc)
        return TargetOutcome(
            target=target,
            status="failed",
            output_path=output_path,
            message=str(exc),
        )


def _write_artifact(output_path: Path, content: str) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8", newline="\n")


__all__ = ["Orchestrator"]
