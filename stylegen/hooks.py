"""Asset refresh hooks invoked after a generated file is written."""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path
from typing import Callable, Iterable, Protocol

from .logging import get_logger


class AssetRefreshHook(Protocol):
    """Notified once for every target whose generated file was rewritten."""

    def notify_assets_changed(self) -> None:
        ...


class NullRefreshHook:
    """Hook used when nothing needs to react to new files."""

    def notify_assets_changed(self) -> None:
        return None


class CommandRefreshHook:
    """Runs an external command whenever generated files change."""

    def __init__(
        self,
        command: str,
        *,
        cwd: Path | None = None,
        runner: Callable[..., None] | None = None,
    ) -> None:
        self.command = command
        # Unbalanced quotes raise ValueError here.
        self.args = shlex.split(command)
        self.cwd = cwd
        self._runner = runner or self._default_runner
        self.logger = get_logger("hooks")

    def notify_assets_changed(self) -> None:
        if not self.args:
            return
        self.logger.debug("Running refresh command: %s", self.command)
        try:
            self._runner(list(self.args), cwd=self.cwd)
        except (OSError, subprocess.CalledProcessError) as exc:
            self.logger.warning("Refresh command %r failed: %s", self.command, exc)

    @staticmethod
    def _default_runner(args: Iterable[str], *, cwd: Path | None = None) -> None:
        subprocess.run(
            list(args),
            cwd=str(cwd) if cwd is not None else None,
            check=True,
        )


__all__ = ["AssetRefreshHook", "CommandRefreshHook", "NullRefreshHook"]
