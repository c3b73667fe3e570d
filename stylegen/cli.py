"""CLI entrypoints for stylegen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from .config import load_config
from .errors import ConfigError
from .hooks import AssetRefreshHook, CommandRefreshHook
from .logging import configure_logging
from .models import TargetOutcome
from .orchestrator import Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    _add_verbose_option(parser, suppress_default=True)
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only print warnings and errors to the console.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Project root or path to .stylegen.yml (defaults to current directory).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log output to this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stylegen",
        description="Generate C# constants for the class selectors found in style sheets.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Regenerate constants files whose class sets changed.",
    )
    _add_common_options(generate_parser)
    generate_parser.add_argument(
        "--auto",
        action="store_true",
        help="Only process targets with auto_generate enabled.",
    )
    generate_parser.add_argument(
        "--on-change",
        default=None,
        metavar="COMMAND",
        help="Command to run once for every generated file that was rewritten.",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Report stale constants files without writing them.",
    )
    _add_common_options(check_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for stylegen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        quiet=bool(args.quiet),
        log_file=args.log_file,
    )

    try:
        config = load_config(Path(args.path))
    except ConfigError as exc:
        parser.exit(2, f"{exc}\n")

    if not config.targets:
        print(f"No targets configured in {config.root}")
        return

    hook: AssetRefreshHook | None = None
    on_change = getattr(args, "on_change", None)
    if on_change:
        try:
            hook = CommandRefreshHook(on_change, cwd=config.root)
        except ValueError as exc:
            parser.error(f"invalid --on-change command: {exc}")

    orchestrator = Orchestrator.from_config(config, refresh_hook=hook)

    if args.command == "generate":
        outcomes = orchestrator.run(auto=bool(args.auto))
        _report(outcomes, config.root)
        if any(outcome.status == "failed" for outcome in outcomes):
            parser.exit(1, "stylegen generate failed for one or more targets.\n")
    elif args.command == "check":
        outcomes = orchestrator.check()
        _report(outcomes, config.root)
        if any(outcome.status in {"stale", "failed"} for outcome in outcomes):
            parser.exit(1, "Generated style classes are out of date. Run `stylegen generate`.\n")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _report(outcomes: List[TargetOutcome], root: Path) -> None:
    for outcome in outcomes:
        location = _relativize(outcome.output_path, root) if outcome.output_path else outcome.target.directory
        detail = f" ({outcome.class_count} classes)" if outcome.status in {"written", "unchanged", "stale"} else ""
        print(f"{outcome.status:<9} {location}{detail}")


def _relativize(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
