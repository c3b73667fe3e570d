"""CLI behaviour tests."""

from __future__ import annotations

import pytest

from stylegen.cli import _build_parser, main
from stylegen.hooks import CommandRefreshHook


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "generate"])
    assert args.verbose is True
    assert args.command == "generate"
    assert args.path == "."


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["check", "--verbose"])
    assert args.verbose is True
    assert args.command == "check"


def test_cli_accepts_auto_and_on_change() -> None:
    parser = _build_parser()
    args = parser.parse_args(["generate", "project", "--auto", "--on-change", "touch refreshed"])
    assert args.auto is True
    assert args.on_change == "touch refreshed"
    assert args.path == "project"


def test_generate_writes_configured_targets(style_tree, capsys) -> None:
    style_tree.write({"UI/a.uss": ".foo {} .bar {}"})
    style_tree.write_config(
        """
        targets:
          - directory: UI
            file_name: UiClasses
        """
    )

    main(["generate", str(style_tree.project)])

    out = capsys.readouterr().out
    assert "written" in out
    assert "(2 classes)" in out
    assert (style_tree.assets / "UI" / "UiClasses.cs").exists()


def test_check_exits_non_zero_when_stale(style_tree) -> None:
    style_tree.write({"UI/a.uss": ".foo {}"})
    style_tree.write_config(
        """
        targets:
          - directory: UI
        """
    )

    with pytest.raises(SystemExit) as excinfo:
        main(["check", str(style_tree.project)])
    assert excinfo.value.code == 1

    main(["generate", str(style_tree.project)])
    main(["check", str(style_tree.project)])


def test_invalid_config_exits_with_code_two(style_tree) -> None:
    style_tree.write_config("targets: UI\n")

    with pytest.raises(SystemExit) as excinfo:
        main(["generate", str(style_tree.project)])

    assert excinfo.value.code == 2


def test_generate_without_targets_reports_and_returns(tmp_path, capsys) -> None:
    main(["generate", str(tmp_path)])

    assert "No targets configured" in capsys.readouterr().out


def test_cli_accepts_quiet_flag() -> None:
    parser = _build_parser()
    args = parser.parse_args(["generate", "--quiet"])
    assert args.quiet is True


def test_generate_exits_non_zero_when_a_target_fails(style_tree, capsys) -> None:
    style_tree.write({"UI/a.uss": ".btn-icon {} .btn_icon {}", "Ok/a.uss": ".ok {}"})
    style_tree.write_config(
        """
        targets:
          - directory: UI
          - directory: Ok
        """
    )

    with pytest.raises(SystemExit) as excinfo:
        main(["generate", str(style_tree.project)])

    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert "failed" in out
    assert (style_tree.assets / "Ok" / "StyleClasses.cs").exists()


def test_generate_auto_skips_targets_without_auto_generate(style_tree, capsys) -> None:
    style_tree.write({"Manual/a.uss": ".foo {}", "Auto/a.uss": ".bar {}"})
    style_tree.write_config(
        """
        targets:
          - directory: Manual
            auto_generate: false
          - directory: Auto
        """
    )

    main(["generate", str(style_tree.project), "--auto"])

    out = capsys.readouterr().out
    assert "skipped" in out
    assert not (style_tree.assets / "Manual" / "StyleClasses.cs").exists()
    assert (style_tree.assets / "Auto" / "StyleClasses.cs").exists()

    main(["generate", str(style_tree.project)])
    assert (style_tree.assets / "Manual" / "StyleClasses.cs").exists()


def test_on_change_runs_command_from_project_root(style_tree, monkeypatch) -> None:
    calls: list[tuple[list[str], object]] = []

    def fake_runner(args, *, cwd=None) -> None:
        calls.append((list(args), cwd))

    monkeypatch.setattr(CommandRefreshHook, "_default_runner", staticmethod(fake_runner))
    style_tree.write({"A/a.uss": ".foo {}", "B/b.uss": ".bar {}"})
    style_tree.write_config(
        """
        targets:
          - directory: A
          - directory: B
        """
    )

    main(["generate", str(style_tree.project), "--on-change", "refresh-assets --all"])
    main(["generate", str(style_tree.project), "--on-change", "refresh-assets --all"])

    expected_cwd = style_tree.project.resolve()
    assert calls == [
        (["refresh-assets", "--all"], expected_cwd),
        (["refresh-assets", "--all"], expected_cwd),
    ]


def test_malformed_on_change_exits_before_writing(style_tree) -> None:
    style_tree.write({"UI/a.uss": ".foo {}"})
    style_tree.write_config(
        """
        targets:
          - directory: UI
        """
    )

    with pytest.raises(SystemExit) as excinfo:
        main(["generate", str(style_tree.project), "--on-change", "refresh 'unterminated"])

    assert excinfo.value.code == 2
    assert not (style_tree.assets / "UI" / "StyleClasses.cs").exists()
