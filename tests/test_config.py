"""Tests for stylegen.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from stylegen.config import StyleGenConfig, load_config
from stylegen.errors import ConfigError
from stylegen.models import TargetConfig


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, StyleGenConfig)
    assert config.root == tmp_path.resolve()
    assert config.asset_root == tmp_path.resolve() / "Assets"
    assert config.extension == "uss"
    assert config.reserved_prefix == "unity-"
    assert config.default_class_name == "StyleClasses"
    assert config.targets == []


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".stylegen.yml"
    config_file.write_text(
        """
asset_root: "Content"
extension: ".USS"
reserved_prefix: "engine-"
default_class_name: "Css"
targets:
  - directory: "UI/Styles"
    file_name: "UiClasses"
    namespace: "Game.UI"
    include_reserved: yes
    auto_generate: false
  - directory: Hud
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.asset_root == (tmp_path / "Content").resolve()
    assert config.extension == ".USS"
    assert config.reserved_prefix == "engine-"
    assert config.default_class_name == "Css"
    assert config.targets == [
        TargetConfig(
            directory="UI/Styles",
            file_name="UiClasses",
            namespace="Game.UI",
            include_reserved=True,
            auto_generate=False,
        ),
        TargetConfig(directory="Hud"),
    ]


def test_empty_reserved_prefix_is_kept(tmp_path: Path) -> None:
    (tmp_path / ".stylegen.yml").write_text('reserved_prefix: ""\n', encoding="utf-8")

    assert load_config(tmp_path).reserved_prefix == ""


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "targets: UI\n",
        "targets:\n  - file_name: NoDirectory\n",
        "targets:\n  - plain string\n",
        "targets: [unclosed\n",
    ],
)
def test_load_config_rejects_invalid_documents(tmp_path: Path, content: str) -> None:
    (tmp_path / ".stylegen.yml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_target_output_path_uses_default_class_name(tmp_path: Path) -> None:
    target = TargetConfig(directory="UI")

    assert target.output_path(tmp_path) == tmp_path / "UI" / "StyleClasses.cs"
    assert target.output_path(tmp_path, "Css") == tmp_path / "UI" / "Css.cs"
