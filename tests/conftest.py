"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest

from gamesync.config import LauncherPaths

SAMPLE_PUBSPEC = """\
name: engine
description: Visual novel engine

dependencies:
  flutter:
    sdk: flutter

flutter:
  uses-material-design: true

  assets:
    - assets/old_game/
    - assets/old_game/images/

  fonts:
    - family: OldFont
      fonts:
        - asset: assets/fonts/OldFont.ttf
          weight: 400

  shaders:
    - shaders/blur.frag
"""


@pytest.fixture
def temp_dir():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


def write_file(path: Path, content="", binary: bool = False) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if binary:
        path.write_bytes(content)
    else:
        path.write_text(content)
    return path


def snapshot_tree(root: Path) -> dict:
    """{relative path: bytes or None for directories} for every entry under root."""
    return {
        p.relative_to(root).as_posix(): (p.read_bytes() if p.is_file() else None)
        for p in sorted(root.rglob("*"))
    }


@pytest.fixture
def launcher(temp_dir):
    """
    Launcher root with the Demo game project:

        Game/Demo/Assets/images/chars/hero.png
        Game/Demo/Assets/fonts/Hero.ttf
        Game/Demo/GameScript/labels/start.sks
        Game/Demo/icon.png
        Game/Demo/game_config.txt
        Engine/pubspec.yaml
        Engine/assets/fonts/SourceHanSansCN-Bold.ttf
        default_game.txt
    """
    root = temp_dir
    demo = root / "Game" / "Demo"
    write_file(demo / "Assets" / "images" / "chars" / "hero.png", b"\x89PNG hero", binary=True)
    write_file(demo / "Assets" / "fonts" / "Hero.ttf", b"ttf data", binary=True)
    write_file(demo / "GameScript" / "labels" / "start.sks", "label start\n")
    write_file(demo / "icon.png", b"demo icon", binary=True)
    write_file(demo / "game_config.txt", "Demo\ncom.x.demo\n")
    write_file(root / "Engine" / "pubspec.yaml", SAMPLE_PUBSPEC)
    write_file(root / "Engine" / "assets" / "fonts" / "SourceHanSansCN-Bold.ttf", b"bold", binary=True)
    write_file(root / "default_game.txt", "Demo\n")
    return LauncherPaths.from_root(root)
