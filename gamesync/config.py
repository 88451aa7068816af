"""
Configuration management for Game Sync.

Config files:
- gamesync.json: optional launcher settings at the launcher root
- default_game.txt: name of the active game project (see projects.selection)
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from . import constants

CONFIG_FILE = "gamesync.json"
ROOT_ENV_VAR = "GAMESYNC_ROOT"


@dataclass
class LauncherConfig:
    """Launcher settings, all optional."""
    games_dir: str = constants.GAMES_DIR_NAME
    engine_dir: str = constants.ENGINE_DIR_NAME
    bundled_font_family: str = constants.BUNDLED_FONT_FAMILY
    bundled_font_asset: str = constants.BUNDLED_FONT_ASSET
    bundled_font_weight: int = constants.BUNDLED_FONT_WEIGHT
    path: Optional[Path] = field(default=None, repr=False, compare=False)

    def to_dict(self) -> dict:
        return {
            "games_dir": self.games_dir,
            "engine_dir": self.engine_dir,
            "bundled_font_family": self.bundled_font_family,
            "bundled_font_asset": self.bundled_font_asset,
            "bundled_font_weight": self.bundled_font_weight,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LauncherConfig":
        defaults = cls()
        return cls(
            games_dir=data.get("games_dir", defaults.games_dir),
            engine_dir=data.get("engine_dir", defaults.engine_dir),
            bundled_font_family=data.get("bundled_font_family", defaults.bundled_font_family),
            bundled_font_asset=data.get("bundled_font_asset", defaults.bundled_font_asset),
            bundled_font_weight=int(data.get("bundled_font_weight", defaults.bundled_font_weight)),
        )

    @classmethod
    def load(cls, path: Path) -> "LauncherConfig":
        """Load settings from file. A missing or broken file gives defaults."""
        config = cls()

        if path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    data = json.load(f)
                config = cls.from_dict(data)
            except (json.JSONDecodeError, IOError, ValueError, TypeError) as e:
                print(f"Warning: Could not load {path.name}: {e}")

        config.path = path
        return config

    def save(self):
        """Save settings to file."""
        if not self.path:
            raise ValueError("No path set for config")
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)


@dataclass
class LauncherPaths:
    """Every location the launcher reads or writes, derived from its root."""
    root: Path
    config: LauncherConfig = field(default_factory=LauncherConfig)

    @classmethod
    def from_root(cls, root: Path) -> "LauncherPaths":
        root = Path(root).resolve()
        return cls(root=root, config=LauncherConfig.load(root / CONFIG_FILE))

    @property
    def games_dir(self) -> Path:
        return self.root / self.config.games_dir

    @property
    def engine_dir(self) -> Path:
        return self.root / self.config.engine_dir

    @property
    def engine_assets_dir(self) -> Path:
        return self.engine_dir / constants.ENGINE_ASSETS_DIR

    @property
    def pubspec_path(self) -> Path:
        return self.engine_dir / constants.PUBSPEC_FILE

    @property
    def default_game_file(self) -> Path:
        return self.root / constants.DEFAULT_GAME_FILE

    @property
    def fallback_icon(self) -> Path:
        return self.root / constants.ICON_FILE


def get_launcher_root(cli_root: Optional[str] = None) -> Path:
    """Launcher root: --root, then $GAMESYNC_ROOT, then the working directory."""
    if cli_root:
        return Path(cli_root)
    env_root = os.environ.get(ROOT_ENV_VAR, "")
    if env_root:
        return Path(env_root)
    return Path.cwd()
