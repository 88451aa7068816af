"""
Game project model.

A game project is a directory under Game/ holding Assets/, GameScript/,
an optional icon.png and the game_config.txt identity descriptor.
"""

from dataclasses import dataclass
from pathlib import Path

from .. import constants
from ..errors import ValidationError


@dataclass
class AppIdentity:
    """Display name and bundle identifier of the built application."""
    app_name: str
    bundle_id: str


def parse_identity(text: str) -> AppIdentity:
    """
    Parse identity descriptor text.

    Line 1 is the display name, line 2 the bundle id. Blank lines are
    skipped and anything after the second line is ignored.
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise ValidationError(
            f"{constants.IDENTITY_FILE} needs an app name and a bundle id "
            f"on two lines, found {len(lines)} non-blank line(s)"
        )
    return AppIdentity(app_name=lines[0], bundle_id=lines[1])


def read_identity(project_root: Path) -> AppIdentity:
    """Read and parse the identity descriptor of a game project."""
    config_file = Path(project_root) / constants.IDENTITY_FILE
    if not config_file.is_file():
        raise ValidationError(f"No valid {constants.IDENTITY_FILE} found in {project_root}")
    try:
        text = config_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ValidationError(f"Could not read {config_file}: {e}") from e
    return parse_identity(text)


def project_fonts_dir(project_root: Path) -> Path:
    """Assets/fonts of a game project."""
    return Path(project_root) / constants.PROJECT_ASSETS_DIR / constants.PROJECT_FONTS_DIR


@dataclass(frozen=True)
class ContentProject:
    """A resolved game project. Read-only to the sync pipeline."""
    name: str
    root: Path

    @classmethod
    def load(cls, games_dir: Path, name: str) -> "ContentProject":
        root = Path(games_dir) / name
        if not name or not root.is_dir():
            raise ValidationError(f"Game directory does not exist: {root}")
        return cls(name=name, root=root)

    @property
    def assets_dir(self) -> Path:
        return self.root / constants.PROJECT_ASSETS_DIR

    @property
    def script_dir(self) -> Path:
        return self.root / constants.PROJECT_SCRIPT_DIR

    @property
    def fonts_dir(self) -> Path:
        return project_fonts_dir(self.root)

    @property
    def icon(self) -> Path:
        return self.root / constants.ICON_FILE

    def identity(self) -> AppIdentity:
        return read_identity(self.root)
