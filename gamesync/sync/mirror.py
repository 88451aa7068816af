"""
Mirror a game project into the engine's asset root.

The mirror is destroy-then-recreate: the previous project's Assets/ and
GameScript/ copies are deleted before the new ones are copied, so nothing
from an earlier project survives a sync.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .. import constants
from ..core.files import copy_file, copy_tree, remove_tree
from ..errors import FilesystemError, MissingIconWarning
from ..ui.reporter import Reporter
from .content import ContentProject

ICON_FROM_GAME = "game"
ICON_FROM_FALLBACK = "fallback"


@dataclass
class SyncReport:
    """What a sync pass did."""
    files_copied: int = 0
    marker_copied: bool = False
    icon_source: Optional[str] = None  # ICON_FROM_GAME, ICON_FROM_FALLBACK or None


def clear_mirrors(engine_asset_root: Path):
    """Delete the mirrored Assets/ and GameScript/ trees (absence is fine)."""
    remove_tree(engine_asset_root / constants.MIRROR_ASSETS_DIR)
    remove_tree(engine_asset_root / constants.MIRROR_SCRIPT_DIR)


def resolve_icon(
    engine_asset_root: Path,
    project_icon: Path,
    fallback_icon: Path,
    reporter: Reporter,
) -> Optional[str]:
    """
    Copy the application icon into the asset root.

    The game's own icon wins over the launcher-wide one. When neither
    exists the destination is left untouched and a MissingIconWarning is
    reported. Returns where the icon came from, or None.
    """
    target = engine_asset_root / constants.ICON_FILE

    if project_icon.is_file():
        reporter.info(f"Using {constants.ICON_FILE} from the game directory")
        copy_file(project_icon, target)
        return ICON_FROM_GAME

    if fallback_icon.is_file():
        reporter.info(f"No {constants.ICON_FILE} in the game directory, using the launcher icon")
        copy_file(fallback_icon, target)
        return ICON_FROM_FALLBACK

    reporter.warning(MissingIconWarning(project_icon, fallback_icon))
    return None


def sync_game_assets(
    engine_asset_root: Path,
    project: ContentProject,
    launcher_root: Path,
    reporter: Optional[Reporter] = None,
) -> SyncReport:
    """
    Mirror a game project into engine_asset_root.

    Args:
        engine_asset_root: Engine/assets directory
        project: Resolved game project
        launcher_root: Directory holding default_game.txt and the fallback icon
        reporter: Receives progress and warning events

    Returns:
        SyncReport describing the pass

    Raises:
        FilesystemError: any copy or delete failure
    """
    reporter = reporter or Reporter()
    engine_asset_root = Path(engine_asset_root)
    launcher_root = Path(launcher_root)
    report = SyncReport()

    reporter.step("Removing previously mirrored assets...")
    clear_mirrors(engine_asset_root)

    try:
        engine_asset_root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError("create", engine_asset_root, e) from e

    reporter.step("Copying game assets and scripts...")
    if project.assets_dir.is_dir():
        report.files_copied += copy_tree(
            project.assets_dir, engine_asset_root / constants.MIRROR_ASSETS_DIR
        )
    if project.script_dir.is_dir():
        report.files_copied += copy_tree(
            project.script_dir, engine_asset_root / constants.MIRROR_SCRIPT_DIR
        )

    marker = launcher_root / constants.DEFAULT_GAME_FILE
    if marker.is_file():
        reporter.step(f"Copying {constants.DEFAULT_GAME_FILE} into the asset root...")
        copy_file(marker, engine_asset_root / constants.DEFAULT_GAME_FILE)
        report.marker_copied = True

    reporter.step("Resolving application icon...")
    report.icon_source = resolve_icon(
        engine_asset_root,
        project.icon,
        launcher_root / constants.ICON_FILE,
        reporter,
    )

    reporter.success(f"Assets synced ({report.files_copied} files).")
    return report
