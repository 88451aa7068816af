"""
Game project model and asset mirroring.
"""

from .content import AppIdentity, ContentProject, parse_identity, project_fonts_dir, read_identity
from .mirror import (
    ICON_FROM_FALLBACK,
    ICON_FROM_GAME,
    SyncReport,
    clear_mirrors,
    resolve_icon,
    sync_game_assets,
)

__all__ = [
    # Content project
    "AppIdentity",
    "ContentProject",
    "parse_identity",
    "project_fonts_dir",
    "read_identity",
    # Mirroring
    "ICON_FROM_FALLBACK",
    "ICON_FROM_GAME",
    "SyncReport",
    "clear_mirrors",
    "resolve_icon",
    "sync_game_assets",
]
