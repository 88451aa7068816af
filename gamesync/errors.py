"""
Error types for Game Sync.

Every fatal condition derives from GameSyncError so the pipeline can turn it
into a failed step. MissingIconWarning is never raised; it is handed to the
reporter and the pipeline carries on.
"""

from pathlib import Path
from typing import Optional


class GameSyncError(Exception):
    """Base class for fatal Game Sync errors."""
    pass


class ManifestNotFound(GameSyncError):
    """The engine's pubspec.yaml does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Manifest not found: {path}")


class SectionNotFound(GameSyncError):
    """No line matches a section's anchor pattern."""

    def __init__(self, section: str):
        self.section = section
        super().__init__(
            f'Section "  {section}:" not found. '
            f"Make sure it exists and is indented with exactly two spaces."
        )


class FilesystemError(GameSyncError):
    """Copy, delete, read or write failed at the OS level."""

    def __init__(self, action: str, path: Path, cause: Optional[OSError] = None):
        self.action = action
        self.path = path
        self.cause = cause
        detail = f": {cause.strerror or cause}" if cause is not None else ""
        super().__init__(f"Failed to {action} {path}{detail}")


class ValidationError(GameSyncError):
    """User-supplied data (identity descriptor, project name...) is invalid."""
    pass


class ToolchainError(GameSyncError):
    """An external tool (flutter, dart) failed or is missing."""
    pass


class MissingIconWarning(UserWarning):
    """Neither the game project nor the launcher root has an icon."""

    def __init__(self, project_icon: Path, fallback_icon: Path):
        self.project_icon = project_icon
        self.fallback_icon = fallback_icon
        super().__init__(
            f"No icon.png found (looked in {project_icon} and {fallback_icon})"
        )
