"""
Game Sync - keep the Flutter engine in sync with the active game project.

Mirrors a game project's assets and scripts into the engine's asset root and
regenerates the asset and font sections of the engine's pubspec.yaml.

Import from submodules directly:
    from gamesync.config import LauncherPaths
    from gamesync.sync import sync_game_assets
    from gamesync.manifest import ManifestDocument
    from gamesync.pipeline import run_pipeline
"""


def _get_version():
    """Read version from VERSION file."""
    from pathlib import Path
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    return "0.0.0"


__version__ = _get_version()
