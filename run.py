#!/usr/bin/env python3
"""
Game Sync - launch the engine with the selected game project.

Picks (or creates) the active game project, mirrors its assets into the
engine, regenerates pubspec.yaml and starts the Flutter build.
"""

import argparse
import sys
from typing import Optional

from gamesync.config import LauncherPaths, get_launcher_root
from gamesync.constants import PUBSPEC_BACKUP_FILE
from gamesync.errors import GameSyncError
from gamesync.manifest import backup_pubspec, restore_pubspec, validate_pubspec_format
from gamesync.pipeline import run_pipeline
from gamesync.projects import (
    create_new_project,
    read_default_game,
    select_game,
    set_default_game,
    validate_game_dir,
)
from gamesync.sync import ContentProject
from gamesync.toolchain import (
    check_flutter,
    detect_platform,
    platform_display_name,
    run_flutter_build,
    set_app_identity,
)
from gamesync.ui import (
    ACTION_CREATE,
    ACTION_SELECT,
    Ask,
    CancelInput,
    ConsoleReporter,
    Reporter,
    choose_startup_action,
    print_header,
    terminal_ask,
)


class LauncherApp:
    """Main application controller."""

    def __init__(self, paths: LauncherPaths, ask: Ask = terminal_ask, reporter: Optional[Reporter] = None):
        self.paths = paths
        self.ask = ask
        self.reporter = reporter or ConsoleReporter()

    def handle_game_selection(self, game: Optional[str] = None):
        """Settle which game is the default before launching."""
        if game:
            if not set_default_game(self.paths, game):
                raise GameSyncError(f"Game directory does not exist: {self.paths.games_dir / game}")
            return

        current = read_default_game(self.paths.default_game_file)
        if not current:
            self.reporter.step("No default game configured...")

        action = choose_startup_action(current, self.ask, self.reporter)
        if action == ACTION_SELECT:
            select_game(self.paths, self.ask, self.reporter)
        elif action == ACTION_CREATE:
            if create_new_project(self.paths, self.ask, self.reporter) is None and not current:
                select_game(self.paths, self.ask, self.reporter)

    def resolve_project(self) -> ContentProject:
        """Load the default game, re-prompting once if its directory is gone."""
        name = read_default_game(self.paths.default_game_file)
        if not name:
            raise GameSyncError("Could not read the game project name")

        if validate_game_dir(self.paths.games_dir, name) is None:
            self.reporter.error(f"Game directory does not exist: {self.paths.games_dir / name}")
            self.reporter.step("Restarting game selection...")
            name = select_game(self.paths, self.ask, self.reporter)

        return ContentProject.load(self.paths.games_dir, name)

    def prepare_manifest(self) -> bool:
        """Check pubspec.yaml and back it up before it is rewritten."""
        if not validate_pubspec_format(self.paths.engine_dir, self.reporter):
            return False
        if backup_pubspec(self.paths.engine_dir):
            self.reporter.info(f"Backed up pubspec.yaml to {self.paths.engine_dir / PUBSPEC_BACKUP_FILE}")
        return True

    def restore_manifest(self) -> int:
        """Put the last pubspec.yaml backup back in place."""
        if not restore_pubspec(self.paths.engine_dir):
            self.reporter.error(f"No backup found: {self.paths.engine_dir / PUBSPEC_BACKUP_FILE}")
            return 1
        self.reporter.success("pubspec.yaml restored from backup")
        return 0

    def run(self, web: bool = False, build: bool = True, game: Optional[str] = None) -> int:
        """Launcher flow. Returns the process exit code."""
        r = self.reporter

        platform_name = detect_platform()
        r.success(f"Detected operating system: {platform_display_name(platform_name)}")
        if build:
            if not check_flutter(platform_name):
                r.error(f"{platform_display_name(platform_name)} is not supported or Flutter is missing")
                r.step("Make sure the Flutter SDK is installed")
                return 1
            r.success("Flutter found")
        print()

        self.handle_game_selection(game)
        project = self.resolve_project()
        print()
        r.success(f"Game project: {project.name}")
        r.info(f"Game path: {project.root}")

        r.step("Reading game configuration...")
        identity = project.identity()
        r.success(f"App name: {identity.app_name}")
        r.success(f"Bundle id: {identity.bundle_id}")

        if not self.prepare_manifest():
            return 1

        if build:
            set_app_identity(self.paths.engine_dir, identity, r)

        result = run_pipeline(self.paths, project, r)
        if not result.ok:
            r.error(f"Step '{result.failed_step}' failed; fix the problem above and run again.")
            r.info("The previous pubspec.yaml can be put back with --restore-pubspec.")
            return 1

        if build:
            print()
            target = "chrome" if web else platform_name
            run_flutter_build(self.paths.engine_dir, project.root, target, r)
        return 0


def main() -> int:
    """Entry point."""
    parser = argparse.ArgumentParser(
        description="Game Sync - launch the engine with the selected game project"
    )
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["web"],
        help="Run in Chrome instead of the desktop target"
    )
    parser.add_argument("--root", help="Launcher root (default: $GAMESYNC_ROOT or current directory)")
    parser.add_argument("--game", help="Use this game project without prompting")
    parser.add_argument(
        "--no-build",
        action="store_true",
        help="Only sync assets and pubspec.yaml, skip identity renaming and Flutter"
    )
    parser.add_argument(
        "--restore-pubspec",
        action="store_true",
        help="Restore Engine/pubspec.yaml from the last backup and exit"
    )
    parser.add_argument("--no-color", action="store_true", help="Plain output")
    args = parser.parse_args()

    print_header()
    paths = LauncherPaths.from_root(get_launcher_root(args.root))
    reporter = ConsoleReporter(use_color=not args.no_color)
    app = LauncherApp(paths, reporter=reporter)

    try:
        if args.restore_pubspec:
            return app.restore_manifest()
        return app.run(web=args.mode == "web", build=not args.no_build, game=args.game)
    except GameSyncError as e:
        reporter.error(f"Launch failed: {e}")
        return 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except (KeyboardInterrupt, CancelInput):
        print("\n\nCancelled by user.")
        sys.exit(0)
