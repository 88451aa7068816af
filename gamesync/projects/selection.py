"""
Which game project is active.

The active project's name lives in default_game.txt at the launcher root.
"""

from pathlib import Path
from typing import List, Optional

from ..config import LauncherPaths
from ..errors import FilesystemError, ValidationError
from ..ui.prompts import Ask, choose_from_list
from ..ui.reporter import Reporter


def list_game_projects(games_dir: Path) -> List[str]:
    """Sorted names of the directories under Game/ (empty if it is missing)."""
    games_dir = Path(games_dir)
    if not games_dir.is_dir():
        return []
    try:
        return sorted(p.name for p in games_dir.iterdir() if p.is_dir())
    except OSError:
        return []


def read_default_game(default_game_file: Path) -> Optional[str]:
    """Stripped content of default_game.txt, or None if missing or empty."""
    try:
        content = Path(default_game_file).read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError):
        return None
    return content or None


def write_default_game(default_game_file: Path, name: str):
    default_game_file = Path(default_game_file)
    try:
        default_game_file.write_text(name + "\n", encoding="utf-8")
    except OSError as e:
        raise FilesystemError("write", default_game_file, e) from e


def validate_game_dir(games_dir: Path, name: Optional[str]) -> Optional[Path]:
    """Game directory path if it exists, else None."""
    if not name:
        return None
    game_dir = Path(games_dir) / name
    if game_dir.is_dir():
        return game_dir
    return None


def set_default_game(paths: LauncherPaths, name: str) -> bool:
    """Make name the active game without prompting. False if it does not exist."""
    if validate_game_dir(paths.games_dir, name) is None:
        return False
    write_default_game(paths.default_game_file, name)
    return True


def select_game(paths: LauncherPaths, ask: Ask, reporter: Optional[Reporter] = None) -> str:
    """
    Let the user pick the active game and save it to default_game.txt.

    Raises:
        ValidationError: Game/ is missing or holds no projects
    """
    reporter = reporter or Reporter()

    if not paths.games_dir.is_dir():
        raise ValidationError(f"Game directory does not exist: {paths.games_dir}")

    reporter.step("Scanning available game projects...")
    games = list_game_projects(paths.games_dir)
    if not games:
        raise ValidationError(f"No game projects found in {paths.games_dir}")

    current = read_default_game(paths.default_game_file)
    if current:
        reporter.info(f"Current default game: {current}")

    reporter.step("Available game projects:")
    selected = choose_from_list(games, ask, reporter, prompt="Select the default game project")

    write_default_game(paths.default_game_file, selected)
    reporter.success(f"'{selected}' is now the default game project")
    reporter.info(f"Saved to: {paths.default_game_file}")
    return selected
