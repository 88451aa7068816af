"""
New game project scaffolding.

Creates the standard Assets/ and GameScript/ layout, the identity
descriptor and a few starter scripts under Game/<name>/.
"""

import re
from pathlib import Path
from typing import Optional

from .. import constants
from ..config import LauncherPaths
from ..errors import FilesystemError
from ..ui.prompts import Ask, ask_until_valid, confirm
from ..ui.reporter import Reporter
from .selection import write_default_game

PROJECT_NAME_RE = re.compile(r"^[a-zA-Z0-9_-]+$")
BUNDLE_ID_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9]*(\.[a-zA-Z][a-zA-Z0-9]*){2,}$")
HEX_COLOR_RE = re.compile(r"^[0-9A-Fa-f]{6}$")

PROJECT_DIRS = [
    "Assets",
    "Assets/fonts",
    "Assets/images",
    "Assets/images/backgrounds",
    "Assets/images/characters",
    "Assets/images/items",
    "Assets/gui",
    "Assets/music",
    "Assets/sound",
    "Assets/voice",
    "GameScript",
    "GameScript/configs",
    "GameScript/labels",
]

CHARACTERS_TEMPLATE = """\
//chara// Character definitions
// Format: alias : "Display name" : resource id

main : "Protagonist" : narrator
nr : "Narrator" : narrator
n : "Blank" : narrator
"""

POSES_TEMPLATE = """\
//pos// Pose definitions
// Format: name: scale=<scale> xcenter=<x> ycenter=<y> anchor=<anchor>
// scale=0 fits the sprite inside the screen, scale>0 is a fraction of screen height.

center: scale=0 xcenter=0.5 ycenter=1.0 anchor=bottomCenter
left: scale=0 xcenter=0.25 ycenter=1.0 anchor=bottomCenter
right: scale=0 xcenter=0.75 ycenter=1.0 anchor=bottomCenter
closeup: scale=0.8 xcenter=0.5 ycenter=0.8 anchor=center
pose: scale=1.5 ycenter=0.8 anchor=center
"""

CONFIGS_TEMPLATE = """\
//config// Engine configuration
theme: color={rgb_color}
base_textbutton: size=40
base_dialogue: size=24
base_speaker: size=35
base_choice: size=24
base_review_title: size=45
base_quick_menu: size=25
main_menu: background=sky size=200 top=0.3 right=0.05
"""

START_TEMPLATE = """\
//label// Story script
label start
// scene bg background_name

nr "Welcome to your new project!"

menu
"Start" start_game
"Quit" quit_game
endmenu

label start_game
nr "Write your story here..."
return

label quit_game
nr "Thanks for playing!"
return
"""

README_TEMPLATE = """\
# {name}

Visual novel project.

- **Project name**: {name}
- **Bundle ID**: {bundle_id}
- **Primary color**: #{color}

## Layout

- `Assets/` - fonts, images (backgrounds, characters, items), gui, music, sound, voice
- `GameScript/configs/` - characters.sks, poses.sks, configs.sks
- `GameScript/labels/` - story scripts, starting at start.sks

Fonts (.ttf/.otf) dropped into `Assets/fonts/` are registered as font
families named after the file on the next launch.
"""


def validate_project_name(name: str) -> bool:
    """Letters, digits, underscores and hyphens only."""
    return bool(name) and bool(PROJECT_NAME_RE.match(name.strip()))


def validate_bundle_id(bundle_id: str) -> bool:
    """At least three dot-separated segments, each starting with a letter."""
    return bool(bundle_id) and bool(BUNDLE_ID_RE.match(bundle_id.strip()))


def validate_hex_color(color: str) -> bool:
    """Six hex digits, with or without a leading #."""
    if not color or not color.strip():
        return False
    return bool(HEX_COLOR_RE.match(color.strip().replace("#", "")))


def hex_to_rgb(hex_color: str) -> str:
    """'#137B8B' -> 'rgb(19, 123, 139)'"""
    clean = hex_color.strip().replace("#", "")
    r, g, b = (int(clean[i:i + 2], 16) for i in (0, 2, 4))
    return f"rgb({r}, {g}, {b})"


def create_project_structure(
    project_dir: Path,
    name: str,
    bundle_id: str,
    color: str,
    reporter: Optional[Reporter] = None,
):
    """Create directories and starter files for a new game project."""
    reporter = reporter or Reporter()
    project_dir = Path(project_dir)

    files = {
        constants.IDENTITY_FILE: f"{name}\n{bundle_id}\n\n",
        "GameScript/configs/characters.sks": CHARACTERS_TEMPLATE,
        "GameScript/configs/poses.sks": POSES_TEMPLATE,
        "GameScript/configs/configs.sks": CONFIGS_TEMPLATE.format(rgb_color=hex_to_rgb(color)),
        "GameScript/labels/start.sks": START_TEMPLATE,
        "README.md": README_TEMPLATE.format(name=name, bundle_id=bundle_id, color=color),
    }

    try:
        reporter.step("Creating directory structure...")
        for rel_dir in PROJECT_DIRS:
            (project_dir / rel_dir).mkdir(parents=True, exist_ok=True)

        reporter.step("Writing starter files...")
        for rel_path, content in files.items():
            (project_dir / rel_path).write_text(content, encoding="utf-8")
    except OSError as e:
        raise FilesystemError("create", project_dir, e) from e


def create_new_project(paths: LauncherPaths, ask: Ask, reporter: Optional[Reporter] = None) -> Optional[str]:
    """
    Interactive new-project wizard.

    Returns the project name, or None if the user declined at the
    confirmation step.
    """
    reporter = reporter or Reporter()

    while True:
        reporter.step("Project name (letters, digits, underscores and hyphens):")
        name = ask_until_valid(
            "Project name: ", validate_project_name, ask, reporter,
            error="Invalid project name. Use only letters, digits, underscores and hyphens.",
        )
        if (paths.games_dir / name).exists():
            reporter.error(f"Project '{name}' already exists!")
            continue
        break

    reporter.step("Bundle ID (e.g. com.yourcompany.yourapp):")
    bundle_id = ask_until_valid(
        "Bundle ID: ", validate_bundle_id, ask, reporter,
        error="Invalid bundle ID. Use the com.company.app format.",
    )

    reporter.step(f"Primary color as hex (default #{constants.DEFAULT_PRIMARY_COLOR}):")
    color = ask_until_valid(
        "Primary color: ", validate_hex_color, ask, reporter,
        error="Invalid color. Enter a 6-digit hex color.",
        default=constants.DEFAULT_PRIMARY_COLOR,
    ).replace("#", "")

    reporter.info(f"Project name: {name}")
    reporter.info(f"Bundle ID: {bundle_id}")
    reporter.info(f"Primary color: #{color} ({hex_to_rgb(color)})")
    if not confirm("Create project? (Y/n): ", ask):
        reporter.step("Project creation cancelled.")
        return None

    project_dir = paths.games_dir / name
    create_project_structure(project_dir, name, bundle_id, color, reporter)
    reporter.success(f"Project created: {project_dir}")

    if confirm("Make this the default project? (Y/n): ", ask):
        write_default_game(paths.default_game_file, name)
        reporter.success(f"'{name}' is now the default project")

    return name

