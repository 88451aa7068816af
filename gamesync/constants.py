"""
Shared constants for Game Sync.
"""

# Launcher root layout
GAMES_DIR_NAME = "Game"
ENGINE_DIR_NAME = "Engine"
DEFAULT_GAME_FILE = "default_game.txt"
ICON_FILE = "icon.png"

# Game project layout
PROJECT_ASSETS_DIR = "Assets"
PROJECT_SCRIPT_DIR = "GameScript"
PROJECT_FONTS_DIR = "fonts"
IDENTITY_FILE = "game_config.txt"

# Engine layout
ENGINE_ASSETS_DIR = "assets"
PUBSPEC_FILE = "pubspec.yaml"
PUBSPEC_BACKUP_FILE = "pubspec.yaml.backup"

# Mirrored destinations under the engine asset root
MIRROR_ASSETS_DIR = PROJECT_ASSETS_DIR
MIRROR_SCRIPT_DIR = PROJECT_SCRIPT_DIR

# Asset directories that are never declared as directory wildcards
EXCLUDED_ASSET_DIRS = ("/shaders", "/fonts")

# Font containers picked up from a game project's fonts directory
FONT_EXTENSIONS = {".ttf", ".otf"}

# Engine's bundled font, always declared first
BUNDLED_FONT_FAMILY = "SourceHanSansCN"
BUNDLED_FONT_ASSET = "assets/fonts/SourceHanSansCN-Bold.ttf"
BUNDLED_FONT_WEIGHT = 700

# Scaffolding defaults
DEFAULT_PRIMARY_COLOR = "137B8B"
