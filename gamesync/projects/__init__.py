"""
Game project selection and scaffolding.
"""

from .selection import (
    list_game_projects,
    read_default_game,
    select_game,
    set_default_game,
    validate_game_dir,
    write_default_game,
)
from .scaffold import (
    create_new_project,
    create_project_structure,
    hex_to_rgb,
    validate_bundle_id,
    validate_hex_color,
    validate_project_name,
)

__all__ = [
    # Selection
    "list_game_projects",
    "read_default_game",
    "select_game",
    "set_default_game",
    "validate_game_dir",
    "write_default_game",
    # Scaffolding
    "create_new_project",
    "create_project_structure",
    "hex_to_rgb",
    "validate_bundle_id",
    "validate_hex_color",
    "validate_project_name",
]
