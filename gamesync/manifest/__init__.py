"""
pubspec.yaml section editing.

The manifest is edited as lines: find a section by its anchor, replace its
body with freshly generated lines, keep everything else as it was.
"""

from .document import (
    ASSETS_SECTION,
    FONTS_SECTION,
    ManifestDocument,
    SectionRules,
    find_section,
    replace_section,
)
from .generators import (
    FontDeclaration,
    bundled_font,
    collect_project_fonts,
    generate_asset_body,
    generate_font_body,
)
from .pubspec import (
    backup_pubspec,
    load_pubspec,
    restore_pubspec,
    save_pubspec,
    update_pubspec_assets,
    update_pubspec_fonts,
    validate_pubspec_format,
)

__all__ = [
    # Document model
    "ASSETS_SECTION",
    "FONTS_SECTION",
    "ManifestDocument",
    "SectionRules",
    "find_section",
    "replace_section",
    # Generators
    "FontDeclaration",
    "bundled_font",
    "collect_project_fonts",
    "generate_asset_body",
    "generate_font_body",
    # File updates
    "backup_pubspec",
    "load_pubspec",
    "restore_pubspec",
    "save_pubspec",
    "update_pubspec_assets",
    "update_pubspec_fonts",
    "validate_pubspec_format",
]
