"""
Builders for the regenerated pubspec.yaml sections.

Both return the full replacement block, anchor line included, ready for
ManifestDocument.replace_section.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from .. import constants
from ..core.files import list_directories
from ..sync.content import project_fonts_dir
from .document import ASSETS_SECTION, FONTS_SECTION

ASSET_PREFIX = "assets"


@dataclass
class FontDeclaration:
    """One font family and its weighted font files."""
    family: str
    fonts: List[Tuple[str, Optional[int]]] = field(default_factory=list)

    def to_lines(self) -> List[str]:
        lines = [f"    - family: {self.family}", "      fonts:"]
        for asset, weight in self.fonts:
            lines.append(f"        - asset: {asset}")
            if weight is not None:
                lines.append(f"          weight: {weight}")
        return lines


def asset_entry(path: str) -> str:
    """Manifest line declaring a directory (path relative to the engine)."""
    return f"    - {path}/"


def is_excluded_asset_dir(path: str) -> bool:
    """Shader and font directories are never declared as wildcards."""
    return any(excluded in path for excluded in constants.EXCLUDED_ASSET_DIRS)


def generate_asset_body(engine_asset_root: Path) -> List[str]:
    """
    Build the "  assets:" section for the current asset root.

    Order: anchor, default_game.txt marker, the engine fonts directory (if
    present), then every nested directory in sorted order minus shader and
    font directories.
    """
    engine_asset_root = Path(engine_asset_root)
    body = [
        ASSETS_SECTION.anchor_line,
        f"    - {ASSET_PREFIX}/{constants.DEFAULT_GAME_FILE}",
    ]

    if (engine_asset_root / constants.PROJECT_FONTS_DIR).is_dir():
        body.append(asset_entry(f"{ASSET_PREFIX}/{constants.PROJECT_FONTS_DIR}"))

    if engine_asset_root.is_dir():
        for rel_path in list_directories(engine_asset_root):
            dir_path = f"{ASSET_PREFIX}/{rel_path}"
            if not is_excluded_asset_dir(dir_path):
                body.append(asset_entry(dir_path))

    return body


def is_font_file(filename: str) -> bool:
    return os.path.splitext(filename)[1].lower() in constants.FONT_EXTENSIONS


def bundled_font(
    family: str = constants.BUNDLED_FONT_FAMILY,
    asset: str = constants.BUNDLED_FONT_ASSET,
    weight: int = constants.BUNDLED_FONT_WEIGHT,
) -> FontDeclaration:
    """The engine's own bold font, always declared first."""
    return FontDeclaration(family=family, fonts=[(asset, weight)])


def collect_project_fonts(project_root: Path) -> List[FontDeclaration]:
    """
    One family per .ttf/.otf file directly inside the game's Assets/fonts.

    Files keep directory-listing order. The family is the file stem and the
    asset points at the mirrored copy; no weight is set (regular).
    """
    fonts_dir = project_fonts_dir(project_root)
    if not fonts_dir.is_dir():
        return []

    mirrored = f"{ASSET_PREFIX}/{constants.MIRROR_ASSETS_DIR}/{constants.PROJECT_FONTS_DIR}"
    declarations = []
    for filename in os.listdir(fonts_dir):
        if not is_font_file(filename) or not (fonts_dir / filename).is_file():
            continue
        family = os.path.splitext(filename)[0]
        declarations.append(FontDeclaration(family=family, fonts=[(f"{mirrored}/{filename}", None)]))
    return declarations


def generate_font_body(
    engine_asset_root: Path,
    project_root: Path,
    base_font: Optional[FontDeclaration] = None,
) -> List[str]:
    """
    Build the "  fonts:" section: the bundled font then the game's fonts.

    Game fonts are referenced at their mirrored location under
    engine_asset_root, which does not need to be populated yet.
    """
    declarations = [base_font or bundled_font()]
    declarations.extend(collect_project_fonts(project_root))

    body = [FONTS_SECTION.anchor_line]
    for declaration in declarations:
        body.extend(declaration.to_lines())
    return body
