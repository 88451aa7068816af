"""
pubspec.yaml updates for Game Sync.

Each update reads the whole file, rebuilds it in memory and only then writes
it back (temp file + rename). A missing section therefore fails before the
file is touched.
"""

import os
import tempfile
from pathlib import Path
from typing import Optional

from .. import constants
from ..core.files import copy_file
from ..errors import FilesystemError, ManifestNotFound
from ..ui.reporter import Reporter
from .document import ASSETS_SECTION, FONTS_SECTION, ManifestDocument
from .generators import FontDeclaration, generate_asset_body, generate_font_body


def get_pubspec_path(engine_dir: Path) -> Path:
    return Path(engine_dir) / constants.PUBSPEC_FILE


def load_pubspec(engine_dir: Path) -> ManifestDocument:
    """Read Engine/pubspec.yaml into a ManifestDocument."""
    path = get_pubspec_path(engine_dir)
    if not path.is_file():
        raise ManifestNotFound(path)
    try:
        # newline="" keeps \r\n so the document can round-trip it
        with open(path, encoding="utf-8", newline="") as f:
            return ManifestDocument.from_text(f.read())
    except OSError as e:
        raise FilesystemError("read", path, e) from e


def save_pubspec(engine_dir: Path, document: ManifestDocument):
    """Write document to Engine/pubspec.yaml, replacing the file atomically."""
    path = get_pubspec_path(engine_dir)
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=".pubspec.", suffix=".tmp", dir=path.parent)
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(document.to_text())
        if path.exists():
            os.chmod(tmp_name, path.stat().st_mode & 0o7777)
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as e:
        raise FilesystemError("write", path, e) from e
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)


def update_pubspec_assets(engine_dir: Path, reporter: Optional[Reporter] = None) -> ManifestDocument:
    """
    Regenerate the "  assets:" section from Engine/assets.

    Returns the written document.

    Raises:
        ManifestNotFound, SectionNotFound, FilesystemError
    """
    reporter = reporter or Reporter()
    reporter.step("Generating pubspec.yaml asset list...")

    document = load_pubspec(engine_dir)
    body = generate_asset_body(Path(engine_dir) / constants.ENGINE_ASSETS_DIR)
    updated = document.replace_section(ASSETS_SECTION, body)
    save_pubspec(engine_dir, updated)

    reporter.success(f"pubspec.yaml assets updated ({len(body) - 1} entries).")
    return updated


def update_pubspec_fonts(
    engine_dir: Path,
    project_root: Path,
    reporter: Optional[Reporter] = None,
    base_font: Optional[FontDeclaration] = None,
) -> ManifestDocument:
    """
    Regenerate the "  fonts:" section from the game's Assets/fonts.

    Raises:
        ManifestNotFound, SectionNotFound, FilesystemError
    """
    reporter = reporter or Reporter()
    reporter.step("Generating pubspec.yaml font list...")

    document = load_pubspec(engine_dir)
    body = generate_font_body(Path(engine_dir) / constants.ENGINE_ASSETS_DIR, project_root, base_font)
    updated = document.replace_section(FONTS_SECTION, body)
    save_pubspec(engine_dir, updated)

    families = sum(1 for line in body if line.startswith("    - family:"))
    reporter.success(f"pubspec.yaml fonts updated ({families} families).")
    return updated


def validate_pubspec_format(engine_dir: Path, reporter: Optional[Reporter] = None) -> bool:
    """
    Rough sanity check: the file exists and has a "flutter:" block.

    Missing asset/font sections are only warned about.
    """
    reporter = reporter or Reporter()
    try:
        document = load_pubspec(engine_dir)
    except (ManifestNotFound, FilesystemError) as e:
        reporter.error(str(e))
        return False

    if not any(line.startswith("flutter:") for line in document.lines):
        reporter.error("pubspec.yaml has no flutter: section")
        return False

    for rules in (ASSETS_SECTION, FONTS_SECTION):
        if not document.has_section(rules):
            reporter.warning(f'pubspec.yaml has no "{rules.anchor_line}" section')

    return True


def backup_pubspec(engine_dir: Path) -> bool:
    """Copy pubspec.yaml to pubspec.yaml.backup. False if there is nothing to back up."""
    path = get_pubspec_path(engine_dir)
    if not path.is_file():
        return False
    copy_file(path, Path(engine_dir) / constants.PUBSPEC_BACKUP_FILE)
    return True


def restore_pubspec(engine_dir: Path) -> bool:
    """Copy pubspec.yaml.backup back over pubspec.yaml. False if no backup exists."""
    backup = Path(engine_dir) / constants.PUBSPEC_BACKUP_FILE
    if not backup.is_file():
        return False
    copy_file(backup, get_pubspec_path(engine_dir))
    return True
