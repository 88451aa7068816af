"""
Tests for reading, updating and backing up Engine/pubspec.yaml.
"""

import pytest

from gamesync.errors import ManifestNotFound, SectionNotFound
from gamesync.manifest.pubspec import (
    backup_pubspec,
    restore_pubspec,
    update_pubspec_assets,
    update_pubspec_fonts,
    validate_pubspec_format,
)
from gamesync.ui.reporter import RecordingReporter

from conftest import SAMPLE_PUBSPEC, write_file


class TestUpdatePubspecAssets:
    """Tests for update_pubspec_assets()."""

    def test_rewrites_assets_section(self, launcher):
        (launcher.engine_assets_dir / "Assets" / "images").mkdir(parents=True)

        update_pubspec_assets(launcher.engine_dir)

        text = launcher.pubspec_path.read_text()
        assert (
            "  assets:\n"
            "    - assets/default_game.txt\n"
            "    - assets/fonts/\n"
            "    - assets/Assets/\n"
            "    - assets/Assets/images/\n"
            "  fonts:\n"
        ) in text
        assert "old_game" not in text
        assert text.startswith(SAMPLE_PUBSPEC[:SAMPLE_PUBSPEC.index("  assets:")])
        assert text.endswith(SAMPLE_PUBSPEC[SAMPLE_PUBSPEC.index("  fonts:"):])

    def test_missing_anchor_leaves_file_unchanged(self, launcher):
        broken = SAMPLE_PUBSPEC.replace("  assets:", "   assets:")
        launcher.pubspec_path.write_text(broken)
        before = launcher.pubspec_path.read_bytes()

        with pytest.raises(SectionNotFound):
            update_pubspec_assets(launcher.engine_dir)

        assert launcher.pubspec_path.read_bytes() == before
        assert list(launcher.engine_dir.glob(".pubspec.*")) == []

    def test_missing_pubspec(self, temp_dir):
        with pytest.raises(ManifestNotFound):
            update_pubspec_assets(temp_dir)

    def test_running_twice_gives_same_file(self, launcher):
        update_pubspec_assets(launcher.engine_dir)
        first = launcher.pubspec_path.read_bytes()

        update_pubspec_assets(launcher.engine_dir)

        assert launcher.pubspec_path.read_bytes() == first

    def test_crlf_file_keeps_crlf(self, launcher):
        launcher.pubspec_path.write_bytes(SAMPLE_PUBSPEC.replace("\n", "\r\n").encode())

        update_pubspec_assets(launcher.engine_dir)

        data = launcher.pubspec_path.read_bytes()
        assert b"    - assets/default_game.txt\r\n" in data
        assert data.count(b"\n") == data.count(b"\r\n")


class TestUpdatePubspecFonts:
    """Tests for update_pubspec_fonts()."""

    def test_rewrites_fonts_section(self, launcher):
        reporter = RecordingReporter()

        update_pubspec_fonts(launcher.engine_dir, launcher.games_dir / "Demo", reporter)

        text = launcher.pubspec_path.read_text()
        assert (
            "  fonts:\n"
            "    - family: SourceHanSansCN\n"
            "      fonts:\n"
            "        - asset: assets/fonts/SourceHanSansCN-Bold.ttf\n"
            "          weight: 700\n"
            "    - family: Hero\n"
            "      fonts:\n"
            "        - asset: assets/Assets/fonts/Hero.ttf\n"
            "  shaders:\n"
        ) in text
        assert "OldFont" not in text
        assert "    - assets/old_game/\n" in text
        assert reporter.messages("success") == ["pubspec.yaml fonts updated (2 families)."]

    def test_missing_fonts_anchor(self, launcher):
        launcher.pubspec_path.write_text(SAMPLE_PUBSPEC.replace("  fonts:", "  typefaces:"))
        before = launcher.pubspec_path.read_bytes()

        with pytest.raises(SectionNotFound) as exc:
            update_pubspec_fonts(launcher.engine_dir, launcher.games_dir / "Demo")

        assert exc.value.section == "fonts"
        assert launcher.pubspec_path.read_bytes() == before


class TestValidatePubspecFormat:
    """Tests for validate_pubspec_format()."""

    def test_valid_file(self, launcher):
        reporter = RecordingReporter()

        assert validate_pubspec_format(launcher.engine_dir, reporter)
        assert reporter.warnings == []

    def test_missing_sections_only_warn(self, launcher):
        launcher.pubspec_path.write_text("name: engine\nflutter:\n  uses-material-design: true\n")
        reporter = RecordingReporter()

        assert validate_pubspec_format(launcher.engine_dir, reporter)
        assert len(reporter.warnings) == 2

    def test_missing_flutter_block(self, launcher):
        launcher.pubspec_path.write_text("name: engine\n")

        assert not validate_pubspec_format(launcher.engine_dir)

    def test_missing_file(self, temp_dir):
        reporter = RecordingReporter()

        assert not validate_pubspec_format(temp_dir, reporter)
        assert reporter.messages("error")


class TestBackupRestore:
    """Tests for backup_pubspec() / restore_pubspec()."""

    def test_backup_then_restore(self, launcher):
        assert backup_pubspec(launcher.engine_dir)
        launcher.pubspec_path.write_text("clobbered\n")

        assert restore_pubspec(launcher.engine_dir)

        assert launcher.pubspec_path.read_text() == SAMPLE_PUBSPEC

    def test_nothing_to_back_up(self, temp_dir):
        assert not backup_pubspec(temp_dir)

    def test_nothing_to_restore(self, temp_dir):
        write_file(temp_dir / "pubspec.yaml", "name: x\n")

        assert not restore_pubspec(temp_dir)
