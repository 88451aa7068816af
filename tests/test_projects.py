"""
Tests for game project selection and scaffolding.
"""

import pytest

from gamesync.errors import ValidationError
from gamesync.projects import (
    create_new_project,
    create_project_structure,
    hex_to_rgb,
    list_game_projects,
    read_default_game,
    select_game,
    set_default_game,
    validate_bundle_id,
    validate_game_dir,
    validate_hex_color,
    validate_project_name,
    write_default_game,
)
from gamesync.projects.scaffold import PROJECT_DIRS
from gamesync.sync import read_identity
from gamesync.ui import CancelInput, RecordingReporter, scripted_ask

from conftest import write_file


class TestDefaultGameFile:
    """Tests for default_game.txt handling."""

    def test_list_game_projects(self, launcher):
        (launcher.games_dir / "Alpha").mkdir()
        write_file(launcher.games_dir / "notes.txt", "not a project")

        assert list_game_projects(launcher.games_dir) == ["Alpha", "Demo"]

    def test_list_missing_dir(self, temp_dir):
        assert list_game_projects(temp_dir / "Game") == []

    def test_read_strips(self, temp_dir):
        path = write_file(temp_dir / "default_game.txt", "  Demo \r\n")

        assert read_default_game(path) == "Demo"

    def test_read_missing_or_empty(self, temp_dir):
        assert read_default_game(temp_dir / "default_game.txt") is None
        assert read_default_game(write_file(temp_dir / "empty.txt", "\n")) is None

    def test_write(self, temp_dir):
        path = temp_dir / "default_game.txt"
        write_default_game(path, "Demo")

        assert path.read_text() == "Demo\n"

    def test_validate_game_dir(self, launcher):
        assert validate_game_dir(launcher.games_dir, "Demo") == launcher.games_dir / "Demo"
        assert validate_game_dir(launcher.games_dir, "Nope") is None
        assert validate_game_dir(launcher.games_dir, None) is None

    def test_set_default_game(self, launcher):
        (launcher.games_dir / "Alpha").mkdir()

        assert set_default_game(launcher, "Alpha")
        assert launcher.default_game_file.read_text() == "Alpha\n"
        assert not set_default_game(launcher, "Nope")
        assert launcher.default_game_file.read_text() == "Alpha\n"


class TestSelectGame:
    """Tests for select_game()."""

    def test_selects_and_saves(self, launcher):
        (launcher.games_dir / "Alpha").mkdir()
        reporter = RecordingReporter()

        selected = select_game(launcher, scripted_ask(["1"]), reporter)

        assert selected == "Alpha"
        assert launcher.default_game_file.read_text() == "Alpha\n"
        assert "Current default game: Demo" in reporter.messages("info")

    def test_missing_games_dir(self, temp_dir):
        from gamesync.config import LauncherPaths

        with pytest.raises(ValidationError):
            select_game(LauncherPaths.from_root(temp_dir), scripted_ask(["1"]))

    def test_no_projects(self, temp_dir):
        from gamesync.config import LauncherPaths

        (temp_dir / "Game").mkdir()

        with pytest.raises(ValidationError):
            select_game(LauncherPaths.from_root(temp_dir), scripted_ask(["1"]))


class TestValidators:
    """Tests for the new-project input validators."""

    @pytest.mark.parametrize("name,ok", [
        ("my_game", True),
        ("Game-2", True),
        ("my game", False),
        ("jeu!", False),
        ("", False),
    ])
    def test_project_name(self, name, ok):
        assert validate_project_name(name) is ok

    @pytest.mark.parametrize("bundle_id,ok", [
        ("com.example.game", True),
        ("com.example.game2.beta", True),
        ("com.example", False),
        ("com.1example.game", False),
        ("", False),
    ])
    def test_bundle_id(self, bundle_id, ok):
        assert validate_bundle_id(bundle_id) is ok

    @pytest.mark.parametrize("color,ok", [
        ("137B8B", True),
        ("#ff00aa", True),
        ("12345", False),
        ("GGGGGG", False),
        ("  ", False),
    ])
    def test_hex_color(self, color, ok):
        assert validate_hex_color(color) is ok

    def test_hex_to_rgb(self):
        assert hex_to_rgb("#137B8B") == "rgb(19, 123, 139)"
        assert hex_to_rgb("ffffff") == "rgb(255, 255, 255)"


class TestCreateProject:
    """Tests for scaffolding new projects."""

    def test_structure(self, temp_dir):
        project = temp_dir / "Novel"

        create_project_structure(project, "Novel", "com.example.novel", "137B8B")

        for rel_dir in PROJECT_DIRS:
            assert (project / rel_dir).is_dir()
        assert (project / "game_config.txt").read_text() == "Novel\ncom.example.novel\n\n"
        assert "theme: color=rgb(19, 123, 139)" in (project / "GameScript" / "configs" / "configs.sks").read_text()
        assert (project / "GameScript" / "labels" / "start.sks").read_text().startswith("//label//")
        assert "com.example.novel" in (project / "README.md").read_text()

    def test_identity_is_readable(self, temp_dir):
        create_project_structure(temp_dir / "Novel", "Novel", "com.example.novel", "137B8B")

        identity = read_identity(temp_dir / "Novel")

        assert identity.app_name == "Novel"
        assert identity.bundle_id == "com.example.novel"

    def test_wizard(self, launcher):
        reporter = RecordingReporter()
        # name, bundle id, default color, confirm, make default
        ask = scripted_ask(["Novel", "com.example.novel", "", "y", "y"])

        name = create_new_project(launcher, ask, reporter)

        assert name == "Novel"
        assert (launcher.games_dir / "Novel" / "Assets" / "fonts").is_dir()
        assert launcher.default_game_file.read_text() == "Novel\n"
        assert "Primary color: #137B8B (rgb(19, 123, 139))" in reporter.messages("info")

    def test_wizard_reasks_existing_and_invalid(self, launcher):
        reporter = RecordingReporter()
        ask = scripted_ask(["Demo", "bad name", "Novel", "com.bad", "com.example.novel", "zz", "#ff0000", "", "n"])

        name = create_new_project(launcher, ask, reporter)

        assert name == "Novel"
        assert "Project 'Demo' already exists!" in reporter.messages("error")
        assert len(reporter.messages("error")) == 4
        assert "theme: color=rgb(255, 0, 0)" in (
            launcher.games_dir / "Novel" / "GameScript" / "configs" / "configs.sks"
        ).read_text()
        assert launcher.default_game_file.read_text() == "Demo\n"

    def test_wizard_declined(self, launcher):
        name = create_new_project(launcher, scripted_ask(["Novel", "com.example.novel", "", "n"]))

        assert name is None
        assert not (launcher.games_dir / "Novel").exists()

    def test_wizard_cancelled(self, launcher):
        with pytest.raises(CancelInput):
            create_new_project(launcher, scripted_ask(["Novel"]))
