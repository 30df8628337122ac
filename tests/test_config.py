"""Tests for configuration management."""

from pathlib import Path

import pytest

from lino import config
from lino.modules.results import Grouping, Layout

CONFIG_KEYS = ("LINO_LAYOUT", "LINO_GROUPING", "LINO_WORKSPACE_ROOT", "LINO_DEBUG")


@pytest.fixture
def isolated(monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> Path:
    """Point HOME and cwd at an empty temp dir and clear LINO_* variables."""
    home = temp_dir / "home"
    home.mkdir()
    work = temp_dir / "work"
    work.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(work)
    for key in CONFIG_KEYS:
        monkeypatch.delenv(key, raising=False)
    return work


def _write_global(home: Path, text: str) -> None:
    config_dir = home / ".lino"
    config_dir.mkdir(exist_ok=True)
    (config_dir / "config.yml").write_text(text)


class TestLoadEnvFile:
    """Tests for load_env_file."""

    def test_load_env_file_missing_returns_empty(self, temp_dir: Path) -> None:
        env_path = temp_dir / ".env"
        assert not env_path.exists()
        assert config.load_env_file(env_path) == {}

    def test_load_env_file_ignores_comments_and_strips_quotes(self, temp_dir: Path) -> None:
        env_path = temp_dir / ".env"
        env_path.write_text("# comment\n\nLINO_LAYOUT=\"tree\"\n  \nLINO_GROUPING='rule'\n")
        assert config.load_env_file(env_path) == {
            "LINO_LAYOUT": "tree",
            "LINO_GROUPING": "rule",
        }

    def test_load_env_file_export_prefix_and_missing_separator(self, temp_dir: Path) -> None:
        env_path = temp_dir / ".env"
        env_path.write_text("export LINO_DEBUG=true\nNOT_A_PAIR\nLINO_LAYOUT = tree\n")
        assert config.load_env_file(env_path) == {"LINO_DEBUG": "true", "LINO_LAYOUT": "tree"}


class TestLoadGlobalConfig:
    """Tests for load_global_config."""

    def test_missing_returns_empty(self, isolated: Path) -> None:
        assert config.load_global_config() == {}

    def test_loads_yml(self, isolated: Path) -> None:
        _write_global(Path.home(), "LINO_LAYOUT: hierarchical\nLINO_DEBUG: true\n")
        assert config.load_global_config() == {"LINO_LAYOUT": "hierarchical", "LINO_DEBUG": True}

    def test_non_mapping_yml_is_ignored(self, isolated: Path) -> None:
        _write_global(Path.home(), "- just\n- a list\n")
        assert config.load_global_config() == {}


class TestFindProjectDir:
    """Tests for find_project_dir."""

    def test_finds_marker_in_parent(self, isolated: Path) -> None:
        (isolated / ".lino").mkdir()
        nested = isolated / "src" / "deep"
        nested.mkdir(parents=True)
        assert config.find_project_dir(nested) == isolated.resolve()

    def test_global_config_dir_is_not_a_project(self, isolated: Path) -> None:
        home = Path.home()
        (home / ".lino").mkdir()
        assert config.find_project_dir(home) is None


class TestGetters:
    """Tests for layered getters."""

    def test_defaults(self, isolated: Path) -> None:
        assert config.get_layout() == Layout.FLAT
        assert config.get_grouping() == Grouping.NONE
        assert config.get_workspace_root() == str(Path.cwd())
        assert config.get_debug() is False

    def test_env_beats_project_and_global(
        self, isolated: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        _write_global(Path.home(), "LINO_LAYOUT: flat\n")
        (isolated / ".lino").mkdir()
        (isolated / ".lino" / ".env").write_text("LINO_LAYOUT=flat\n")
        monkeypatch.setenv("LINO_LAYOUT", "hierarchical")
        assert config.get_layout() == Layout.HIERARCHICAL

    def test_project_beats_global(self, isolated: Path) -> None:
        _write_global(Path.home(), "LINO_GROUPING: none\n")
        (isolated / ".lino").mkdir()
        (isolated / ".lino" / ".env").write_text("LINO_GROUPING=byRule\n")
        assert config.get_grouping() == Grouping.BY_RULE

    def test_global_values(self, isolated: Path) -> None:
        _write_global(Path.home(), "LINO_WORKSPACE_ROOT: /srv/app\nLINO_DEBUG: true\n")
        assert config.get_workspace_root() == "/srv/app"
        assert config.get_debug() is True

    def test_empty_env_value_falls_through(
        self, isolated: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        _write_global(Path.home(), "LINO_LAYOUT: tree\n")
        monkeypatch.setenv("LINO_LAYOUT", "")
        assert config.get_layout() == Layout.HIERARCHICAL

    def test_invalid_values_fall_back(
        self, isolated: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LINO_LAYOUT", "sideways")
        monkeypatch.setenv("LINO_GROUPING", "bySeverity")
        assert config.get_layout() == Layout.FLAT
        assert config.get_grouping() == Grouping.NONE

    def test_debug_truthy_strings(self, isolated: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LINO_DEBUG", "yes")
        assert config.get_debug() is True
        monkeypatch.setenv("LINO_DEBUG", "off")
        assert config.get_debug() is False
