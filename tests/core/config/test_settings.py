"""Tests for mkdo.core.config.settings - precedence and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from mkdo.core.config.settings import MkdoSettings, get_settings
from mkdo.core.errors import ConfigError
from mkdo.core.models import ExtractOptions


@pytest.fixture
def project(tmp_path, isolated_env) -> Path:
    """A project directory whose config search never leaves tmp_path."""
    isolated_env.setattr(Path, "home", lambda: tmp_path)
    project = tmp_path / "project"
    project.mkdir()
    return project


class TestDefaults:
    def test_defaults_without_config(self, project):
        settings = get_settings(project)
        assert settings.file == Path("mkdo.md")
        assert settings.extract_options() == ExtractOptions()
        assert settings.log_level == "WARNING"
        assert settings.log_format is None
        assert settings.config_path is None


class TestPrecedence:
    def test_config_file(self, project):
        (project / ".mkdorc.yaml").write_text("file: README.md\nrootDepth: 2\nrootPattern: Tasks\n")
        settings = get_settings(project)
        assert settings.file == Path("README.md")
        assert settings.extract_options() == ExtractOptions(root_depth=2, root_pattern="Tasks")
        assert settings.config_path == project.resolve() / ".mkdorc.yaml"

    def test_config_found_in_parent(self, project, tmp_path):
        (tmp_path / ".mkdorc.yml").write_text("taskSeparator: '.'\n")
        assert get_settings(project).task_separator == "."

    def test_env_beats_config_file(self, project, isolated_env):
        (project / ".mkdorc.yaml").write_text("rootDepth: 2\n")
        isolated_env.setenv("MKDO_ROOT_DEPTH", "3")
        assert get_settings(project).root_depth == 3

    def test_override_beats_env(self, project, isolated_env):
        isolated_env.setenv("MKDO_ROOT_PATTERN", "Env")
        assert get_settings(project, root_pattern="Flag").root_pattern == "Flag"

    def test_none_override_ignored(self, project):
        (project / ".mkdorc.yaml").write_text("rootPattern: FromFile\n")
        assert get_settings(project, root_pattern=None).root_pattern == "FromFile"

    def test_zero_override_kept(self, project):
        (project / ".mkdorc.yaml").write_text("rootDepth: 2\n")
        assert get_settings(project, root_depth=0).root_depth == 0

    def test_unknown_keys_ignored(self, project):
        (project / ".mkdorc.yaml").write_text("colour: blue\nconfigPath: elsewhere\nfile: x.md\n")
        settings = get_settings(project)
        assert settings.file == Path("x.md")
        assert settings.config_path == project.resolve() / ".mkdorc.yaml"


class TestValidation:
    def test_invalid_value_in_file(self, project):
        (project / ".mkdorc.yaml").write_text("rootDepth: deep\n")
        with pytest.raises(ConfigError, match="invalid configuration"):
            get_settings(project)

    def test_unreadable_config(self, project):
        (project / ".mkdorc.json").write_text("{broken")
        with pytest.raises(ConfigError):
            get_settings(project)

    def test_log_level_normalized(self, isolated_env):
        isolated_env.setenv("MKDO_LOG_LEVEL", "debug")
        assert MkdoSettings().log_level == "DEBUG"

    def test_invalid_log_level(self, project):
        with pytest.raises(ConfigError):
            get_settings(project, log_level="LOUD")

    def test_invalid_log_format(self, project):
        with pytest.raises(ConfigError):
            get_settings(project, log_format="xml")
