"""Tests for shared CLI helpers."""

import pytest

from treekeep.base.errors import ConfigurationError
from treekeep.cli.project_utils import (
    build_scaffold_layout,
    build_sync_settings,
    describe_error,
    resolve_config_path,
)
from treekeep.utils.config import ConfigBuilder


class TestResolveConfigPath:
    """Test configuration file resolution."""

    def test_explicit_config_wins(self, tmp_path):
        (tmp_path / "treekeep.yml").write_text("sync: {}\n")

        assert resolve_config_path(tmp_path, "other.yml").name == "other.yml"

    def test_config_in_directory(self, tmp_path):
        (tmp_path / "treekeep.yml").write_text("sync: {}\n")

        assert resolve_config_path(tmp_path) == tmp_path / "treekeep.yml"

    def test_no_config_means_defaults(self, tmp_path):
        assert resolve_config_path(tmp_path) is None
        assert resolve_config_path(tmp_path / "missing") is None

    def test_working_directory_is_not_searched(self, tmp_path, monkeypatch):
        (tmp_path / "treekeep.yml").write_text("sync: {}\n")
        target = tmp_path / "target"
        target.mkdir()
        monkeypatch.chdir(tmp_path)

        assert resolve_config_path(target) is None


class TestBuildSyncSettings:
    """Test merging configuration with command-line overrides."""

    def test_defaults(self):
        settings = build_sync_settings(ConfigBuilder())

        assert settings.marker_name == ".gitkeep"
        assert settings.on_unreadable == "abort"

    def test_overrides(self, tmp_path):
        config_file = tmp_path / "treekeep.yml"
        config_file.write_text("sync:\n  marker_name: .keep\n  exclude: [.git]\n")

        settings = build_sync_settings(
            ConfigBuilder(config_file),
            marker=".placeholder",
            exclude=("node_modules",),
            follow_symlinks=True,
            skip_unreadable=True,
            dry_run=True,
        )

        assert settings.marker_name == ".placeholder"
        assert settings.exclude == [".git", "node_modules"]
        assert settings.follow_symlinks is True
        assert settings.on_unreadable == "skip"
        assert settings.dry_run is True

    def test_single_exclude_pattern_is_not_split(self, tmp_path):
        config_file = tmp_path / "treekeep.yml"
        config_file.write_text("sync:\n  exclude: .git\n")

        assert build_sync_settings(ConfigBuilder(config_file)).exclude == [".git"]
        assert build_sync_settings(ConfigBuilder(config_file), exclude=("build",)).exclude == [
            ".git",
            "build",
        ]

    def test_exclude_mapping_raises_configuration_error(self, tmp_path):
        config_file = tmp_path / "treekeep.yml"
        config_file.write_text("sync:\n  exclude:\n    name: .git\n")

        with pytest.raises(ConfigurationError, match="sync.exclude"):
            build_sync_settings(ConfigBuilder(config_file), exclude=("build",))

    def test_invalid_config_value_raises_configuration_error(self, tmp_path):
        config_file = tmp_path / "treekeep.yml"
        config_file.write_text("sync:\n  on_unreadable: sometimes\n")

        with pytest.raises(ConfigurationError, match="Invalid sync settings"):
            build_sync_settings(ConfigBuilder(config_file))


class TestBuildScaffoldLayout:
    """Test scaffold layout overrides."""

    def test_default_layout(self):
        layout = build_scaffold_layout(ConfigBuilder())

        assert layout.directories == ["src", "tests", "docs", "draft"]
        assert layout.packages == ["src", "tests"]

    def test_directories_override_filters_configured_packages(self):
        layout = build_scaffold_layout(ConfigBuilder(), directories=("src", "notebooks"))

        assert layout.directories == ["src", "notebooks"]
        assert layout.packages == ["src"]

    def test_packages_are_added_to_directories(self):
        layout = build_scaffold_layout(ConfigBuilder(), directories=("docs",), packages=("app",))

        assert layout.directories == ["docs", "app"]
        assert layout.packages == ["app"]

    def test_invalid_layout_raises_configuration_error(self):
        with pytest.raises(ConfigurationError, match="Invalid scaffold layout"):
            build_scaffold_layout(ConfigBuilder(), directories=("/abs",))


class TestDescribeError:
    """Test error message formatting."""

    def test_os_error_names_path(self):
        error = PermissionError(13, "Permission denied", "/data/.gitkeep")

        assert describe_error(error) == "Permission denied: /data/.gitkeep"

    def test_other_errors_use_message(self):
        assert describe_error(ConfigurationError("bad value")) == "bad value"
