"""Tests for project skeleton creation."""

import pytest
from pydantic import ValidationError

from treekeep.scaffold.layout import ProjectScaffolder, ScaffoldLayout, scaffold_project
from treekeep.sync.models import SyncSettings


class TestScaffoldLayout:
    """Test ScaffoldLayout validation."""

    def test_default_layout(self):
        layout = ScaffoldLayout()

        assert layout.directories == ["src", "tests", "docs", "draft"]
        assert layout.packages == ["src", "tests"]

    def test_trailing_slashes_are_removed(self):
        layout = ScaffoldLayout(directories=["src/", "docs"], packages=["src"])
        assert layout.directories == ["src", "docs"]

    @pytest.mark.parametrize("entry", ["../outside", "/absolute", "", "a/../../b"])
    def test_entries_must_stay_inside_project(self, entry):
        with pytest.raises(ValidationError):
            ScaffoldLayout(directories=[entry], packages=[])

    def test_packages_must_be_listed_in_directories(self):
        with pytest.raises(ValidationError, match="packages must also be listed"):
            ScaffoldLayout(directories=["docs"], packages=["src"])


class TestProjectScaffolder:
    """Test ProjectScaffolder.create."""

    def test_default_layout_is_created_and_kept(self, tmp_path):
        """Every layout directory exists and carries a marker."""
        project = tmp_path / "my-project"

        result = scaffold_project(project)

        for name in ("src", "tests", "docs", "draft"):
            assert (project / name).is_dir()
            assert (project / name / ".gitkeep").is_file()
        assert (project / ".gitkeep").is_file()
        assert (project / "src" / "__init__.py").is_file()
        assert (project / "tests" / "__init__.py").is_file()
        assert not (project / "docs" / "__init__.py").exists()
        assert result.created_directories[0] == project
        assert result.sync_report is not None
        assert len(result.sync_report.placeholders) == 5

    def test_existing_package_file_is_not_truncated(self, tmp_path):
        project = tmp_path / "existing"
        (project / "src").mkdir(parents=True)
        init_file = project / "src" / "__init__.py"
        init_file.write_text('__version__ = "1.0"\n')

        result = scaffold_project(project)

        assert init_file.read_text() == '__version__ = "1.0"\n'
        assert init_file not in result.created_packages
        assert project / "tests" / "__init__.py" in result.created_packages
        assert project not in result.created_directories
        assert project / "src" not in result.created_directories

    def test_no_keep_skips_markers(self, tmp_path):
        project = tmp_path / "bare"

        result = scaffold_project(project, keep=False)

        assert result.sync_report is None
        assert (project / "docs").is_dir()
        assert list(project.rglob(".gitkeep")) == []

    def test_custom_layout_and_marker(self, tmp_path):
        layout = ScaffoldLayout(directories=["lib/core", "notebooks"], packages=["lib/core"])

        result = ProjectScaffolder(layout, SyncSettings(marker_name=".keep")).create(tmp_path)

        assert (tmp_path / "lib" / "core" / "__init__.py").is_file()
        assert (tmp_path / "lib" / ".keep").is_file()
        assert (tmp_path / "notebooks" / ".keep").is_file()
        assert result.sync_report.placeholders == [
            tmp_path / ".keep",
            tmp_path / "lib" / ".keep",
            tmp_path / "lib" / "core" / ".keep",
            tmp_path / "notebooks" / ".keep",
        ]

    def test_scaffolding_twice_creates_nothing_new(self, tmp_path):
        scaffold_project(tmp_path)

        second = scaffold_project(tmp_path)

        assert second.created_directories == []
        assert second.created_packages == []
        assert second.sync_report.created == []

    def test_file_in_place_of_directory_fails(self, tmp_path):
        (tmp_path / "docs").write_text("not a directory")

        with pytest.raises(OSError):
            scaffold_project(tmp_path)
