"""Tests for the scaffold CLI command."""

from treekeep.cli.scaffold_cmd import scaffold


class TestScaffoldCommand:
    """Test project skeleton creation from the command line."""

    def test_command_help(self, runner):
        result = runner.invoke(scaffold, ["--help"])

        assert result.exit_code == 0
        assert "PROJECT_DIR" in result.output
        assert "--no-keep" in result.output

    def test_default_layout(self, runner, tmp_path):
        project = tmp_path / "my-project"

        result = runner.invoke(scaffold, [str(project)])

        assert result.exit_code == 0
        for name in ("src", "tests", "docs", "draft"):
            assert (project / name / ".gitkeep").is_file()
        assert (project / "src" / "__init__.py").is_file()
        assert result.stdout.splitlines() == [
            str(project / ".gitkeep"),
            str(project / "docs" / ".gitkeep"),
            str(project / "draft" / ".gitkeep"),
            str(project / "src" / ".gitkeep"),
            str(project / "tests" / ".gitkeep"),
        ]
        assert "Created" in result.stderr

    def test_no_keep(self, runner, tmp_path):
        result = runner.invoke(scaffold, [str(tmp_path), "--no-keep"])

        assert result.exit_code == 0
        assert result.stdout == ""
        assert (tmp_path / "draft").is_dir()
        assert list(tmp_path.rglob(".gitkeep")) == []

    def test_custom_directories(self, runner, tmp_path):
        result = runner.invoke(
            scaffold, [str(tmp_path), "--dir", "notebooks", "--dir", "src", "-q"]
        )

        assert result.exit_code == 0
        assert sorted(p.name for p in tmp_path.iterdir()) == [".gitkeep", "notebooks", "src"]
        assert (tmp_path / "src" / "__init__.py").is_file()
        assert result.stderr == ""

    def test_package_option_adds_directory(self, runner, tmp_path):
        result = runner.invoke(scaffold, [str(tmp_path), "--dir", "docs", "--package", "app"])

        assert result.exit_code == 0
        assert (tmp_path / "app" / "__init__.py").is_file()
        assert (tmp_path / "docs" / ".gitkeep").is_file()
        assert not (tmp_path / "src").exists()

    def test_layout_from_config(self, runner, tmp_path):
        (tmp_path / "treekeep.yml").write_text(
            "scaffold:\n  directories: [lib, data]\n  packages: [lib]\n"
        )

        result = runner.invoke(scaffold, [str(tmp_path)])

        assert result.exit_code == 0
        assert (tmp_path / "lib" / "__init__.py").is_file()
        assert (tmp_path / "data" / ".gitkeep").is_file()
        assert not (tmp_path / "draft").exists()

    def test_escaping_directory_exits_1(self, runner, tmp_path):
        result = runner.invoke(scaffold, [str(tmp_path / "p"), "--dir", "../escape"])

        assert result.exit_code == 1
        assert not (tmp_path / "escape").exists()
        assert not (tmp_path / "p").exists()
