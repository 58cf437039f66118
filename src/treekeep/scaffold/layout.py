"""Project skeleton creation.

Creates the directory layout a fresh project starts from (``src/``,
``tests/``, ``docs/`` and ``draft/`` by default), drops an empty
``__init__.py`` into the package directories, and then synchronizes
placeholder markers so the new, still-empty directories can be committed.
"""

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from pydantic import BaseModel, Field, field_validator, model_validator

from treekeep.sync.models import SyncReport, SyncSettings
from treekeep.sync.synchronizer import TreePlaceholderSynchronizer
from treekeep.utils.logger import get_logger

PACKAGE_INIT = "__init__.py"


class ScaffoldLayout(BaseModel):
    """Directories and packages created inside a project."""

    directories: list[str] = Field(
        default_factory=lambda: ["src", "tests", "docs", "draft"],
        description="Directories to create, relative to the project",
    )
    packages: list[str] = Field(
        default_factory=lambda: ["src", "tests"],
        description="Directories that receive an empty __init__.py",
    )

    @field_validator("directories", "packages")
    @classmethod
    def validate_relative(cls, v: list[str]) -> list[str]:
        """Keep every entry inside the project directory."""
        cleaned = []
        for entry in v:
            entry = entry.strip()
            if entry.startswith("/") or Path(entry).is_absolute():
                raise ValueError(f"layout entry must be relative: {entry!r}")
            entry = entry.rstrip("/")
            if not entry:
                raise ValueError("layout entries cannot be empty")
            if ".." in PurePosixPath(entry).parts:
                raise ValueError(f"layout entry must stay inside the project: {entry!r}")
            cleaned.append(entry)
        return cleaned

    @model_validator(mode="after")
    def validate_packages_listed(self) -> "ScaffoldLayout":
        missing = [pkg for pkg in self.packages if pkg not in self.directories]
        if missing:
            raise ValueError(f"packages must also be listed in directories: {', '.join(missing)}")
        return self


@dataclass
class ScaffoldResult:
    """What a scaffold run created."""

    project_dir: Path
    created_directories: list[Path] = field(default_factory=list)
    created_packages: list[Path] = field(default_factory=list)
    sync_report: SyncReport | None = None


class ProjectScaffolder:
    """Create a project skeleton and keep its empty directories.

    Existing directories and ``__init__.py`` files are left as they are,
    so scaffolding an existing project only fills in what is missing.
    """

    def __init__(self, layout: ScaffoldLayout | None = None, settings: SyncSettings | None = None):
        self.layout = layout or ScaffoldLayout()
        self.settings = settings or SyncSettings()
        self.logger = get_logger("scaffold")

    def create(self, project_dir: str | Path, keep: bool = True) -> ScaffoldResult:
        """Create the layout under ``project_dir``.

        Args:
            project_dir: Project root, created if missing
            keep: Synchronize placeholder markers afterwards

        Returns:
            ScaffoldResult listing created directories and package files

        Raises:
            OSError: If a directory or package file cannot be created
        """
        project = Path(project_dir).expanduser()
        result = ScaffoldResult(project_dir=project)

        self.logger.key_info(f"Scaffolding {project}")

        if self._make_dir(project):
            result.created_directories.append(project)

        for entry in self.layout.directories:
            directory = project / entry
            if self._make_dir(directory):
                result.created_directories.append(directory)

        for entry in self.layout.packages:
            init_file = project / entry / PACKAGE_INIT
            if init_file.exists():
                self.logger.debug(f"Package file present: {init_file}")
                continue
            init_file.touch(exist_ok=False)
            self.logger.info(f"Created {init_file}")
            result.created_packages.append(init_file)

        if keep:
            result.sync_report = TreePlaceholderSynchronizer(self.settings).run(project)

        self.logger.success(
            f"Scaffolded {project}: {len(result.created_directories)} directories, "
            f"{len(result.created_packages)} package files"
        )
        return result

    def _make_dir(self, directory: Path) -> bool:
        if directory.is_dir():
            return False
        directory.mkdir(parents=True, exist_ok=False)
        self.logger.info(f"Created directory {directory}")
        return True


def scaffold_project(
    project_dir: str | Path,
    layout: ScaffoldLayout | None = None,
    settings: SyncSettings | None = None,
    keep: bool = True,
) -> ScaffoldResult:
    """Create the project skeleton under ``project_dir``; see :class:`ProjectScaffolder`."""
    return ProjectScaffolder(layout, settings).create(project_dir, keep=keep)
