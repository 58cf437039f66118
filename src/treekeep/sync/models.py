"""Data model for tree synchronization.

``DirectoryNode`` values are discovered during traversal and thrown away
afterwards; only the marker files they stand for persist between runs.
``SyncSettings`` carries the validated knobs of a run and ``SyncReport``
what a run did.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_MARKER_NAME = ".gitkeep"


class SyncSettings(BaseModel):
    """Options controlling one synchronization run."""

    marker_name: str = Field(default=DEFAULT_MARKER_NAME, description="Placeholder file name")
    follow_symlinks: bool = Field(default=False, description="Descend into symlinked directories")
    on_unreadable: Literal["abort", "skip"] = Field(
        default="abort", description="What to do with directories that cannot be listed"
    )
    exclude: list[str] = Field(
        default_factory=list, description="Glob patterns of directory names to prune"
    )
    dry_run: bool = Field(default=False, description="Report without writing")

    @field_validator("marker_name")
    @classmethod
    def validate_marker_name(cls, v: str) -> str:
        """Accept only a plain file name that can live directly in a directory."""
        name = v.strip()
        if not name:
            raise ValueError("marker name cannot be empty")
        if name in (".", ".."):
            raise ValueError(f"marker name cannot be '{name}'")
        separators = {"/", os.sep} | ({os.altsep} if os.altsep else set())
        if any(sep in name for sep in separators):
            raise ValueError(f"marker name must not contain a path separator: {name!r}")
        return name


@dataclass(frozen=True)
class DirectoryNode:
    """A directory visited during synchronization.

    ``path`` keeps the form the root was given in, so reported marker paths
    read the way the user typed the root.
    """

    path: Path
    marker_name: str = DEFAULT_MARKER_NAME

    @property
    def marker_path(self) -> Path:
        return self.path / self.marker_name

    @property
    def has_placeholder(self) -> bool:
        """Whether anything named like the marker exists here, checked on every access."""
        return os.path.lexists(self.marker_path)

    def children(self, follow_symlinks: bool = False) -> list["DirectoryNode"]:
        """List immediate child directories, sorted by name.

        A directory carrying the marker name stands in for the marker and
        is not listed.

        Raises:
            OSError: If the directory cannot be listed
        """
        with os.scandir(self.path) as entries:
            names = sorted(
                entry.name
                for entry in entries
                if entry.name != self.marker_name
                and entry.is_dir(follow_symlinks=follow_symlinks)
            )
        return [DirectoryNode(self.path / name, self.marker_name) for name in names]


def _sorted_paths(paths) -> list[Path]:
    return sorted(paths, key=str)


@dataclass
class SyncReport:
    """Outcome of synchronizing one tree.

    All path lists are sorted ascending by their string form.
    """

    root: Path
    placeholders: list[Path] = field(default_factory=list)
    created: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    dry_run: bool = False

    def __post_init__(self):
        self.placeholders = _sorted_paths(self.placeholders)
        self.created = _sorted_paths(self.created)
        self.skipped = _sorted_paths(self.skipped)

    @property
    def existing(self) -> list[Path]:
        """Markers that were already present before the run."""
        created = set(self.created)
        return [path for path in self.placeholders if path not in created]
