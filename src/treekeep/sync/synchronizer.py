"""Tree placeholder synchronization.

Walks a directory tree and makes sure every directory, the root included,
holds exactly one placeholder marker file. Existing markers are never
rewritten, so running twice performs no writes the second time and reports
the same sorted list of markers.

Traversal is a depth-first walk over an explicit stack of
:class:`~treekeep.sync.models.DirectoryNode` values. Symlinked directories
are only entered when ``follow_symlinks`` is set, in which case real paths
are tracked so a link cycle is visited once.

Examples:
    >>> synchronize("models/resnet")
    [PosixPath('models/resnet/.gitkeep'), PosixPath('models/resnet/checkpoints/.gitkeep')]

    >>> sync = TreePlaceholderSynchronizer(SyncSettings(marker_name=".keep", dry_run=True))
    >>> report = sync.run("data")
    >>> report.created
    [PosixPath('data/.keep'), PosixPath('data/raw/.keep')]
"""

import fnmatch
import os
import time
from pathlib import Path

from treekeep.base.errors import NotFoundError
from treekeep.sync.models import DirectoryNode, SyncReport, SyncSettings
from treekeep.utils.logger import get_logger


class TreePlaceholderSynchronizer:
    """Ensure a placeholder marker in every directory of a tree.

    A failure to list or write aborts the run at once (unless
    ``on_unreadable="skip"`` covers a listing failure). Markers written
    before the failure stay on disk.
    """

    def __init__(self, settings: SyncSettings | None = None):
        self.settings = settings or SyncSettings()
        self.logger = get_logger("synchronizer")

    def run(self, root_path: str | Path) -> SyncReport:
        """Synchronize the tree rooted at ``root_path``.

        Args:
            root_path: Directory to synchronize

        Returns:
            SyncReport describing every marker ensured by the run

        Raises:
            NotFoundError: If root_path does not exist or is not a directory.
                Nothing is written in that case.
            PermissionError: If a marker cannot be created, or a directory
                cannot be listed while ``on_unreadable`` is ``"abort"``.
            OSError: For any other filesystem failure.
        """
        root = self._resolve_root(root_path)
        settings = self.settings

        self.logger.key_info(f"Synchronizing {root}")
        start = time.perf_counter()

        placeholders: list[Path] = []
        created: list[Path] = []
        skipped: list[Path] = []
        visited: set[str] = set()

        stack = [DirectoryNode(root, settings.marker_name)]
        while stack:
            node = stack.pop()

            if settings.follow_symlinks:
                real_path = os.path.realpath(node.path)
                if real_path in visited:
                    self.logger.warning(f"Already visited {real_path}, skipping {node.path}")
                    skipped.append(node.path)
                    continue
                visited.add(real_path)

            # Marker existence cannot be checked inside a directory without search permission
            if settings.on_unreadable == "skip" and not os.access(node.path, os.X_OK):
                self.logger.warning(f"Cannot search {node.path}, skipping")
                skipped.append(node.path)
                continue

            if self._ensure_marker(node):
                created.append(node.marker_path)
            placeholders.append(node.marker_path)

            try:
                children = node.children(follow_symlinks=settings.follow_symlinks)
            except OSError as e:
                if settings.on_unreadable == "skip":
                    self.logger.warning(f"Cannot list {node.path}: {e.strerror or e}, skipping")
                    skipped.append(node.path)
                    continue
                self.logger.error(f"Cannot list {node.path}: {e.strerror or e}")
                raise

            for child in reversed(children):
                if self._is_excluded(child):
                    self.logger.debug(f"Excluded {child.path}")
                    continue
                stack.append(child)

        report = SyncReport(
            root=root,
            placeholders=placeholders,
            created=created,
            skipped=skipped,
            dry_run=settings.dry_run,
        )

        verb = "Would create" if settings.dry_run else "Created"
        self.logger.success(
            f"{verb} {len(report.created)} of {len(report.placeholders)} markers under {root}"
        )
        self.logger.timing(f"Synchronization took {time.perf_counter() - start:.3f} seconds")
        return report

    def _resolve_root(self, root_path: str | Path) -> Path:
        if root_path is None or str(root_path) == "":
            raise NotFoundError("", "Root directory must not be empty")

        root = Path(root_path).expanduser()
        if not root.exists():
            raise NotFoundError(root, f"Directory {root} does not exist")
        if not root.is_dir():
            raise NotFoundError(root, f"{root} is not a directory")
        return root

    def _ensure_marker(self, node: DirectoryNode) -> bool:
        """Create the node's marker if absent. Returns True when it was (or would be) written."""
        if node.has_placeholder:
            self.logger.debug(f"Marker present in {node.path}")
            return False

        if self.settings.dry_run:
            self.logger.debug(f"Would create {node.marker_path}")
            return True

        try:
            node.marker_path.touch(exist_ok=False)
        except FileExistsError:
            # Appeared between the check and the write; leave it alone
            return False
        except OSError as e:
            self.logger.error(f"Cannot create {node.marker_path}: {e.strerror or e}")
            raise

        self.logger.info(f"Created {node.marker_path}")
        return True

    def _is_excluded(self, node: DirectoryNode) -> bool:
        name = node.path.name
        return any(fnmatch.fnmatch(name, pattern) for pattern in self.settings.exclude)


def synchronize(root_path: str | Path, settings: SyncSettings | None = None) -> list[Path]:
    """Ensure a marker in every directory under ``root_path``.

    Args:
        root_path: Directory to synchronize
        settings: Optional run settings (defaults to ``.gitkeep`` markers)

    Returns:
        Every ensured marker path, pre-existing or new, sorted ascending

    Raises:
        NotFoundError: If root_path does not exist or is not a directory
        PermissionError: If a marker cannot be created
    """
    return TreePlaceholderSynchronizer(settings).run(root_path).placeholders


def synchronize_model(
    model_name: str,
    models_dir: str | Path = "models",
    base_dir: str | Path = ".",
    settings: SyncSettings | None = None,
) -> SyncReport:
    """Synchronize the directory of one model, ``<base_dir>/<models_dir>/<model_name>``.

    Args:
        model_name: Name of the model directory
        models_dir: Directory holding all models, relative to base_dir
        base_dir: Directory models_dir is resolved against

    Returns:
        SyncReport for the model directory

    Raises:
        ValueError: If model_name is empty
        NotFoundError: If the model directory does not exist
    """
    if not model_name or not model_name.strip():
        raise ValueError("Model name cannot be empty")

    relative_dir = Path(models_dir) / model_name
    model_dir = Path(base_dir) / relative_dir
    if not model_dir.is_dir():
        raise NotFoundError(model_dir, f"Model directory {relative_dir} does not exist")

    return TreePlaceholderSynchronizer(settings).run(model_dir)
