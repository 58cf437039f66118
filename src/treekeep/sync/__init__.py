"""Tree synchronization package.

Exports the synchronizer, its entry-point functions and the data model.
"""

from .models import DEFAULT_MARKER_NAME, DirectoryNode, SyncReport, SyncSettings
from .synchronizer import TreePlaceholderSynchronizer, synchronize, synchronize_model

__all__ = [
    "DEFAULT_MARKER_NAME",
    "DirectoryNode",
    "SyncReport",
    "SyncSettings",
    "TreePlaceholderSynchronizer",
    "synchronize",
    "synchronize_model",
]
