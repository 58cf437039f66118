"""treekeep - placeholder markers for empty directories.

Keeps otherwise-empty directories trackable in version control by making
sure every directory of a tree holds exactly one zero-byte marker file.

This package contains:
- The tree placeholder synchronizer
- Per-model and project-skeleton helpers
- Configuration and logging utilities
- The command-line interface
"""

# Version information
__version__ = "0.3.1"

__all__ = ["__version__"]
