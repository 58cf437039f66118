"""Command-line interface for treekeep.

Commands:
    - sync: Add placeholder files to every directory of a tree
    - model: Same, for one model under the models directory
    - scaffold: Create the project skeleton and keep its directories

Architecture:
    Uses Click for command-line parsing with a group-based structure.
    Each command is implemented in its own module and lazy-loaded.
    'treekeep-sync' installs the sync command on its own.
"""

from .main import cli, main

__all__ = ["cli", "main"]
