"""Utilities Package.

Modules:
    config: Configuration loading and dot-path access
    logger: Rich-formatted component loggers
"""

from . import config, logger

__all__ = ["config", "logger"]
