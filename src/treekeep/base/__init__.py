"""Base Module - Shared exception hierarchy.

Exports the exception types raised across treekeep so callers can catch
``TreeKeepError`` for every failure the package itself signals.
"""

from .errors import ConfigurationError, NotFoundError, TreeKeepError

__all__ = ["TreeKeepError", "NotFoundError", "ConfigurationError"]
