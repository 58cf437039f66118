"""Error Hierarchy - Exceptions raised by treekeep.

Filesystem failures that happen while writing markers (``PermissionError``
and other ``OSError`` subclasses) are not wrapped: they propagate unchanged
so the ``filename`` attribute keeps naming the path that failed. Only the
conditions treekeep detects on its own get dedicated types.

.. seealso::
   :mod:`treekeep.sync.synchronizer` : Raises :class:`NotFoundError`
   :mod:`treekeep.utils.config` : Raises :class:`ConfigurationError`
"""

from pathlib import Path


class TreeKeepError(Exception):
    """Base exception for all treekeep errors.

    This is the root exception class for all custom exceptions within
    treekeep. The CLI catches it to turn failures into exit code 1.
    """

    pass


class NotFoundError(TreeKeepError):
    """Exception for a root that does not exist or is not a directory.

    Raised before any write happens, so a caller seeing this error knows
    the tree was left untouched.

    :param path: The path that failed to resolve to a directory
    :type path: Path | str
    :param message: Optional message overriding the default wording
    :type message: str | None
    """

    def __init__(self, path: Path | str, message: str | None = None):
        self.path = Path(path)
        if message is None:
            message = f"Directory {path} does not exist"
        super().__init__(message)


class ConfigurationError(TreeKeepError, ValueError):
    """Exception for configuration-related errors.

    Raised when a configuration file cannot be parsed, does not contain a
    mapping, or holds values that fail validation.
    """

    pass
