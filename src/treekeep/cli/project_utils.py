"""Shared helpers for the sync, model and scaffold commands.

Resolves which configuration file applies to a run, turns configuration
plus command-line overrides into validated settings, and defines the
options every synchronizing command accepts.
"""

from pathlib import Path

import click
from pydantic import ValidationError
from rich.markup import escape

from treekeep.base.errors import ConfigurationError
from treekeep.scaffold.layout import ScaffoldLayout
from treekeep.sync.models import SyncReport, SyncSettings
from treekeep.utils.config import ConfigBuilder, find_config_file, load_config
from treekeep.utils.logger import set_log_level

from .styles import Messages, Styles, console


def resolve_config_path(directory: str | Path | None, config_arg: str | None = None) -> Path | None:
    """Resolve the configuration file for a run.

    Resolution priority:
    1. --config CLI argument (if provided)
    2. treekeep.yml inside the directory being processed (if present)
    3. None (built-in defaults)

    Args:
        directory: Directory the command operates on
        config_arg: Config file path from --config flag (optional)

    Returns:
        Path to the configuration file, or None for defaults

    Examples:
        >>> resolve_config_path("models/resnet", "ci/treekeep.yml")
        PosixPath('ci/treekeep.yml')

        >>> resolve_config_path("/projects/demo")  # /projects/demo/treekeep.yml exists
        PosixPath('/projects/demo/treekeep.yml')
    """
    if config_arg:
        return Path(config_arg).expanduser()

    if directory and Path(directory).is_dir():
        return find_config_file(directory)

    return None


def load_run_config(directory: str | Path | None, config_arg: str | None = None) -> ConfigBuilder:
    """Load the configuration for a run and make it the process default."""
    return load_config(resolve_config_path(directory, config_arg), set_as_default=True)


def configure_logging(config: ConfigBuilder, verbose: bool = False) -> None:
    """Apply the configured log level, or DEBUG when verbose."""
    level = "DEBUG" if verbose else config.get("logging.level", "WARNING")
    try:
        set_log_level(level)
    except ValueError as e:
        raise ConfigurationError(f"Invalid logging.level in configuration: {e}") from e


def build_sync_settings(
    config: ConfigBuilder,
    marker: str | None = None,
    exclude: tuple[str, ...] = (),
    follow_symlinks: bool = False,
    skip_unreadable: bool = False,
    dry_run: bool = False,
) -> SyncSettings:
    """Combine the ``sync`` configuration section with command-line overrides.

    Flags only ever switch behavior on; exclude patterns from the command
    line are appended to the configured ones. A single configured pattern
    may be written as a plain string.

    Raises:
        ConfigurationError: If the resulting settings fail validation
    """
    values = config.section("sync")
    configured_exclude = values.get("exclude") or []
    if isinstance(configured_exclude, str):
        configured_exclude = [configured_exclude]
    elif not isinstance(configured_exclude, list):
        raise ConfigurationError(
            f"Invalid sync settings: sync.exclude must be a pattern or a list of patterns, "
            f"got {type(configured_exclude).__name__}"
        )
    values["exclude"] = configured_exclude + list(exclude)

    if marker is not None:
        values["marker_name"] = marker
    if follow_symlinks:
        values["follow_symlinks"] = True
    if skip_unreadable:
        values["on_unreadable"] = "skip"
    if dry_run:
        values["dry_run"] = True

    try:
        return SyncSettings.model_validate(values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid sync settings: {e}") from e


def build_scaffold_layout(
    config: ConfigBuilder,
    directories: tuple[str, ...] = (),
    packages: tuple[str, ...] = (),
) -> ScaffoldLayout:
    """Combine the ``scaffold`` configuration section with command-line overrides.

    Directories or packages given on the command line replace the
    configured lists. Packages are added to the directories automatically,
    except that configured packages outside a directory list given on the
    command line are dropped.

    Raises:
        ConfigurationError: If the resulting layout fails validation
    """
    values = config.section("scaffold")
    if directories:
        values["directories"] = list(directories)
        if not packages:
            values["packages"] = [
                pkg for pkg in values.get("packages") or [] if pkg in values["directories"]
            ]
    if packages:
        values["packages"] = list(packages)

    dirs = list(values.get("directories") or [])
    for package in values.get("packages") or []:
        if package not in dirs:
            dirs.append(package)
    values["directories"] = dirs

    try:
        return ScaffoldLayout.model_validate(values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid scaffold layout: {e}") from e


def describe_error(error: Exception) -> str:
    """Human-readable message naming the failing path where there is one."""
    if isinstance(error, OSError) and error.filename:
        reason = error.strerror or error.__class__.__name__
        return f"{reason}: {error.filename}"
    return str(error)


def print_sync_summary(report: SyncReport) -> None:
    """Print a short summary of a run to standard error."""
    for skipped in report.skipped:
        console.print(Messages.warning(f"Skipped {escape(str(skipped))}"))

    root = escape(str(report.root))
    total = len(report.placeholders)
    created = len(report.created)
    if report.dry_run:
        console.print(
            f"[{Styles.INFO}]Dry run:[/{Styles.INFO}] would add {created} of {total} "
            f"placeholder(s) in {Messages.path(root)}"
        )
    else:
        console.print(
            Messages.success(
                f"Added {created} placeholder(s), {total - created} already present in {root}"
            )
        )


_SYNC_OPTIONS = [
    click.option(
        "--marker",
        "-m",
        default=None,
        help="Placeholder file name (default: .gitkeep, or sync.marker_name from config)",
    ),
    click.option(
        "--exclude",
        "-x",
        multiple=True,
        help="Glob pattern of directory names to skip, with their contents (repeatable)",
    ),
    click.option("--follow-symlinks", is_flag=True, help="Descend into symlinked directories"),
    click.option(
        "--skip-unreadable",
        is_flag=True,
        help="Warn about directories that cannot be listed instead of aborting",
    ),
    click.option(
        "--config",
        "-c",
        "config_path",
        type=click.Path(dir_okay=False),
        default=None,
        help="Configuration file (default: treekeep.yml inside the target directory)",
    ),
    click.option("--quiet", "-q", is_flag=True, help="Do not print the summary"),
    click.option("--verbose", "-v", is_flag=True, help="Enable debug logging"),
]


def sync_options(func):
    """Attach the options shared by every synchronizing command."""
    for option in reversed(_SYNC_OPTIONS):
        func = option(func)
    return func
