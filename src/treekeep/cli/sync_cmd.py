"""Tree synchronization command.

This module provides the 'treekeep sync' command, also installed on its
own as 'treekeep-sync'. It prints every placeholder path of the tree, one
per line and sorted, on standard output; the summary and any error go to
standard error.
"""

import sys

import click
from rich.markup import escape

from treekeep.base.errors import TreeKeepError
from treekeep.sync.synchronizer import TreePlaceholderSynchronizer

from .project_utils import (
    build_sync_settings,
    configure_logging,
    describe_error,
    load_run_config,
    print_sync_summary,
    sync_options,
)
from .styles import Messages, console


@click.command()
@click.argument("root_path", type=click.Path())
@sync_options
@click.option("--dry-run", is_flag=True, help="Show which placeholders would be added, write nothing")
def sync(
    root_path: str,
    marker: str | None,
    exclude: tuple[str, ...],
    follow_symlinks: bool,
    skip_unreadable: bool,
    config_path: str | None,
    quiet: bool,
    verbose: bool,
    dry_run: bool,
):
    """Add a placeholder file to every directory under ROOT_PATH.

    Directories that already have one are left untouched, so running the
    command again changes nothing. Every placeholder path is printed,
    sorted, one per line.

    ROOT_PATH: Directory to synchronize (included in the walk)

    Examples:

    \b
      # Keep every directory of a model trackable
      $ treekeep sync models/resnet

      # Preview without writing
      $ treekeep sync data --dry-run

      # Use a different marker and skip caches
      $ treekeep sync data --marker .keep --exclude __pycache__
    """
    try:
        config = load_run_config(root_path, config_path)
        configure_logging(config, verbose)
        settings = build_sync_settings(
            config,
            marker=marker,
            exclude=exclude,
            follow_symlinks=follow_symlinks,
            skip_unreadable=skip_unreadable,
            dry_run=dry_run,
        )
        report = TreePlaceholderSynchronizer(settings).run(root_path)
    except (TreeKeepError, OSError) as e:
        console.print(Messages.error(escape(describe_error(e))))
        raise click.Abort() from e

    for path in report.placeholders:
        click.echo(str(path))

    if not quiet:
        print_sync_summary(report)


def main():
    """Entry point for the standalone treekeep-sync script."""
    try:
        sync()
    except KeyboardInterrupt:
        click.echo("\nInterrupted", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
