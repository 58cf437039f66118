"""Project skeleton command.

This module provides the 'treekeep scaffold' command, which creates the
standard project directories (src, tests, docs, draft), adds empty
``__init__.py`` files to the package directories and then adds a
placeholder file to every directory of the project.
"""

import click
from rich.markup import escape

from treekeep.base.errors import TreeKeepError
from treekeep.scaffold.layout import ProjectScaffolder

from .project_utils import (
    build_scaffold_layout,
    build_sync_settings,
    configure_logging,
    describe_error,
    load_run_config,
    print_sync_summary,
    sync_options,
)
from .styles import Messages, console


@click.command()
@click.argument("project_dir", type=click.Path(file_okay=False), default=".")
@click.option(
    "--dir",
    "-d",
    "directories",
    multiple=True,
    help="Directory to create, relative to PROJECT_DIR (repeatable, replaces the default list)",
)
@click.option(
    "--package",
    "-p",
    "packages",
    multiple=True,
    help="Directory that gets an empty __init__.py (repeatable, replaces the default list)",
)
@click.option("--no-keep", is_flag=True, help="Create the layout without placeholder files")
@sync_options
def scaffold(
    project_dir: str,
    directories: tuple[str, ...],
    packages: tuple[str, ...],
    no_keep: bool,
    marker: str | None,
    exclude: tuple[str, ...],
    follow_symlinks: bool,
    skip_unreadable: bool,
    config_path: str | None,
    quiet: bool,
    verbose: bool,
):
    """Create the project skeleton in PROJECT_DIR.

    Existing directories and package files are kept as they are; only
    what is missing gets created.

    PROJECT_DIR: Project directory, created if missing (default: current directory)

    Examples:

    \b
      # Default layout: src, tests, docs, draft
      $ treekeep scaffold my-project

      # Custom layout
      $ treekeep scaffold my-project --dir src --dir notebooks --package src
    """
    try:
        config = load_run_config(project_dir, config_path)
        configure_logging(config, verbose)
        layout = build_scaffold_layout(config, directories=directories, packages=packages)
        settings = build_sync_settings(
            config,
            marker=marker,
            exclude=exclude,
            follow_symlinks=follow_symlinks,
            skip_unreadable=skip_unreadable,
        )
        result = ProjectScaffolder(layout, settings).create(project_dir, keep=not no_keep)
    except (TreeKeepError, OSError) as e:
        console.print(Messages.error(escape(describe_error(e))))
        raise click.Abort() from e

    if result.sync_report is not None:
        for path in result.sync_report.placeholders:
            click.echo(str(path))

    if quiet:
        return

    for directory in result.created_directories:
        console.print(f"  [success]✓[/success] Created [path]{escape(str(directory))}[/path]")
    for package_file in result.created_packages:
        console.print(f"  [success]✓[/success] Created [path]{escape(str(package_file))}[/path]")
    if result.sync_report is not None:
        print_sync_summary(result.sync_report)
    else:
        console.print(Messages.success(f"Scaffolded {escape(str(result.project_dir))}"))


if __name__ == "__main__":
    scaffold()
