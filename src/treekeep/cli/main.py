"""Main CLI entry point for treekeep.

This module provides the main CLI group that organizes all treekeep
commands under the `treekeep` command namespace.

Commands are imported only when invoked, which keeps `treekeep --help`
fast and avoids importing pydantic models that a command does not need.
"""

import sys

import click

# Fix Windows console encoding to support Unicode characters (✓, ✗, ⚠️)
if sys.platform == "win32":
    try:
        import io

        if sys.stdout.encoding.lower() != "utf-8":
            sys.stdout = io.TextIOWrapper(
                sys.stdout.buffer, encoding="utf-8", errors="replace", line_buffering=True
            )
        if sys.stderr.encoding.lower() != "utf-8":
            sys.stderr = io.TextIOWrapper(
                sys.stderr.buffer, encoding="utf-8", errors="replace", line_buffering=True
            )
    except (AttributeError, OSError):
        # Without reconfiguration output still works, minus the symbols
        pass

from treekeep import __version__


class LazyGroup(click.Group):
    """Click group that lazily loads subcommands only when invoked."""

    commands_map = {
        "sync": "treekeep.cli.sync_cmd",
        "model": "treekeep.cli.model_cmd",
        "scaffold": "treekeep.cli.scaffold_cmd",
    }

    def get_command(self, ctx, cmd_name):
        """Lazily import and return the command when it's invoked."""
        if cmd_name not in self.commands_map:
            return None

        import importlib

        mod = importlib.import_module(self.commands_map[cmd_name])

        # Convention: command function is named after the command
        return getattr(mod, cmd_name)

    def list_commands(self, ctx):
        """Return list of available commands (for --help)."""
        return ["sync", "model", "scaffold"]


@click.group(cls=LazyGroup)
@click.version_option(version=__version__, prog_name="treekeep")
def cli():
    """treekeep - keep empty directories trackable in version control.

    Adds a zero-byte placeholder file (.gitkeep by default) to every
    directory of a tree, leaving existing placeholders untouched.

    Use 'treekeep COMMAND --help' for more information on a specific command.

    Examples:

    \b
      treekeep sync data              Add placeholders under data/
      treekeep model resnet50         Add placeholders under models/resnet50/
      treekeep scaffold my-project    Create src, tests, docs, draft and keep them
    """


def main():
    """Entry point for the treekeep CLI."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\nInterrupted", err=True)
        sys.exit(130)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
