"""Per-model synchronization command.

This module provides the 'treekeep model' command, which adds placeholder
files to every directory of one model under the models directory
(``models/<model_name>`` by default).
"""

import click
from rich.markup import escape

from treekeep.base.errors import TreeKeepError
from treekeep.sync.synchronizer import synchronize_model

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
@click.argument("model_name")
@click.option(
    "--models-dir",
    default=None,
    help="Directory holding the models, relative to --base-dir (default: models)",
)
@click.option(
    "--base-dir",
    "-b",
    type=click.Path(file_okay=False),
    default=".",
    help="Directory the models directory lives in (default: current directory)",
)
@sync_options
def model(
    model_name: str,
    models_dir: str | None,
    base_dir: str,
    marker: str | None,
    exclude: tuple[str, ...],
    follow_symlinks: bool,
    skip_unreadable: bool,
    config_path: str | None,
    quiet: bool,
    verbose: bool,
):
    """Add placeholder files to every directory of a model.

    MODEL_NAME: Name of the model directory (e.g., resnet50)

    Examples:

    \b
      # Synchronize models/resnet50
      $ treekeep model resnet50

      # Models kept somewhere else
      $ treekeep model resnet50 --models-dir checkpoints --base-dir /data
    """
    try:
        config = load_run_config(base_dir, config_path)
        configure_logging(config, verbose)
        settings = build_sync_settings(
            config,
            marker=marker,
            exclude=exclude,
            follow_symlinks=follow_symlinks,
            skip_unreadable=skip_unreadable,
        )
        report = synchronize_model(
            model_name,
            models_dir=models_dir or config.get("models.models_dir", "models"),
            base_dir=base_dir,
            settings=settings,
        )
    except (TreeKeepError, ValueError, OSError) as e:
        console.print(Messages.error(escape(describe_error(e))))
        raise click.Abort() from e

    for path in report.placeholders:
        click.echo(str(path))

    if not quiet:
        print_sync_summary(report)


if __name__ == "__main__":
    model()
