"""Main Typer application — registers all CLI commands.

Entry point: ``autobuild`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from autobuild.cli.commands.archive_path import archive_path_cmd
from autobuild.cli.commands.describe import describe_cmd
from autobuild.cli.commands.synth import synth_cmd
from autobuild.config import Settings

app = typer.Typer(
    name="autobuild",
    help="autobuild: assemble self-mutating continuous-delivery pipelines.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def configure(
    log_level: str = typer.Option(
        None, "--log-level", help="Override AUTOBUILD_LOG_LEVEL for this invocation."
    ),
) -> None:
    """Configure logging before any command runs."""
    level = (log_level or Settings().log_level).upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


app.command(name="synth", help="Assemble a pipeline and emit its JSON definition.")(synth_cmd)
app.command(name="describe", help="Show the stages and actions of a pipeline.")(describe_cmd)
app.command(name="archive-path", help="Preview the archive location for a new run.")(
    archive_path_cmd
)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
