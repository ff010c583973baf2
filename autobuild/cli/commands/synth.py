"""``autobuild synth`` — assemble a pipeline and emit its definition."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console

from autobuild.config import Settings
from autobuild.core.assembler import assemble_from_config
from autobuild.core.config_loader import load_pipeline_config
from autobuild.core.errors import ConfigurationError

console = Console(stderr=True)


def synth_cmd(
    config_path: Path = typer.Argument(..., help="Pipeline configuration (TOML)."),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the definition here instead of stdout.",
    ),
) -> None:
    """Assemble the pipeline described by CONFIG_PATH and print it as JSON."""
    try:
        config = load_pipeline_config(config_path)
        assembler = assemble_from_config(config, settings=Settings())
    except ConfigurationError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    document = json.dumps(assembler.definition().model_dump(mode="json"), indent=2)
    if output is None:
        typer.echo(document)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(document + "\n", encoding="utf-8")
    console.print(f"[green]Wrote[/green] {output}")
