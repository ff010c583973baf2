"""``autobuild describe`` — render a pipeline as a Rich table."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from autobuild.config import Settings
from autobuild.core.assembler import PipelineAssembler, assemble_from_config
from autobuild.core.config_loader import load_pipeline_config
from autobuild.core.errors import ConfigurationError


def build_stage_table(assembler: PipelineAssembler) -> Table:
    table = Table(title=f"Pipeline {assembler.pipeline_name}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Stage", style="cyan", no_wrap=True)
    table.add_column("Action", style="green", no_wrap=True)
    table.add_column("Kind")
    table.add_column("Reads")
    table.add_column("Writes")

    for index, stage in enumerate(assembler.stages, start=1):
        stage_label = f"{stage.name} [bold red](prod)[/bold red]" if stage.is_prod else stage.name
        for position, action in enumerate(stage.actions):
            table.add_row(
                str(index) if position == 0 else "",
                stage_label if position == 0 else "",
                action.name,
                action.kind.value,
                ", ".join(s.name for s in action.input_slots) or "-",
                ", ".join(s.name for s in action.output_slots) or "-",
            )
    return table


def describe_cmd(
    config_path: Path = typer.Argument(..., help="Pipeline configuration (TOML)."),
) -> None:
    """Show the stages, actions and artifact edges of CONFIG_PATH."""
    console = Console()
    try:
        config = load_pipeline_config(config_path)
        assembler = assemble_from_config(config, settings=Settings())
    except ConfigurationError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    console.print(build_stage_table(assembler))
    console.print(
        Panel(
            assembler.get_archive_location().full_path,
            title="[bold]Archive location[/bold]",
            border_style="green",
        )
    )
