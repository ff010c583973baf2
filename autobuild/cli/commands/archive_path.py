"""``autobuild archive-path`` — preview where a new run would archive."""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console

from autobuild.config import Settings
from autobuild.core.run_path import RunPathAllocator, join_path
from autobuild.models.archive import ArchiveLocation, BucketIdentity

console = Console()


def archive_path_cmd(
    bucket: str = typer.Argument(..., help="Archive bucket name."),
    root: str = typer.Option(
        None, "--root", "-r", help="Path fragment to place the run prefix under."
    ),
) -> None:
    """Print the fully-qualified archive location for a fresh assembly."""
    settings = Settings()
    root = settings.archive_path_root if root is None else root
    try:
        bucket_identity = BucketIdentity(name=bucket)
    except ValidationError as exc:
        console.print(f"[red]Invalid bucket:[/red] {exc.errors()[0]['msg']}")
        raise typer.Exit(code=1) from exc

    prefix = RunPathAllocator().allocate(random_suffix_length=settings.archive_suffix_length)
    location = ArchiveLocation(bucket=bucket_identity, path=join_path(root, prefix))
    typer.echo(location.full_path)
