"""CLI interface for cmsmap."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cmsmap.cms.cache_key import build_cache_key
from cmsmap.config import load_config
from cmsmap.content_model import ArrayField, ContentFieldCollection, ContentModel
from cmsmap.content_model.loader import load_content_model
from cmsmap.errors import ConfigParsingError

app = typer.Typer(
    name="cmsmap",
    help="Inspect content models and build cache keys for headless CMS content.",
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from cmsmap import __version__

        console.print(f"cmsmap {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """cmsmap - content model and cache key tooling."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _describe_fields(fields: ContentFieldCollection) -> str:
    parts: list[str] = []
    for field in fields:
        if isinstance(field, ArrayField):
            parts.append(f"{field.name}[{_describe_fields(field)}]")
        else:
            parts.append(f"{field.name}:{field.get_type()}")
    return ", ".join(parts)


def _load_model(model_path: Path | None) -> ContentModel:
    if model_path is None:
        config = load_config()
        if not config.content_model.is_configured:
            console.print("[red]Error:[/red] No content model given.")
            console.print("Pass a path or set content_model.path in .cmsmap.toml.")
            raise typer.Exit(1)
        model_path = Path(config.content_model.path)
    try:
        return load_content_model(model_path)
    except ConfigParsingError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1) from exc


@app.command(name="types")
def types_cmd(
    model_path: Annotated[
        Optional[Path],
        typer.Argument(help="Content model TOML file. Defaults to the configured path."),
    ] = None,
) -> None:
    """List the content types in a content model."""
    model = _load_model(model_path)

    table = Table(title="Content types")
    table.add_column("Name", style="bold")
    table.add_column("API endpoint")
    table.add_column("Fields")
    for content_type in model:
        table.add_row(
            content_type.name,
            content_type.get_api_endpoint(),
            escape(_describe_fields(content_type)),
        )
    console.print(table)


@app.command(name="validate")
def validate_cmd(
    model_path: Annotated[
        Optional[Path],
        typer.Argument(help="Content model TOML file. Defaults to the configured path."),
    ] = None,
) -> None:
    """Load a content model and report whether it is valid."""
    model = _load_model(model_path)
    console.print(f"[green]Content model is valid:[/green] {len(model)} content type(s)")


@app.command(name="cache-key")
def cache_key_cmd(
    params: Annotated[
        Optional[list[str]],
        typer.Argument(help="Parameters to build the cache key from."),
    ] = None,
) -> None:
    """Print the cache key built from the given parameters."""
    typer.echo(build_cache_key(*(params or [])))


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
