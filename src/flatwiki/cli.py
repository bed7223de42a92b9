"""CLI interface for FlatWiki."""

import logging
from pathlib import Path

import click
import uvicorn

from flatwiki.config import Settings
from flatwiki.core.errors import ConfigurationError
from flatwiki.main import create_app


@click.group()
def cli() -> None:
    """FlatWiki - a wiki of flat text files."""


@cli.command()
@click.option("--host", default=None, help="Address to bind (default: 127.0.0.1)")
@click.option("--port", "-p", type=int, default=None, help="Port to listen on (default: 8080)")
@click.option(
    "--data-dir",
    "-d",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the page files (default: current directory)",
)
@click.option("--log-level", default=None, help="Logging level (default: INFO)")
def serve(
    host: str | None,
    port: int | None,
    data_dir: Path | None,
    log_level: str | None,
) -> None:
    """Start the wiki server."""
    overrides = {
        key: value
        for key, value in {
            "host": host,
            "port": port,
            "data_dir": data_dir,
            "log_level": log_level,
        }.items()
        if value is not None
    }
    settings = Settings(**overrides)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        app = create_app(settings)
    except ConfigurationError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Starting server on {settings.host}:{settings.port}")
    click.echo(f"Data directory: {settings.data_dir.resolve()}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    cli()
