#!/usr/bin/env python3
"""
Main CLI entry point for the Game Reviews API server.
"""

import os

import click
import uvicorn

from . import __version__
from .config import settings
from .logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="gamereviews")
def cli() -> None:
    """Game Reviews CLI - run the server and inspect the schema."""
    pass


@cli.command()
@click.option("--host", default=settings.api_host, help="Host to bind to")
@click.option("--port", default=settings.api_port, type=int, help="Port to bind to")
@click.option(
    "--reload",
    is_flag=True,
    default=settings.api_reload,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Game Reviews API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Game Reviews API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # Reloaded workers import the app fresh and read settings from the environment
    if log_level == "debug":
        os.environ["GAMEREVIEWS_DEBUG"] = "true"
        os.environ["GAMEREVIEWS_LOG_LEVEL"] = "debug"

    uvicorn.run(
        "gamereviews.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


@cli.command()
def schema() -> None:
    """Print the GraphQL schema in SDL form."""
    from strawberry.printer import print_schema

    from .graphql.schema import schema as graphql_schema

    click.echo(print_schema(graphql_schema))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
