"""Command-line interface for the combined data service."""

import asyncio
import json
from typing import Optional

import typer
import uvicorn
from loguru import logger
from pydantic import ValidationError
from typing_extensions import Annotated

from combined_data_service.config import LogLevel, Settings, get_settings
from combined_data_service.core.aggregator import combine_once
from combined_data_service.errors import CombinedDataError
from combined_data_service.utils.logging import setup_logging

app = typer.Typer(help="Combined Data Service - join comments, posts and users into one feed")


def _load_settings() -> Settings:
    """Load settings, turning invalid environment values into a usage error."""
    try:
        return get_settings()
    except ValidationError as e:
        typer.echo(f"Error: invalid configuration: {e}", err=True)
        raise typer.Exit(code=2)


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Host to bind to")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port to listen on")] = None,
    log_level: Annotated[
        Optional[LogLevel], typer.Option(case_sensitive=False, help="Logging level")
    ] = None,
) -> None:
    """Run the HTTP server."""
    settings = _load_settings()
    setup_logging(log_level)

    bind_host = host or settings.listen_host
    bind_port = port or settings.listen_port

    from combined_data_service.api.main import app as api_app

    logger.info(f"Server listening on port {bind_port}...")
    uvicorn.run(
        api_app,
        host=bind_host,
        port=bind_port,
        log_level=(log_level or settings.log_level).value.lower(),
    )


@app.command()
def fetch(
    comments_url: Annotated[Optional[str], typer.Option(help="Comments endpoint")] = None,
    posts_url: Annotated[Optional[str], typer.Option(help="Posts endpoint")] = None,
    users_url: Annotated[Optional[str], typer.Option(help="Users endpoint")] = None,
    indent: Annotated[int, typer.Option(help="JSON indentation, 0 for compact output")] = 2,
    log_level: Annotated[
        LogLevel, typer.Option(case_sensitive=False, help="Logging level")
    ] = LogLevel.WARNING,
) -> None:
    """Fetch and join the collections once and print the result as JSON."""
    _load_settings()
    setup_logging(log_level)

    try:
        records = asyncio.run(
            combine_once(comments_url=comments_url, posts_url=posts_url, users_url=users_url)
        )
    except CombinedDataError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    payload = [record.model_dump(by_alias=True) for record in records]
    typer.echo(json.dumps(payload, indent=indent or None))


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
