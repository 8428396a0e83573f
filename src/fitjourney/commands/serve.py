"""Web server command."""

import os

import click

from ..errors import ConfigurationError
from .base import echo_error, ensure_initialized


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Start the API server.

    Requires FITJOURNEY_JWT_SECRET (or JWT) to be set.

    Examples:

        # Start on default port (8000)
        fitjourney serve

        # Expose to network (all interfaces)
        fitjourney serve --host 0.0.0.0

        # Development mode with auto-reload
        fitjourney serve --reload
    """
    settings = ensure_initialized(ctx)

    try:
        settings.require_jwt_secret()
    except ConfigurationError as e:
        echo_error(e.message)
        ctx.exit(1)

    import uvicorn

    from ..web import create_app

    click.echo()
    click.echo(click.style("Starting fitjourney API server...", fg="green"))
    click.echo()
    click.echo(f"  Local:   http://{host}:{port}/api/")
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    if reload:
        # The reloader rebuilds settings from the environment in a new process
        os.environ["FITJOURNEY_DATA_DIR"] = str(settings.data_dir)
        uvicorn.run(
            "fitjourney.web:create_app", host=host, port=port, reload=True, factory=True
        )
    else:
        uvicorn.run(create_app(settings), host=host, port=port)
