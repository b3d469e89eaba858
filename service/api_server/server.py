from __future__ import annotations

"""Run the graph engine HTTP facade under uvicorn."""

import click
import uvicorn

from .config import ApiSettings


@click.command()
@click.option("--host", default=None, help="Bind address (defaults to $TRIPLEFORGE_API_HOST).")
@click.option("--port", type=int, default=None, help="Bind port (defaults to $TRIPLEFORGE_API_PORT).")
@click.option("--reload", is_flag=True, default=False, help="Restart on code changes.")
def main(host: str | None, port: int | None, reload: bool) -> None:  # pragma: no cover - starts a server
    """Serve the conversion, entailment and lowering endpoints."""

    settings = ApiSettings.from_env()
    uvicorn.run(
        "service.api_server:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_config=None,
    )


if __name__ == "__main__":  # pragma: no cover
    main()
