"""Entry point for the User CRUD API.

Starts the FastAPI application under uvicorn.  Host and port default
to ``HOST``/``PORT`` from the environment (``0.0.0.0:8080``) and can be
overridden on the command line.  The SQLite database location is read
from ``DATABASE_URL``; its schema is created on startup.

Usage:
    python run.py [--host 127.0.0.1] [--port 8080]
"""
import argparse
import asyncio

from uvicorn import Config, Server

from user_crud_api.app.core.config import settings


async def run_api(host: str, port: int) -> None:
    config = Config(
        app="user_crud_api.app.main:app",
        host=host,
        port=port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    ap = argparse.ArgumentParser(description="Serve the User CRUD API.")
    ap.add_argument("--host", default=settings.host, help="Interface to bind (default: %(default)s)")
    ap.add_argument("--port", type=int, default=settings.port, help="Port to listen on (default: %(default)s)")
    args = ap.parse_args()
    asyncio.run(run_api(args.host, args.port))


if __name__ == "__main__":
    main()
