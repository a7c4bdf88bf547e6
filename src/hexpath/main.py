"""Command-line entrypoint for the hexpath HTTP API."""

from __future__ import annotations

import argparse
import logging

import uvicorn

from hexpath.api.app import app
from hexpath.config import get_settings


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Run the hexpath API server")
    parser.add_argument("--host", default=settings.host, help="Host interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="TCP port to listen on")
    parser.add_argument("--log-level", default=settings.log_level, help="Root logging level")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable autoreload (dev mode)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.reload:
        uvicorn.run(
            "hexpath.api.app:app",
            host=args.host,
            port=args.port,
            reload=True,
            factory=False,
        )
    else:
        uvicorn.run(app, host=args.host, port=args.port, reload=False, factory=False)


if __name__ == "__main__":
    main()
