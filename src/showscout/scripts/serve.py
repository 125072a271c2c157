"""Run the ShowScout API with uvicorn."""

import argparse
import logging

import uvicorn

from showscout.config import settings

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the ShowScout extraction API.")
    parser.add_argument("--host", default=settings.api_host, help=f"Bind address (default: {settings.api_host})")
    parser.add_argument("--port", type=int, default=settings.api_port, help=f"Port (default: {settings.api_port})")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    uvicorn.run("showscout.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
