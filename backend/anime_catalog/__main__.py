#!/usr/bin/env python3
"""
Anime Catalog launcher.

Usage:
    python -m anime_catalog                         # Serve on the configured port
    python -m anime_catalog --port 8080             # Override the port
    python -m anime_catalog --anime-file data.json  # Serve another catalog file
"""
import argparse
import os
from typing import Optional, Sequence

import uvicorn


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="anime-catalog",
        description="Serve the anime catalog API",
    )
    parser.add_argument("--host", help="Interface to bind (default: HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, help="Port to listen on (default: PORT or 3000)")
    parser.add_argument("--anime-file", help="JSON catalog file (default: ANIME_FILE)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Apply command line overrides and run the server."""
    args = parse_args(argv)

    # Settings are read from the environment when the app is imported,
    # so overrides must be in place before uvicorn loads it.
    if args.host:
        os.environ["HOST"] = args.host
    if args.port:
        os.environ["PORT"] = str(args.port)
    if args.anime_file:
        os.environ["ANIME_FILE"] = os.path.abspath(args.anime_file)

    from anime_catalog.config import settings

    uvicorn.run(
        "anime_catalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
