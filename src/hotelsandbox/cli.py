#!/usr/bin/env python3
"""Command-line entry point for the hotel sandbox server.

Usage:
    hotelsandbox --port 8080
"""

import argparse
import sys

import uvicorn
from loguru import logger

from hotelsandbox.api.app import create_app
from hotelsandbox.core.config import load_config
from hotelsandbox.utils.exceptions import FixtureLoadError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the hotel sandbox API server")
    parser.add_argument("--host", help="Server host")
    parser.add_argument("--port", type=int, help="Server port")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")
    parser.add_argument("--fixtures-dir", help="Directory containing the JSON fixtures")
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def main(argv: list[str] | None = None) -> int:
    """Run the server."""
    args = parse_args(argv)
    config = load_config(
        host=args.host,
        port=args.port,
        log_level=args.log_level,
        fixtures_dir=args.fixtures_dir,
    )
    configure_logging(config.log_level)

    try:
        app = create_app(config)
    except FixtureLoadError as e:
        logger.error("Failed to load fixtures: {}", e)
        return 1

    logger.info("Starting Hotel Sandbox API on {}:{}", config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
