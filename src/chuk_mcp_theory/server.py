#!/usr/bin/env python3
"""
Command line entry point for chuk-mcp-theory.

Runs the theory tools over stdio (for MCP clients that spawn the
process) or HTTP. The project directory holds the user's saved
progressions (progressions/) and exported MIDI files (output/); it
defaults to the working directory.
"""

import argparse
import asyncio
import logging
import os
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

PROJECT_DIR_ENV = "CHUK_THEORY_PROJECT_DIR"


def build_parser() -> argparse.ArgumentParser:
    """Command line options for the theory server."""
    parser = argparse.ArgumentParser(
        prog="chuk-mcp-theory",
        description="Music theory tools (notes, scales, chords, keys) over MCP",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--project-dir",
        type=Path,
        default=None,
        help=f"Directory for progressions/ and output/ (default: ${PROJECT_DIR_ENV} or cwd)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse options, configure the project directory and serve."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.project_dir is not None:
        os.environ[PROJECT_DIR_ENV] = str(args.project_dir.expanduser().resolve())

    # Paths are fixed when the server module is imported
    from chuk_mcp_theory.async_server import BASE_PATH, mcp

    logger.info("Theory project directory: %s", BASE_PATH)
    if args.transport == "stdio":
        logger.info("Serving theory tools over stdio")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info("Serving theory tools over http on port %d", args.port)
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
