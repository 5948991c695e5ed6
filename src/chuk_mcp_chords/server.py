#!/usr/bin/env python3
"""
Entry point for the CHUK Chords MCP Server.

Parses the command line, picks the chord catalog to index and starts the
server over stdio or http. The catalog choice is handed to async_server
through environment variables, because that module builds its engine at
import time.
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

CATALOG_ENV = "CHUK_CHORDS_CATALOG"
CATALOGS_DIR_ENV = "CHUK_CHORDS_CATALOGS_DIR"


def build_parser() -> argparse.ArgumentParser:
    """Command line for the chord server."""
    parser = argparse.ArgumentParser(
        description=(
            "Chord recognition MCP server. Indexes one chord catalog at startup "
            "and answers identify/validate/render requests against it."
        ),
        epilog=(
            "Catalogs are YAML files. A file in the catalogs directory overrides "
            "a built-in catalog of the same name."
        ),
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
        "--catalog",
        help="Name of the catalog to index (default: standard)",
    )
    parser.add_argument(
        "--catalogs-dir",
        help="Directory of project catalogs (default: ./catalogs)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log dictionary build and catalog loading details",
    )
    return parser


def main() -> None:
    """Parse arguments, configure the catalog and run the server."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.catalog:
        os.environ[CATALOG_ENV] = args.catalog
    if args.catalogs_dir:
        os.environ[CATALOGS_DIR_ENV] = args.catalogs_dir

    # The engine is built on import, after the catalog settings above
    from chuk_mcp_chords.async_server import engine, mcp

    logger.info(
        "Serving %d chords from catalog '%s' (%s)",
        len(engine.catalog),
        engine.catalog.name,
        args.transport,
    )
    if args.transport == "stdio":
        asyncio.run(mcp.run_stdio())
    else:
        logger.info("Listening on port %d", args.port)
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
