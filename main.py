#!/usr/bin/env python3
"""
Dockside — CLI Entry Point

Usage:
    python main.py                          # Interactive vessel management console
    python main.py --web                    # Launch the animal registry API
    python main.py --web --port 9000        # API on another port
    python main.py --log-level DEBUG        # Verbose logging
"""

import argparse
import sys

from dockside.config.constants import WEB_HOST, WEB_PORT, LOG_LEVEL
from dockside.utils.logger import get_logger, set_level

logger = get_logger("dockside.main")


def launch_web(host: str, port: int, reload: bool = False):
    """Launch the animal registry API."""
    import uvicorn

    print(f"Launching animal registry API at http://{host}:{port}")
    print("Press Ctrl+C to stop.")
    uvicorn.run("dockside.web.app:app", host=host, port=port, reload=reload)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Dockside -- vessel cargo console and animal registry API",
    )
    parser.add_argument("--web", action="store_true", help="Launch the animal registry API")
    parser.add_argument("--host", type=str, default=WEB_HOST, help=f"API host (default: {WEB_HOST})")
    parser.add_argument("--port", type=int, default=WEB_PORT, help=f"API port (default: {WEB_PORT})")
    parser.add_argument("--reload", action="store_true", help="Auto-reload the API on code changes")
    parser.add_argument(
        "--log-level", type=str.upper, default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {LOG_LEVEL})",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    set_level(args.log_level)

    if args.web:
        launch_web(args.host, args.port, reload=args.reload)
        return

    from dockside.console import run_console

    logger.debug("Starting console session")
    sys.exit(run_console())


if __name__ == "__main__":
    main()
