# -*- coding: utf-8 -*-
"""
Command line entry point.

Usage:
    python -m dailydiet.cli migrate [--db-path PATH]
    python -m dailydiet.cli serve [--host HOST] [--port PORT]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import settings


def cmd_migrate(args: argparse.Namespace) -> int:
    """Create the users/meals tables."""
    from .app_db import init_app_db

    db_path = Path(args.db_path).expanduser() if args.db_path else settings.db_path
    init_app_db(db_path)
    print(f"Database ready: {db_path}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the HTTP API."""
    from .api import run

    run(host=args.host, port=args.port)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Daily Diet API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    migrate_parser = subparsers.add_parser("migrate", help="Create database tables")
    migrate_parser.add_argument(
        "--db-path",
        type=str,
        default=None,
        help=f"SQLite file (default: {settings.db_path})",
    )

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP server")
    serve_parser.add_argument("--host", type=str, default=None, help=f"Bind host (default: {settings.host})")
    serve_parser.add_argument("--port", type=int, default=None, help=f"Bind port (default: {settings.port})")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        "migrate": cmd_migrate,
        "serve": cmd_serve,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
