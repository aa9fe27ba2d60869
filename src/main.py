#!/usr/bin/env python3

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional

from database.base import StorageError
from services.app import ClipboardApp
from services.config import BACKENDS, AppConfig

logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="My Clipboard - keep a list of snippets ready to copy"
    )

    parser.add_argument(
        "-b", "--backend",
        choices=BACKENDS,
        default=None,
        help="Storage backend (default: $MYCLIPBOARD_BACKEND or file)"
    )

    parser.add_argument(
        "-d", "--data-dir",
        type=Path,
        default=None,
        help="Directory used by the file backend (default: ~/.myclipboard)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose debug logging"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="Show saved snippets, newest first")

    add = commands.add_parser("add", help="Save a new snippet at the top")
    add.add_argument("text")

    edit = commands.add_parser("edit", help="Replace the text of a snippet")
    edit.add_argument("item_id")
    edit.add_argument("text")

    delete = commands.add_parser("delete", help="Remove a snippet")
    delete.add_argument("item_id")

    move = commands.add_parser(
        "move", help="Move the snippet at FROM to the drop slot TO")
    move.add_argument("from_index", type=int)
    move.add_argument("to_index", type=int)

    copy = commands.add_parser("copy", help="Copy a snippet to the clipboard")
    copy.add_argument("item_id")

    serve = commands.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("-p", "--port", type=int, default=3001)

    return parser.parse_args(argv)


def build_config(args) -> AppConfig:
    config = AppConfig.from_env()
    overrides = {}
    if args.backend:
        overrides["backend"] = args.backend
    if args.data_dir:
        overrides["data_dir"] = args.data_dir.expanduser()
    return dataclasses.replace(config, **overrides) if overrides else config


def print_items(app: ClipboardApp) -> None:
    for index, item in enumerate(app.store.items):
        first_line = item.text.splitlines()[0] if item.text else ""
        more = " ..." if "\n" in item.text else ""
        print(f"{index:>3}  {item.id}  {first_line}{more}")


def run_command(app: ClipboardApp, args) -> bool:
    store = app.store

    if args.command == "list":
        print_items(app)
        return True

    if args.command == "add":
        item = store.create(args.text)
        if item is None:
            print("Nothing saved: text is empty", file=sys.stderr)
            return False
        print(item.id)
        return True

    if args.command == "edit":
        if not store.update(args.item_id, args.text):
            print(f"Nothing changed: unknown id {args.item_id} or empty text", file=sys.stderr)
            return False
        return True

    if args.command == "delete":
        if not store.delete(args.item_id):
            print(f"Unknown id {args.item_id}", file=sys.stderr)
            return False
        return True

    if args.command == "move":
        if not store.reorder(args.from_index, args.to_index):
            print("Nothing moved", file=sys.stderr)
            return False
        print_items(app)
        return True

    if args.command == "copy":
        if store.get(args.item_id) is None:
            print(f"Unknown id {args.item_id}", file=sys.stderr)
            return False
        if not store.copy(args.item_id):
            print("Clipboard is not available", file=sys.stderr)
            return False
        print("Copied")
        return True

    raise ValueError(f"Unknown command {args.command!r}")


def main(argv: Optional[List[str]] = None, app: Optional[ClipboardApp] = None) -> int:
    args = parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        app = app or ClipboardApp(build_config(args))
    except (StorageError, ValueError, NotImplementedError) as e:
        logger.error(f"Could not start: {e}")
        return 1

    if args.command == "serve":
        from api.main import serve
        serve(app, host=args.host, port=args.port)
        return 0

    try:
        with app:
            return 0 if run_command(app, args) else 1
    except StorageError as e:
        logger.error(f"Change kept in memory but not saved: {e}")
        return 1


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
