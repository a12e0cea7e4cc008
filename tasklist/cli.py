"""Command line entry point of the to-do list."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from tasklist.service import ToDoList

_DEFAULT_DESCRIPTION = "New Task"


class _UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)


def _build_parser() -> _Parser:
    parser = _Parser(
        prog="tasks",
        description="ToDo list that allows managing tasks",
    )
    parser.add_argument("-t", "--toggle", action="store_true", help="Help message for toggle")
    commands = parser.add_subparsers(dest="command", metavar="command")

    add = commands.add_parser("add", help="Add new task", description="Add new task to the ToDo list")
    add.add_argument("words", nargs="*", help=argparse.SUPPRESS)
    for name in ("complete", "delete", "list"):
        sub = commands.add_parser(name, help=f"{name.capitalize()} tasks")
        sub.add_argument("words", nargs="*", help=argparse.SUPPRESS)
    return parser


def _run_add(_args: argparse.Namespace) -> None:
    with ToDoList() as todo:
        todo.add(_DEFAULT_DESCRIPTION)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except _UsageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(parser.format_usage(), end="", file=sys.stderr)
        return 1

    if args.command is None:
        parser.print_help()
    elif args.command == "add":
        _run_add(args)
    else:
        print(f"{args.command} called")
    return 0


if __name__ == "__main__":
    sys.exit(main())