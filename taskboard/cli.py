"""Command line front end for the task board."""

from __future__ import annotations

import argparse
import sys
import unicodedata
from datetime import date
from typing import Iterable, Optional, Sequence

from taskboard.models import (
    HEADERS,
    MAX_PRIORITY,
    MIN_PRIORITY,
    REMINDERS,
    Task,
)
from taskboard.store import TaskStore, TaskStoreError


def _display_width(text: str) -> int:
    width = 0
    for char in text:
        if unicodedata.combining(char):
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return width


def _pad(text: str, width: int) -> str:
    return text + " " * (width - _display_width(text))


def render_table(tasks: Iterable[Task]) -> str:
    """Lay tasks out as an aligned text table under the column headers."""
    body = [task.as_row() for task in tasks]
    rows = [HEADERS, *body]
    widths = [max(map(_display_width, column)) for column in zip(*rows)]

    def line(row: Sequence[str]) -> str:
        return "  ".join(_pad(cell, width) for cell, width in zip(row, widths)).rstrip()

    rule = "  ".join("-" * width for width in widths)
    return "\n".join([line(HEADERS), rule, *(line(row) for row in body)])


def _priority(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from exc
    if not MIN_PRIORITY <= value <= MAX_PRIORITY:
        raise argparse.ArgumentTypeError(
            f"priority must be between {MIN_PRIORITY} and {MAX_PRIORITY}"
        )
    return value


def _iso_date(text: str) -> date:
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected yyyy-MM-dd, got {text!r}") from exc


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="taskboard", description="Keep a list of tasks.")
    parser.add_argument("--db", help="database file (default: per-user data directory)")
    commands = parser.add_subparsers(dest="command")

    commands.add_parser("list", help="show all tasks, highest priority first")

    add = commands.add_parser("add", help="add a task")
    add.add_argument("name", help="task name (unique)")
    add.add_argument("-p", "--priority", type=_priority, default=MIN_PRIORITY)
    add.add_argument("-d", "--description", default="")
    add.add_argument("--start", type=_iso_date, default=None, help="yyyy-MM-dd, default today")
    add.add_argument("--end", type=_iso_date, default=None, help="yyyy-MM-dd, default start + 7 days")
    add.add_argument("--reminder", choices=REMINDERS, default=REMINDERS[0])
    add.add_argument("--review", default="")

    delete = commands.add_parser("delete", help="delete a task by name")
    delete.add_argument("name")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; return the exit status."""
    args = _parser().parse_args(argv)
    command = args.command or "list"

    try:
        store = TaskStore(args.db)
    except TaskStoreError as exc:
        print(exc, file=sys.stderr)
        return 1

    with store:
        try:
            if command == "add":
                task = Task(
                    name=args.name,
                    priority=args.priority,
                    description=args.description,
                    start=args.start or date.today(),
                    end=args.end,
                    reminder=args.reminder,
                    review=args.review,
                )
                store.add(task)
                print("插入信息成功！")
            elif command == "delete":
                if not store.delete(args.name):
                    print(f"删除失败: 没有名为 {args.name} 的任务", file=sys.stderr)
                    return 1
                print("删除成功！")
            else:
                print(render_table(store.tasks()))
        except TaskStoreError as exc:
            print(exc, file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())