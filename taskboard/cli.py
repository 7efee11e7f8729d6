"""Command-line front end for the task list."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .backend import Backend
from .filtering import ACTIVE, ALL, COMPLETED, TaskFilter
from .model import DEFAULT_TASKS_FILE, TasksModel
from .stats import StatsView


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="taskboard", description="Keep a list of tasks.")
    parser.add_argument("--file", default=DEFAULT_TASKS_FILE, help="tasks file")
    parser.add_argument(
        "--filter",
        choices=(ALL, ACTIVE, COMPLETED),
        default=ALL,
        help="which tasks are listed and addressed by index",
    )
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("list", help="list tasks")
    add = sub.add_parser("add", help="add a task")
    add.add_argument("name")
    remove = sub.add_parser("remove", help="remove a task")
    remove.add_argument("index", type=int)
    rename = sub.add_parser("rename", help="rename a task")
    rename.add_argument("index", type=int)
    rename.add_argument("name")
    done = sub.add_parser("done", help="mark a task completed")
    done.add_argument("index", type=int)
    undo = sub.add_parser("undo", help="mark a task not completed")
    undo.add_argument("index", type=int)
    sub.add_parser("stats", help="show statistics")
    sub.add_parser("reset", help="remove every task")
    return parser


def _print_tasks(view: TaskFilter) -> None:
    for position, task in enumerate(view):
        mark = "x" if task.completed else " "
        print(f"{position}: [{mark}] {task.name}")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    model = TasksModel(args.file)
    model.load()
    stats_view = StatsView()
    backend = Backend(model, stats_view)
    view = TaskFilter(model, args.filter)

    command = args.command or "list"
    if command == "add":
        view.add_task(args.name)
    elif command == "remove":
        view.remove_task(args.index)
    elif command == "rename":
        view.edit_task_name(args.name, args.index)
    elif command in ("done", "undo"):
        view.edit_task_completed(args.index, command == "done")
    elif command == "stats":
        backend.show_statistics()
        print(stats_view.render())
        return 0
    elif command == "reset":
        stats_view.press_reset()
        model.save()
        print(stats_view.render())
        return 0
    _print_tasks(view)
    return 0