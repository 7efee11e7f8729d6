"""An ordered list of tasks that persists itself as a JSON file."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum, IntEnum
from pathlib import Path
from typing import Any

from .task import Task

logger = logging.getLogger(__name__)

DEFAULT_TASKS_FILE = "./tasks.json"

_USER_ROLE = 0x0100


class Role(IntEnum):
    """Data roles a view can ask the model for."""

    NAME = _USER_ROLE + 1
    COMPLETED = _USER_ROLE + 2


class ChangeKind(Enum):
    """Kinds of change a model reports to its listeners."""

    INSERTED = "inserted"
    REMOVED = "removed"
    DATA_CHANGED = "data_changed"
    RESET = "reset"


@dataclass(frozen=True)
class ModelChange:
    """A change to the model: the rows touched and, for edits, the roles."""

    kind: ChangeKind
    first: int = -1
    last: int = -1
    roles: tuple[Role, ...] = ()


Listener = Callable[[ModelChange], None]


def _to_json(payload: list[dict[str, Any]]) -> str:
    if not payload:
        return "[\n]\n"
    return json.dumps(payload, indent=4, sort_keys=True, ensure_ascii=False) + "\n"


class TasksModel:
    """Tasks in order, with change notifications and JSON persistence."""

    def __init__(self, path: str | Path = DEFAULT_TASKS_FILE) -> None:
        self.path = Path(path)
        self._tasks: list[Task] = []
        self._listeners: list[Listener] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[index]

    def _valid(self, index: int) -> bool:
        return 0 <= index < len(self._tasks)

    def _notify(self, change: ModelChange) -> None:
        for listener in list(self._listeners):
            listener(change)

    def data(self, row: int, role: Role) -> Any:
        """Return the value of ``role`` for ``row``, or None if either is unknown."""
        if not self._valid(row):
            return None
        task = self._tasks[row]
        if role == Role.NAME:
            return task.name
        if role == Role.COMPLETED:
            return task.completed
        return None

    def role_names(self) -> dict[Role, str]:
        """Return the name each role is known by."""
        return {Role.NAME: "name", Role.COMPLETED: "completed"}

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for changes; return a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def add_task(self, name: str, completed: bool = False) -> None:
        """Append a new task."""
        row = len(self._tasks)
        self._tasks.append(Task(name, completed))
        self._notify(ModelChange(ChangeKind.INSERTED, row, row))

    def remove_task(self, index: int) -> bool:
        """Remove the task at ``index``; out-of-range indices are ignored."""
        if not self._valid(index):
            return False
        del self._tasks[index]
        self._notify(ModelChange(ChangeKind.REMOVED, index, index))
        return True

    def edit_task_name(self, name: str, index: int) -> bool:
        """Rename the task at ``index``; out-of-range indices are ignored."""
        if not self._valid(index):
            return False
        self._tasks[index].name = name
        self._notify(ModelChange(ChangeKind.DATA_CHANGED, index, index, (Role.NAME,)))
        return True

    def edit_task_completed(self, index: int, completed: bool) -> bool:
        """Set the completion of the task at ``index``; out-of-range indices are ignored."""
        if not self._valid(index):
            return False
        self._tasks[index].completed = completed
        self._notify(ModelChange(ChangeKind.DATA_CHANGED, index, index, (Role.COMPLETED,)))
        return True

    def count_completed(self) -> int:
        return sum(1 for task in self._tasks if task.completed)

    def count_remaining(self) -> int:
        return len(self._tasks) - self.count_completed()

    def completed_percentage(self) -> float:
        """Percentage of completed tasks, 0 for an empty list."""
        total = len(self._tasks)
        if total == 0:
            return 0.0
        return self.count_completed() * 100 / total

    def save(self) -> bool:
        """Write all tasks to the file; return False if it cannot be written."""
        text = _to_json([task.to_dict() for task in self._tasks])
        try:
            with open(self.path, "w", encoding="utf-8") as handle:
                handle.write(text)
        except OSError:
            logger.warning("Could not save tasks")
            return False
        return True

    def load(self) -> bool:
        """Replace the tasks with those in the file.

        A missing file or a document that is not a JSON array leaves the model
        untouched and returns False.
        """
        try:
            raw = self.path.read_bytes()
        except OSError:
            return False
        try:
            document = json.loads(raw)
        except ValueError:
            document = None
        if not isinstance(document, list):
            logger.warning("Error loading tasks - Invalid JSON")
            return False
        self._tasks = [Task.from_dict(value) for value in document]
        self._notify(ModelChange(ChangeKind.RESET))
        return True

    def clear(self) -> None:
        """Remove every task."""
        self._tasks = []
        self._notify(ModelChange(ChangeKind.RESET))