"""A filtered view over a task model that forwards edits and persists them."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from .model import Role, TasksModel
from .task import Task

ALL = "all"
ACTIVE = "active"
COMPLETED = "completed"


class TaskFilter:
    """Shows the tasks of a model that match a filter.

    The filter is ``"active"``, ``"completed"`` or anything else, which shows
    every task. Indices given to the editing methods are positions in the
    filtered view.
    """

    def __init__(self, model: TasksModel, filter: str = "") -> None:
        self.model = model
        self._filter = filter
        self._filter_listeners: list[Callable[[], None]] = []

    @property
    def filter(self) -> str:
        return self._filter

    @filter.setter
    def filter(self, value: str) -> None:
        if value == self._filter:
            return
        self._filter = value
        for listener in list(self._filter_listeners):
            listener()

    def on_filter_changed(self, listener: Callable[[], None]) -> None:
        """Call ``listener`` whenever the filter changes value."""
        self._filter_listeners.append(listener)

    def accepts(self, row: int) -> bool:
        """Whether the source row ``row`` is shown under the current filter."""
        completed = bool(self.model.data(row, Role.COMPLETED))
        if self._filter == ACTIVE:
            return not completed
        if self._filter == COMPLETED:
            return completed
        return True

    def rows(self) -> list[int]:
        """Source rows shown, in order."""
        return [row for row, _ in enumerate(self.model) if self.accepts(row)]

    def __len__(self) -> int:
        return len(self.rows())

    def __iter__(self) -> Iterator[Task]:
        return (self.model[row] for row in self.rows())

    def map_to_source(self, index: int) -> int | None:
        """Source row for view position ``index``, or None if there is none."""
        rows = self.rows()
        if 0 <= index < len(rows):
            return rows[index]
        return None

    def add_task(self, name: str) -> None:
        self.model.add_task(name, False)
        self.persist()

    def remove_task(self, index: int) -> None:
        source_row = self.map_to_source(index)
        if source_row is not None:
            self.model.remove_task(source_row)
        self.persist()

    def edit_task_name(self, name: str, index: int) -> None:
        source_row = self.map_to_source(index)
        if source_row is not None:
            self.model.edit_task_name(name, source_row)
        self.persist()

    def edit_task_completed(self, index: int, completed: bool) -> None:
        source_row = self.map_to_source(index)
        if source_row is not None:
            self.model.edit_task_completed(source_row, completed)
        self.persist()

    def persist(self) -> bool:
        """Save the underlying model."""
        return self.model.save()