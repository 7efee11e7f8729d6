"""Ties the task model to the statistics panel."""

from __future__ import annotations

from .model import TasksModel
from .stats import StatsView

STATS_TITLE = "Statistics"
STATS_SIZE = (300, 100)


class Backend:
    """Shows statistics for a model and clears it when the panel asks to reset."""

    def __init__(self, model: TasksModel, view: StatsView) -> None:
        self.model = model
        self.view = view
        view.title = STATS_TITLE
        view.size = STATS_SIZE
        view.on_reset(self.reset_requested)

    def _update_stats(self) -> None:
        self.view.update_statistics(
            self.model.completed_percentage(),
            self.model.count_completed(),
            self.model.count_remaining(),
        )

    def show_statistics(self) -> None:
        self.view.show()
        self._update_stats()

    def reset_requested(self) -> None:
        self.model.clear()
        self._update_stats()