"""A small statistics panel with a reset button."""

from __future__ import annotations

from collections.abc import Callable

PERCENTAGE_CAPTION = "Completed tasks percentage:"
COMPLETED_CAPTION = "Completed tasks:"
REMAINING_CAPTION = "Remaining tasks:"
RESET_CAPTION = "Reset"


class StatsView:
    """Three labels of task statistics and a reset button, rendered as text."""

    def __init__(self, title: str = "") -> None:
        self.title = title
        self.size: tuple[int, int] | None = None
        self.visible = False
        self.percentage_label = PERCENTAGE_CAPTION
        self.completed_label = COMPLETED_CAPTION
        self.remaining_label = REMAINING_CAPTION
        self._reset_callbacks: list[Callable[[], None]] = []

    def on_reset(self, callback: Callable[[], None]) -> None:
        """Call ``callback`` when the reset button is pressed."""
        self._reset_callbacks.append(callback)

    def press_reset(self) -> None:
        for callback in list(self._reset_callbacks):
            callback()

    def show(self) -> None:
        self.visible = True

    def update_statistics(self, percentage: float, completed: int, remaining: int) -> None:
        self.percentage_label = f"Completed tasks percentage: {percentage:.2f}%"
        self.completed_label = f"Completed tasks:: {completed}"
        self.remaining_label = f"Remaining tasks: {remaining}"

    def render(self) -> str:
        """Return the panel as lines of text."""
        lines = [self.title] if self.title else []
        lines += [
            self.percentage_label,
            self.completed_label,
            self.remaining_label,
            f"[{RESET_CAPTION}]",
        ]
        return "\n".join(lines)