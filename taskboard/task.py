"""A single to-do item."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass
class Task:
    """A named task that is either completed or still open."""

    name: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form of this task."""
        return {"name": self.name, "completed": self.completed}

    @classmethod
    def from_dict(cls, data: Any) -> Task:
        """Build a task from a JSON value, using defaults for missing or mistyped fields."""
        if not isinstance(data, Mapping):
            data = {}
        name = data.get("name")
        completed = data.get("completed")
        return cls(
            name=name if isinstance(name, str) else "",
            completed=completed if isinstance(completed, bool) else False,
        )