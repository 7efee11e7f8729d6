import pytest

from taskboard.backend import Backend
from taskboard.model import TasksModel
from taskboard.stats import StatsView


@pytest.fixture
def setup(tmp_path):
    model = TasksModel(tmp_path / "tasks.json")
    model.add_task("a", True)
    model.add_task("b", False)
    view = StatsView()
    return model, view, Backend(model, view)


def test_configures_view(setup):
    _, view, _ = setup
    assert view.title == "Statistics"
    assert view.size == (300, 100)


def test_show_statistics(setup):
    _, view, backend = setup
    backend.show_statistics()
    assert view.visible is True
    assert view.percentage_label == "Completed tasks percentage: 50.00%"
    assert view.completed_label == "Completed tasks:: 1"
    assert view.remaining_label == "Remaining tasks: 1"


def test_reset_requested_clears_model(setup):
    model, view, backend = setup
    backend.reset_requested()
    assert len(model) == 0
    assert view.percentage_label == "Completed tasks percentage: 0.00%"
    assert view.remaining_label == "Remaining tasks: 0"


def test_reset_button_triggers_reset(setup):
    model, view, _ = setup
    view.press_reset()
    assert len(model) == 0
    assert view.completed_label == "Completed tasks:: 0"