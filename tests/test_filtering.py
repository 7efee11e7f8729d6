import json

import pytest

from taskboard.filtering import TaskFilter
from taskboard.model import TasksModel
from taskboard.task import Task


@pytest.fixture
def model(tmp_path):
    model = TasksModel(tmp_path / "tasks.json")
    model.add_task("a", False)
    model.add_task("b", True)
    model.add_task("c", False)
    model.add_task("d", True)
    return model


def saved(model):
    return [Task.from_dict(v) for v in json.loads(model.path.read_text(encoding="utf-8"))]


@pytest.mark.parametrize(
    "mode, names",
    [
        ("", ["a", "b", "c", "d"]),
        ("all", ["a", "b", "c", "d"]),
        ("other", ["a", "b", "c", "d"]),
        ("active", ["a", "c"]),
        ("completed", ["b", "d"]),
    ],
)
def test_filter_modes(model, mode, names):
    view = TaskFilter(model, mode)
    assert [t.name for t in view] == names
    assert len(view) == len(names)


def test_rows_and_mapping(model):
    view = TaskFilter(model, "completed")
    assert view.rows() == [1, 3]
    assert view.map_to_source(1) == 3
    assert view.map_to_source(2) is None
    assert view.map_to_source(-1) is None


def test_accepts(model):
    view = TaskFilter(model, "active")
    assert view.accepts(0) is True
    assert view.accepts(1) is False


def test_filter_change_notifies_only_on_change(model):
    view = TaskFilter(model)
    calls = []
    view.on_filter_changed(lambda: calls.append(view.filter))
    view.filter = "active"
    view.filter = "active"
    view.filter = "completed"
    assert calls == ["active", "completed"]


def test_view_follows_model_changes(model):
    view = TaskFilter(model, "active")
    model.edit_task_completed(0, True)
    assert [t.name for t in view] == ["c"]


def test_add_task_persists(model):
    view = TaskFilter(model, "completed")
    view.add_task("e")
    assert model[len(model) - 1] == Task("e", False)
    assert saved(model) == list(model)


def test_remove_through_filter(model):
    view = TaskFilter(model, "completed")
    view.remove_task(0)
    assert [t.name for t in model] == ["a", "c", "d"]
    assert saved(model) == list(model)


def test_edit_name_through_filter(model):
    view = TaskFilter(model, "active")
    view.edit_task_name("z", 1)
    assert model[2].name == "z"
    assert saved(model) == list(model)


def test_edit_completed_through_filter(model):
    view = TaskFilter(model, "active")
    view.edit_task_completed(0, True)
    assert model[0].completed is True
    assert [t.name for t in view] == ["c"]


def test_out_of_range_edit_still_persists(model):
    view = TaskFilter(model, "active")
    before = list(model)
    view.remove_task(7)
    view.edit_task_name("x", -1)
    assert list(model) == before
    assert saved(model) == before


def test_persist_returns_save_result(model):
    assert TaskFilter(model).persist() is True