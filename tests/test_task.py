import pytest

from taskboard.task import Task


def test_to_dict_holds_both_fields():
    assert Task("Write report", True).to_dict() == {"name": "Write report", "completed": True}


def test_round_trip():
    task = Task("Call plumber", False)
    assert Task.from_dict(task.to_dict()) == task


def test_default_is_not_completed():
    assert Task("x").completed is False


@pytest.mark.parametrize(
    "data, expected",
    [
        ({}, Task("", False)),
        ({"name": 5, "completed": "yes"}, Task("", False)),
        ({"name": "a", "completed": 1}, Task("a", False)),
        ([1, 2], Task("", False)),
        ("text", Task("", False)),
        (None, Task("", False)),
    ],
)
def test_from_dict_falls_back_to_defaults(data, expected):
    assert Task.from_dict(data) == expected


def test_fields_are_mutable():
    task = Task("a")
    task.name = "b"
    task.completed = True
    assert task.to_dict() == {"name": "b", "completed": True}