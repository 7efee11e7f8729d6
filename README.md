# taskboard

A small to-do list you can use from the command line or from Python.
Tasks are kept in a JSON file. You can list every task, only the
active ones or only the completed ones. You can also see how much of
the list is done.

## Installation

```
pip install .
```

## Command line

Installing the package gives you the `taskboard` command:

```
taskboard [--file PATH] [--filter {all,active,completed}] [COMMAND ...]
```

- `--file` is the tasks file. It defaults to `./tasks.json` in the
  current directory. A missing file is treated as an empty list.
- `--filter` chooses which tasks are listed. Indexes given to commands
  count positions in that filtered list. The default is `all`.

Commands:

| Command              | Effect                                   |
|----------------------|------------------------------------------|
| `list` (the default) | list the tasks                           |
| `add NAME`           | add an open task                         |
| `remove INDEX`       | remove a task                            |
| `rename INDEX NAME`  | rename a task                            |
| `done INDEX`         | mark a task completed                    |
| `undo INDEX`         | mark a task not completed                |
| `stats`              | print the statistics panel               |
| `reset`              | remove every task and print the panel    |

`add`, `remove`, `rename`, `done` and `undo` save the file and then
print the list. Each line of the list looks like `0: [x] Task name`.
An index that matches no listed task is ignored without an error.

```
taskboard add "Write report"
taskboard done 0
taskboard --filter active
taskboard stats
taskboard --help
```

## Library use

### The task list

`taskboard.model.TasksModel` holds the tasks (`taskboard.task.Task`
objects with `name` and `completed`). It also knows the file the tasks
are saved to:

```python
from taskboard.model import TasksModel

model = TasksModel("tasks.json")
model.load()                      # returns False if the file is missing

model.add_task("Write report", False)
model.add_task("Send invoices", True)
model.edit_task_name("Write final report", 0)
model.edit_task_completed(0, True)

print(len(model))                 # 2
for task in model:
    print(task.name, task.completed)

print(model.count_completed())       # 2
print(model.count_remaining())       # 0
print(model.completed_percentage())  # 100.0 (0.0 for an empty list)

model.save()
```

`remove_task`, `edit_task_name` and `edit_task_completed` ignore an
index that is out of range and return `False` when that happens.
`clear()` empties the list.

`save()` returns `False` (and logs a warning) when the file cannot be
written. `load()` replaces the list with the file's contents. If the
file is missing, or is not a JSON array, it leaves the list unchanged
and returns `False`. Entries that lack a string `name` or a boolean
`completed` get `""` and `False`.

The file is a JSON array of objects, indented by four spaces, with
their keys sorted:

```json
[
    {
        "completed": true,
        "name": "Write final report"
    },
    {
        "completed": true,
        "name": "Send invoices"
    }
]
```

`data(row, role)` reads a field by `taskboard.model.Role` (`Role.NAME`
or `Role.COMPLETED`). It returns `None` for an unknown row or role.
`role_names()` maps each role to its field name.

`subscribe(listener)` calls `listener` with a `ModelChange` after every
change. The change's `kind` is a `ChangeKind`: `INSERTED`, `REMOVED`,
`DATA_CHANGED` or `RESET`. It also carries the rows affected and, for
edits, the roles changed. `subscribe` returns a function that removes
the listener.

### Filtered views

`taskboard.filtering.TaskFilter` shows part of a model. Its `filter`
attribute is:

- `"active"`: tasks not yet completed
- `"completed"`: completed tasks only
- any other value, such as `"all"` or the default `""`: every task

You can assign to `filter` at any time. Listeners registered with
`on_filter_changed` are called when its value actually changes.

Indexes passed to the filter's methods are positions in the filtered
view. `map_to_source(index)` turns a position into the model's row, or
returns `None`. Each of `add_task`, `remove_task`, `edit_task_name` and
`edit_task_completed` saves the model's file afterwards.

```python
from taskboard.filtering import TaskFilter

active = TaskFilter(model, "active")
active.add_task("Book travel")
for task in active:
    print(task.name)                 # Book travel

active.edit_task_completed(0, True)  # marks "Book travel" done and saves
print(len(active))                   # 0
```

### Statistics

`taskboard.stats.StatsView` is a text panel. It holds a title, three
labels and a reset action. `taskboard.backend.Backend` connects a panel
to a model and gives the panel the title "Statistics".
`show_statistics()` marks the panel visible and fills in the current
figures. `press_reset()` on the panel clears every task and refreshes
the figures.

```python
from taskboard.backend import Backend
from taskboard.stats import StatsView

view = StatsView()
backend = Backend(model, view)
backend.show_statistics()
print(view.render())
```

With the three completed tasks from above this prints:

```
Statistics
Completed tasks percentage: 100.00%
Completed tasks:: 3
Remaining tasks: 0
[Reset]
```

Note that a reset through `Backend` does not save the file by itself.
The `reset` command saves it afterwards.

## What it does not do

There is no graphical interface. The statistics panel exists only as
text from `StatsView.render()`. Its `visible` and `size` attributes are
recorded but never draw a window. All interaction goes through the
`taskboard` command or the Python classes above.

## Running the tests

```
pip install ".[test]"
pytest
```