# taskboard

A small task list kept in an SQLite database. Every task has:

- a priority from 1 to 5,
- a name, which is the key, so each name can be stored only once,
- a description,
- a start date and an end date (the end defaults to seven days after the start),
- a reminder method (the only method is `闹钟提醒`),
- a free-form review note.

By default the database is a file called `task.db` in the per-user data
directory for `taskboard`, as chosen by `platformdirs`. The directory is
created if it does not exist.

## Installation

```
pip install .
```

## Command line

The package installs a `taskboard` command. With no arguments, or with
`list`, it prints every task as a table, highest priority first. Messages are
in Chinese, as are the column headers.

```
taskboard
taskboard list
```

Add a task. Dates are given as `yyyy-MM-dd`; `--start` defaults to today and
`--end` to seven days after the start. The priority must be between 1 and 5
and defaults to 1.

```
taskboard add "write report" -p 3 -d quarterly --start 2025-03-07 --end 2025-03-14 --review "again?"
```

Delete a task by name. The command exits with status 1 if no task of that name
exists.

```
taskboard delete "write report"
```

Use another database file with `--db`, given before the subcommand:

```
taskboard --db ./tasks.db list
```

`taskboard --help` and `taskboard add --help` list every option.

The command exits with status 1 when the database cannot be opened or a change
fails, for example when a task with the same name is already stored.

## Library use

```python
from taskboard.models import Task
from taskboard.store import TaskStore, default_database_path

with TaskStore(default_database_path()) as store:
    store.add(Task(name="write report", priority=3, description="quarterly"))
    for task in store.tasks():
        print(task.as_row())
    store.delete("write report")
```

`taskboard.models`:

- `Task` is a dataclass. It raises `TypeError` if the priority is not an
  integer and `ValueError` if it is outside 1 to 5 or if the reminder method is
  unknown.
- `Task.time_range()` returns the start and end dates as one string, such as
  `3/7/25 - 3/14/25`.
- `Task.as_row()` returns the six table cells: priority, name, description,
  time range, reminder and review. `HEADERS` holds the matching column titles.
- `format_date()` writes a date as `M/d/yy`, the form in which dates are
  stored, for example `3/7/25`; `parse_date()` reads that form back.

`taskboard.store`:

- `TaskStore(path=None)` opens or creates the database at `path`, or at
  `default_database_path()` when none is given. `":memory:"` gives an
  in-memory database. It can be used as a context manager, which closes it.
- `add(task)` inserts a task; `tasks()` returns all tasks, highest priority
  first; `delete(name)` returns whether a task was removed.
- `TaskStoreError` is raised when the database cannot be opened or read, or
  when an insert or delete fails, such as adding a name that is already stored.

`taskboard.cli.render_table(tasks)` returns the text table that the command
prints, with columns aligned for wide (CJK) characters.

## What it does not do

There is no graphical window and no tray icon; the task list is used through
the command line or the library. The reminder method is only stored as text:
no alarm or notification is ever raised. Tasks cannot be edited in place;
delete and add them again.

## Running the tests

```
pip install .[test]
pytest
```