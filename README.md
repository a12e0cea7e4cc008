# tasklist

A small ToDo list for the command line and as a library. Tasks are kept in
a CSV file at `~/.todo/data.csv`. The file is locked exclusively while the
program works with it.

## Installing

```
pip install .
```

## Using the command

The package installs a command named `tasks`:

```
tasks --help
tasks add
tasks list
tasks complete
tasks delete
```

- `tasks add` loads the data file, adds a task with the description
  `New Task`, writes the file back and prints a timestamped line such as
  `Task added (ID =1, Description = "New Task")`.
- `tasks list`, `tasks complete` and `tasks delete` only print
  `list called`, `complete called` or `delete called`.
- `tasks` with no command prints the help text.
- `-t` / `--toggle` is accepted but has no effect.

If the data file cannot be opened or read, an `ERROR:` line is printed and
the command exits with status 1.

## What the command does not do

- `tasks add` does not take a description; every task it adds is named
  `New Task`, and any words after `add` are ignored.
- The command cannot list, complete or delete tasks. These operations exist
  in the library (see below) but are not reachable from `tasks`.

## Using it as a library

```python
import io
from tasklist.datalayer import MapTaskVault, DefaultTimeProvider, add_task, list_all_tasks, complete_task
from tasklist.csvstore import csv_read, csv_write

vault = MapTaskVault()
task_id = add_task("Buy milk", vault, DefaultTimeProvider())
complete_task(task_id, vault)
print(list_all_tasks(vault))

buffer = io.StringIO()
csv_write(vault, buffer)
buffer.seek(0)
restored = csv_read(buffer)
```

### `tasklist.datalayer`

- `Task` — a frozen dataclass with `id`, `description`, `created_at` and
  `is_complete`.
- `MapTaskVault` — tasks in a dictionary keyed by id, with `add_or_update`,
  `get`, `next_id`, `list` (ordered by id), `list_unfinished`, `delete` and
  `exists`.
- `TimeProvider` / `DefaultTimeProvider` — the source of creation
  timestamps; the default uses the local system clock.
- `add_task`, `get_task`, `list_all_tasks`, `list_unfinished_tasks`,
  `delete_task`, `complete_task` — the task operations.

Failed operations raise subclasses of `VaultError`: `NotFoundError`
(from `get_task`), `TaskDoesNotExistError` (from `delete_task` and
`complete_task`), `TaskDescriptionEmptyError` (from `add_task` with an empty
description) and `TaskAlreadyCompleteError`.

### `tasklist.csvstore`

`csv_read(stream)` builds a `MapTaskVault` from CSV text, skipping the
header record and setting the last id to the largest id read. Malformed
records raise `ValueError`. `csv_write(vault, stream)` writes the header
`ID,Description,CreatedAt,IsComplete` and one record per task, ordered by
id, with timestamps in RFC 3339 form and completion as `true` or `false`.

### `tasklist.service`

`ToDoList(path=None, time_provider=None)` opens and locks the data file
(`~/.todo/data.csv` unless `path` is given) and loads its tasks into
`vault`. Use it as a context manager, or call `finalize()`, to write the
tasks back and release the file. Its `add`, `complete` and `delete` methods
log failures instead of raising; `add` returns the new id or `None`.
`list_all` and `list_unfinished` return lists of tasks.

### Other modules

- `tasklist.filemanagement` — `get_csv_path`, `load_file` and `close_file`
  locate, open with an exclusive lock, and close the data file.
- `tasklist.log` — `log_error`, `log_fatal` (which exits with status 1) and
  `log_info` print timestamped lines to standard output.

## Running the tests

```
pip install .[test]
pytest
```