"""The to-do list backed by a locked CSV file."""

from __future__ import annotations

import csv
import json
import os

from tasklist.csvstore import csv_read, csv_write
from tasklist.datalayer import (
    DefaultTimeProvider,
    MapTaskVault,
    Task,
    TimeProvider,
    VaultError,
    add_task,
    complete_task,
    delete_task,
    list_all_tasks,
    list_unfinished_tasks,
)
from tasklist.filemanagement import close_file, get_csv_path, load_file
from tasklist.log import log_error, log_fatal, log_info


class ToDoList:
    """Tasks loaded from the data file and saved back by ``finalize``.

    Failing to open, read or write the file ends the program with status 1;
    failed task operations are logged.
    """

    def __init__(
        self,
        path: str | os.PathLike[str] | None = None,
        time_provider: TimeProvider | None = None,
    ) -> None:
        self._time_provider = time_provider or DefaultTimeProvider()
        self._file = None
        try:
            csv_path = get_csv_path() if path is None else path
            self._file = load_file(csv_path)
            self.vault: MapTaskVault = csv_read(self._file)
        except (OSError, ValueError, csv.Error) as exc:
            if self._file is not None:
                close_file(self._file)
                self._file = None
            log_fatal(exc)

    def __enter__(self) -> ToDoList:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finalize()

    def finalize(self) -> None:
        """Write the tasks back to the file and release it."""
        if self._file is None:
            return
        handle, self._file = self._file, None
        try:
            handle.seek(0)
            handle.truncate()
            csv_write(self.vault, handle)
            handle.flush()
        except (OSError, ValueError) as exc:
            close_file(handle)
            log_fatal(exc)
        try:
            close_file(handle)
        except OSError as exc:
            log_fatal(exc)

    def add(self, description: str) -> int | None:
        """Add a task and return its id, or None if it was rejected."""
        try:
            task_id = add_task(description, self.vault, self._time_provider)
        except VaultError as exc:
            log_error(exc)
            return None
        quoted = json.dumps(description, ensure_ascii=False)
        log_info(f"Task added (ID ={task_id}, Description = {quoted})")
        return task_id

    def list_all(self) -> list[Task]:
        return list_all_tasks(self.vault)

    def list_unfinished(self) -> list[Task]:
        return list_unfinished_tasks(self.vault)

    def complete(self, task_id: int) -> None:
        try:
            complete_task(task_id, self.vault)
        except VaultError as exc:
            log_error(exc)

    def delete(self, task_id: int) -> None:
        try:
            delete_task(task_id, self.vault)
        except VaultError as exc:
            log_error(exc)