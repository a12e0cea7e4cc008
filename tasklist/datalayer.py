"""Task records, the in-memory task vault and the operations on it."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field, replace
from datetime import datetime
from operator import attrgetter


class VaultError(Exception):
    """Base class for errors raised by task operations."""

    message = "Task vault error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class NotFoundError(VaultError):
    message = "Could not find task"


class TaskDoesNotExistError(VaultError):
    message = "Cannot perform operation on task because it does not exist"


class TaskDescriptionEmptyError(VaultError):
    message = "Task description cannot be empty"


class TaskAlreadyCompleteError(VaultError):
    message = "Cannot complete task. Already complete."


@dataclass(frozen=True)
class Task:
    """A single entry of the to-do list."""

    id: int
    description: str
    created_at: datetime
    is_complete: bool = False


class TimeProvider(abc.ABC):
    """Source of creation timestamps for new tasks."""

    @abc.abstractmethod
    def timestamp(self) -> datetime:
        """Return the current moment."""


class DefaultTimeProvider(TimeProvider):
    """Time provider backed by the system clock, in local time."""

    def timestamp(self) -> datetime:
        return datetime.now().astimezone()


@dataclass
class MapTaskVault:
    """Tasks stored in a dictionary keyed by task id."""

    db: dict[int, Task] = field(default_factory=dict)
    last_id: int = 0

    def add_or_update(self, task: Task) -> None:
        self.db[task.id] = task

    def get(self, task_id: int) -> Task | None:
        return self.db.get(task_id)

    def next_id(self) -> int:
        self.last_id += 1
        return self.last_id

    def list(self) -> list[Task]:
        """All tasks, ordered by id."""
        return sorted(self.db.values(), key=attrgetter("id"))

    def list_unfinished(self) -> list[Task]:
        """Tasks not yet complete, ordered by id."""
        return [task for task in self.list() if not task.is_complete]

    def delete(self, task_id: int) -> None:
        self.db.pop(task_id, None)

    def exists(self, task_id: int) -> bool:
        return task_id in self.db


def add_task(description: str, vault: MapTaskVault, time_provider: TimeProvider) -> int:
    """Store a new incomplete task and return its id."""
    if description == "":
        raise TaskDescriptionEmptyError()
    task_id = vault.next_id()
    vault.add_or_update(
        Task(
            id=task_id,
            description=description,
            created_at=time_provider.timestamp(),
            is_complete=False,
        )
    )
    return task_id


def get_task(task_id: int, vault: MapTaskVault) -> Task:
    task = vault.get(task_id)
    if task is None:
        raise NotFoundError()
    return task


def list_all_tasks(vault: MapTaskVault) -> list[Task]:
    return vault.list()


def list_unfinished_tasks(vault: MapTaskVault) -> list[Task]:
    return vault.list_unfinished()


def delete_task(task_id: int, vault: MapTaskVault) -> None:
    if not vault.exists(task_id):
        raise TaskDoesNotExistError()
    vault.delete(task_id)


def complete_task(task_id: int, vault: MapTaskVault) -> None:
    task = vault.get(task_id)
    if task is None:
        raise TaskDoesNotExistError()
    if task.is_complete:
        raise TaskAlreadyCompleteError()
    vault.add_or_update(replace(task, is_complete=True))