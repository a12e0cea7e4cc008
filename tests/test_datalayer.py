from datetime import datetime, timezone

import pytest

from tasklist.datalayer import (
    DefaultTimeProvider,
    MapTaskVault,
    NotFoundError,
    Task,
    TaskAlreadyCompleteError,
    TaskDescriptionEmptyError,
    TaskDoesNotExistError,
    TimeProvider,
    VaultError,
    add_task,
    complete_task,
    delete_task,
    get_task,
    list_all_tasks,
    list_unfinished_tasks,
)

STAMP = datetime(2024, 7, 27, 16, 45, 19, tzinfo=timezone.utc)


class DummyTimeProvider(TimeProvider):
    def __init__(self, stamp):
        self.stamp = stamp

    def timestamp(self):
        return self.stamp


@pytest.fixture
def provider():
    return DummyTimeProvider(STAMP)


def test_add_task_with_description(provider):
    vault = MapTaskVault()
    task_id = add_task("test", vault, provider)
    got = get_task(task_id, vault)
    assert got == Task(id=1, description="test", created_at=STAMP, is_complete=False)


def test_add_task_without_description(provider):
    vault = MapTaskVault()
    with pytest.raises(TaskDescriptionEmptyError):
        add_task("", vault, provider)
    assert vault.db == {}


def test_add_tasks_get_increasing_ids(provider):
    vault = MapTaskVault()
    ids = [add_task(name, vault, provider) for name in ("a", "b", "c")]
    assert ids == [1, 2, 3]
    assert vault.last_id == 3


def test_add_continues_after_last_id(provider):
    vault = MapTaskVault(db={}, last_id=41)
    assert add_task("next", vault, provider) == 42


def test_get_existing_task():
    want = Task(id=999, description="test", created_at=STAMP, is_complete=False)
    vault = MapTaskVault(db={999: want}, last_id=999)
    assert get_task(999, vault) == want


def test_get_missing_task():
    with pytest.raises(NotFoundError):
        get_task(999, MapTaskVault())


def _incomplete_and_complete():
    incomplete = Task(id=998, description="test", created_at=STAMP, is_complete=False)
    complete = Task(id=999, description="test complete", created_at=STAMP, is_complete=True)
    vault = MapTaskVault(db={complete.id: complete, incomplete.id: incomplete}, last_id=999)
    return incomplete, complete, vault


def test_list_all_tasks_full_vault():
    incomplete, complete, vault = _incomplete_and_complete()
    assert list_all_tasks(vault) == [incomplete, complete]


def test_list_all_tasks_empty_vault():
    assert list_all_tasks(MapTaskVault()) == []


def test_list_unfinished_tasks_full_vault():
    incomplete, _, vault = _incomplete_and_complete()
    assert list_unfinished_tasks(vault) == [incomplete]


def test_list_unfinished_tasks_empty_vault():
    assert list_unfinished_tasks(MapTaskVault()) == []


def test_list_is_sorted_by_id():
    tasks = {i: Task(id=i, description=str(i), created_at=STAMP) for i in (5, 2, 9, 1)}
    vault = MapTaskVault(db=tasks, last_id=9)
    assert [t.id for t in vault.list()] == [1, 2, 5, 9]


def test_delete_existing_task():
    task = Task(id=999, description="test", created_at=STAMP)
    vault = MapTaskVault(db={999: task}, last_id=999)
    delete_task(999, vault)
    with pytest.raises(NotFoundError):
        get_task(999, vault)


def test_delete_missing_task():
    with pytest.raises(TaskDoesNotExistError):
        delete_task(999, MapTaskVault())


def test_complete_incomplete_task():
    original = Task(id=999, description="test", created_at=STAMP, is_complete=False)
    vault = MapTaskVault(db={999: original}, last_id=999)
    complete_task(999, vault)
    assert get_task(999, vault) == Task(
        id=999, description="test", created_at=STAMP, is_complete=True
    )


def test_complete_already_complete_task():
    original = Task(id=999, description="test", created_at=STAMP, is_complete=True)
    vault = MapTaskVault(db={999: original}, last_id=999)
    with pytest.raises(TaskAlreadyCompleteError):
        complete_task(999, vault)


def test_complete_missing_task():
    with pytest.raises(TaskDoesNotExistError):
        complete_task(999, MapTaskVault())


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (NotFoundError, "Could not find task"),
        (TaskDoesNotExistError, "Cannot perform operation on task because it does not exist"),
        (TaskDescriptionEmptyError, "Task description cannot be empty"),
        (TaskAlreadyCompleteError, "Cannot complete task. Already complete."),
    ],
)
def test_error_messages(error, message):
    instance = error()
    assert str(instance) == message
    assert isinstance(instance, VaultError)


def test_vault_next_id_increments():
    vault = MapTaskVault()
    assert [vault.next_id(), vault.next_id()] == [1, 2]


def test_vault_exists_and_delete():
    task = Task(id=3, description="x", created_at=STAMP)
    vault = MapTaskVault()
    vault.add_or_update(task)
    assert vault.exists(3)
    assert vault.get(3) == task
    vault.delete(3)
    assert not vault.exists(3)
    assert vault.get(3) is None


def test_default_time_provider_is_current_and_aware():
    before = datetime.now(timezone.utc)
    stamp = DefaultTimeProvider().timestamp()
    after = datetime.now(timezone.utc)
    assert stamp.tzinfo is not None
    assert before <= stamp <= after