# tests/test_view_model.py

from __future__ import annotations

import pytest

from taskpad.core.view_model import TaskViewModel
from taskpad.tasks.task_models import Task, TaskFilter
from taskpad.tasks.task_store import TaskStore

from .fakes import InMemoryTaskRepo


def test_add_task_appends_exactly_one_pending_record(task_store: TaskStore) -> None:
    vm = TaskViewModel(task_store)
    vm.add_task("first")
    before = vm.tasks

    task = vm.add_task("Write report")

    assert task is not None
    after = vm.tasks
    assert len(after) == len(before) + 1
    assert task in after
    assert task.completed is False


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_empty_description_performs_no_mutation(text: str) -> None:
    repo = InMemoryTaskRepo()
    vm = TaskViewModel(repo)

    assert vm.add_task(text) is None
    assert repo.calls == []
    assert vm.tasks == []


def test_toggle_flips_only_that_task(task_store: TaskStore) -> None:
    vm = TaskViewModel(task_store)
    tasks = [vm.add_task(f"task {i}") for i in range(4)]
    vm.toggle_task(tasks[2])
    before = {t.id: t for t in vm.tasks}

    target = tasks[1]
    vm.toggle_task(target)

    after = {t.id: t for t in vm.tasks}
    assert after[target.id].completed is not before[target.id].completed
    for task_id, task in before.items():
        if task_id != target.id:
            assert after[task_id] == task


def test_delete_removes_exactly_that_record(task_store: TaskStore) -> None:
    vm = TaskViewModel(task_store)
    keep = vm.add_task("keep")
    drop = vm.add_task("drop")

    assert vm.delete_task(drop) is True
    assert vm.tasks == [keep]


def test_delete_all_tasks_clears_everything(task_store: TaskStore) -> None:
    vm = TaskViewModel(task_store)
    for i in range(3):
        vm.add_task(f"task {i}")
    vm.toggle_task(vm.tasks[0])

    assert vm.delete_all_tasks() == 3
    assert vm.tasks == []
    assert task_store.count_tasks() == 0


def test_view_mirrors_changes_made_through_the_store(task_store: TaskStore) -> None:
    vm = TaskViewModel(task_store)
    seen: list[list[Task]] = []
    vm.subscribe(seen.append)

    task = task_store.add_task("from elsewhere")

    assert vm.tasks == [task]
    assert seen == [[], [task]]


def test_visible_tasks_follow_filter(task_store: TaskStore) -> None:
    vm = TaskViewModel(task_store)
    a = vm.add_task("a")
    b = vm.add_task("b")
    done = vm.toggle_task(b)

    assert vm.visible_tasks(TaskFilter.PENDING) == [a]
    assert vm.visible_tasks(TaskFilter.COMPLETED) == [done]


def test_close_stops_updates(task_store: TaskStore) -> None:
    vm = TaskViewModel(task_store)
    seen: list[list[Task]] = []
    vm.subscribe(seen.append)
    vm.close()

    task_store.add_task("ignored")
    assert vm.tasks == []
    assert len(seen) == 1


def test_listener_failing_on_subscribe_can_still_be_removed(task_store: TaskStore) -> None:
    vm = TaskViewModel(task_store)
    calls: list[int] = []

    def flaky(tasks: list[Task]) -> None:
        calls.append(len(tasks))
        if len(calls) == 1:
            raise RuntimeError("listener bug")

    unsubscribe = vm.subscribe(flaky)
    task_store.add_task("a")
    assert calls == [0, 1]

    unsubscribe()
    task_store.add_task("b")
    assert calls == [0, 1]
