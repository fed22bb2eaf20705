"""Tests for the in-memory task repository."""

import threading
from datetime import date

import pytest

from task_api.models.task import Task
from task_api.models.value_objects import DueDate, TaskId, TaskName, TaskStatus
from task_api.repositories.task_repository import InMemoryTaskRepository, TaskRepository


class TestInMemoryTaskRepository:
    """Test InMemoryTaskRepository behaviour."""

    def test_is_task_repository(self, task_repository):
        assert isinstance(task_repository, TaskRepository)

    def test_port_is_abstract(self):
        with pytest.raises(TypeError):
            TaskRepository()

    def test_save_find_remove(self, task_repository, task_factory):
        """Tasks can be saved, found and removed."""
        task1 = task_factory(task_id="1234abcd-56ef-78ab-90cd-123456efabcd")
        task2 = Task.reconstruct(
            TaskId.value_of("2345bcde-67fa-89bc-01de-234567fabcde"),
            TaskName.value_of("タスク２"),
            TaskStatus.NOT_COMPLETED,
            DueDate.reconstruct(date(2002, 2, 2)),
        )

        task_repository.save(task1)
        task_repository.save(task2)
        assert len(task_repository.find_all()) == 2

        selected = task_repository.find_by_id(task1.task_id)
        assert selected is not None
        assert selected.task_id.value == "1234abcd-56ef-78ab-90cd-123456efabcd"

        task_repository.remove(task1.task_id)
        task_repository.remove(task2.task_id)

        assert task_repository.find_all() == []

    def test_empty_results(self, task_repository):
        """Empty lookups are not errors."""
        assert task_repository.find_all() == []

        missing = TaskId.value_of("1234abcd-56ef-78ab-90cd-123456efabcd")
        assert task_repository.find_by_id(missing) is None

    def test_remove_missing_is_noop(self, task_repository, sample_task):
        task_repository.remove(sample_task.task_id)

        task_repository.save(sample_task)
        task_repository.remove(sample_task.task_id)
        task_repository.remove(sample_task.task_id)

        assert task_repository.count() == 0

    def test_save_is_idempotent(self, task_repository, sample_task):
        task_repository.save(sample_task)
        task_repository.save(sample_task)

        assert len(task_repository.find_all()) == 1
        assert task_repository.find_by_id(sample_task.task_id) == sample_task

    def test_save_replaces_existing(self, task_repository, sample_task, today):
        task_repository.save(sample_task)
        updated = sample_task.update(status="DONE", today=today)

        task_repository.save(updated)

        assert task_repository.count() == 1
        assert task_repository.find_by_id(sample_task.task_id).status is TaskStatus.DONE

    def test_find_all_keeps_insertion_order(self, task_repository, task_factory, today):
        tasks = [task_factory(name=f"Task {i}") for i in range(3)]
        for task in tasks:
            task_repository.save(task)

        task_repository.save(tasks[0].update(name="Renamed", today=today))

        names = [task.name.value for task in task_repository.find_all()]
        assert names == ["Renamed", "Task 1", "Task 2"]

    def test_find_all_returns_snapshot(self, task_repository, sample_task):
        task_repository.save(sample_task)

        snapshot = task_repository.find_all()
        task_repository.remove(sample_task.task_id)

        assert len(snapshot) == 1
        assert task_repository.find_all() == []

    def test_lookup_is_case_insensitive_on_id(self, task_repository, sample_task):
        task_repository.save(sample_task)

        found = task_repository.find_by_id(TaskId.value_of(sample_task.task_id.value.upper()))

        assert found == sample_task


class TestRepositoryThreadSafety:
    """Test repository thread safety."""

    def test_concurrent_saves(self, task_factory):
        repository = InMemoryTaskRepository()
        errors = []

        def save_worker(index):
            try:
                repository.save(task_factory(name=f"Concurrent Task {index}"))
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=save_worker, args=(i,)) for i in range(20)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert repository.count() == 20
