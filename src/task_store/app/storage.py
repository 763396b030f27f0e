from __future__ import annotations

import logging
from threading import RLock
from typing import List, Optional

from .errors import NotFoundError
from .models import DEFAULT_STATUS, Task, validate_fields

logger = logging.getLogger("task_store.storage")

EXAMPLE_TITLE = "Tarefa de exemplo"
EXAMPLE_DESCRIPTION = "Esta é uma tarefa inicial"


class InMemoryTaskStorage:
    """
    Упорядоченный список задач + счётчик id под одним локом.

    Все операции взаимно исключающие (без read/write разделения).
    Наружу отдаём только копии, чтобы общий Task не утекал из-под лока.
    """

    def __init__(self) -> None:
        self._tasks: List[Task] = []
        self._next_id = 1
        self._lock = RLock()

    def seed_example(self) -> Task:
        return self.create(EXAMPLE_TITLE, EXAMPLE_DESCRIPTION, DEFAULT_STATUS)

    def list(self) -> List[Task]:
        with self._lock:
            return [task.copy() for task in self._tasks]

    def create(
        self,
        title: str,
        description: str = "",
        status: Optional[str] = None,
    ) -> Task:
        # в create пустой статус = "todo", в update — ошибка
        status = status or DEFAULT_STATUS
        validate_fields(title, status)

        with self._lock:
            task = Task(
                id=self._next_id,
                title=title,
                description=description,
                status=status,
            )
            self._next_id += 1
            self._tasks.append(task)
            created = task.copy()

        logger.debug("Task %d created", created.id)
        return created

    def update(self, task_id: int, title: str, description: str, status: str) -> Task:
        validate_fields(title, status)

        with self._lock:
            task = self._find(task_id)
            if task is None:
                raise NotFoundError()
            # полная замена (PUT), id не меняется
            task.title = title
            task.description = description
            task.status = status
            updated = task.copy()

        logger.debug("Task %d updated", task_id)
        return updated

    def delete(self, task_id: int) -> None:
        with self._lock:
            for i, task in enumerate(self._tasks):
                if task.id == task_id:
                    del self._tasks[i]
                    break
            else:
                raise NotFoundError()

        logger.debug("Task %d deleted", task_id)

    def _find(self, task_id: int) -> Optional[Task]:
        # линейный поиск, на таком объёме этого достаточно
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)
