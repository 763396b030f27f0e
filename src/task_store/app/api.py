# task_store/app/api.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response, status

from .models import Task, parse_task_id
from .schemas import TaskCreate, TaskResponse, TaskUpdate
from .storage import InMemoryTaskStorage

logger = logging.getLogger("task_store.api")

router = APIRouter(prefix="/tasks", tags=["tasks"])


def get_storage(request: Request) -> InMemoryTaskStorage:
    """Хранилище создаётся один раз в create_app() и лежит в app.state."""
    return request.app.state.storage


def _trace_id(request: Request) -> Optional[str]:
    return getattr(request.state, "trace_id", None)


def _to_response(task: Task) -> TaskResponse:
    return TaskResponse(**task.to_dict())


# {task_id:path}: "/tasks/" и "/tasks/1/2" тоже попадают сюда и получают 400,
# а не 404/редирект на коллекцию.
# Обработчики синхронные: FastAPI гоняет их в threadpool,
# т.е. каждый запрос на своём потоке, а согласованность держит лок хранилища.

@router.get("", response_model=List[TaskResponse])
def list_tasks(storage: InMemoryTaskStorage = Depends(get_storage)) -> List[TaskResponse]:
    return [_to_response(task) for task in storage.list()]


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    body: TaskCreate,
    request: Request,
    storage: InMemoryTaskStorage = Depends(get_storage),
) -> TaskResponse:
    task = storage.create(body.title, body.description, body.status)
    logger.info(
        "Task created task_id=%d status=%s trace_id=%s",
        task.id,
        task.status,
        _trace_id(request),
    )
    return _to_response(task)


@router.put("/{task_id:path}", response_model=TaskResponse)
def update_task(
    task_id: str,
    body: TaskUpdate,
    request: Request,
    storage: InMemoryTaskStorage = Depends(get_storage),
) -> TaskResponse:
    task = storage.update(parse_task_id(task_id), body.title, body.description, body.status)
    logger.info(
        "Task updated task_id=%d status=%s trace_id=%s",
        task.id,
        task.status,
        _trace_id(request),
    )
    return _to_response(task)


@router.delete(
    "/{task_id:path}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_task(
    task_id: str,
    request: Request,
    storage: InMemoryTaskStorage = Depends(get_storage),
) -> Response:
    storage.delete(parse_task_id(task_id))
    logger.info("Task deleted task_id=%s trace_id=%s", task_id, _trace_id(request))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
