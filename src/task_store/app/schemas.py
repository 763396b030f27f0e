# task_store/app/schemas.py
from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator


class TaskCreate(BaseModel):
    title: str = Field("", description="Заголовок задачи (обязателен, не пустой)")
    description: str = Field("", description="Свободное описание")
    status: Optional[str] = Field(
        None,
        description="todo / progress / done; если не передан — todo",
    )

    @field_validator("title", "description", mode="before")
    @classmethod
    def null_to_empty(cls, value):
        # фронт может прислать null — считаем это пустой строкой
        return "" if value is None else value


class TaskUpdate(BaseModel):
    """
    Тело PUT. Полная замена: статус здесь не дефолтится,
    пустой/отсутствующий статус отклоняется хранилищем.
    """
    title: str = Field("", description="Новый заголовок")
    description: str = Field("", description="Новое описание")
    status: str = Field("", description="todo / progress / done")

    @field_validator("title", "description", "status", mode="before")
    @classmethod
    def null_to_empty(cls, value):
        return "" if value is None else value


class TaskResponse(BaseModel):
    id: int
    title: str
    description: str
    status: Literal["todo", "progress", "done"]


class HealthResponse(BaseModel):
    status: str
    service: str
