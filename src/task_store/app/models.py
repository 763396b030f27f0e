from __future__ import annotations

import re
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Literal, Optional, Tuple

from .errors import ValidationError


TaskStatus = Literal["todo", "progress", "done"]

VALID_STATUSES: Tuple[str, ...] = ("todo", "progress", "done")
DEFAULT_STATUS: TaskStatus = "todo"

# только десятичная запись: без "1.0", "1_0", " 1" и т.п.
_TASK_ID_RE = re.compile(r"[+-]?[0-9]+")


@dataclass
class Task:
    id: int
    title: str
    description: str = ""
    status: TaskStatus = DEFAULT_STATUS

    def copy(self) -> "Task":
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def validate_fields(title: str, status: Optional[str]) -> None:
    """
    Общая проверка для create/update.
    Дефолт статуса подставляется до вызова (только в create), здесь пустой статус — ошибка.
    """
    if not title:
        raise ValidationError("Title is required")
    if status not in VALID_STATUSES:
        raise ValidationError("Invalid status")


def parse_task_id(raw: str) -> int:
    if not _TASK_ID_RE.fullmatch(raw):
        raise ValidationError("Invalid task id")
    return int(raw)
