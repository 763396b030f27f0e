from fastapi import status


class TaskStoreError(Exception):
    """Базовая ошибка сервиса. status_code — HTTP-код, которым её отдаём клиенту."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal error"

    def __init__(self, message: str = "") -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TaskStoreError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class NotFoundError(TaskStoreError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Task not found"


class MethodNotAllowedError(TaskStoreError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
    default_message = "Method not allowed"
