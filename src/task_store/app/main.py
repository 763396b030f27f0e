# task_store/app/main.py
import logging
import uuid
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import router as tasks_router
from .config import settings
from .errors import MethodNotAllowedError, TaskStoreError, ValidationError
from .schemas import HealthResponse
from .storage import InMemoryTaskStorage


# --- базовый логгер (stdout контейнера) ---

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("task_store")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def error_response(exc: TaskStoreError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def create_app(storage: Optional[InMemoryTaskStorage] = None) -> FastAPI:
    """
    Собирает приложение вокруг одного экземпляра хранилища.
    В тестах передаём свой storage, в проде создаём новый (с примером, если включено).
    """
    if storage is None:
        storage = InMemoryTaskStorage()
        if settings.SEED_EXAMPLE:
            storage.seed_example()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="CRUD по задачам канбан-доски, всё в памяти",
        version="0.1.0",
        debug=settings.DEBUG,
        # "/tasks/" не должен молча уходить на коллекцию
        redirect_slashes=False,
    )
    app.state.storage = storage

    # --- middleware: trace_id ---
    @app.middleware("http")
    async def trace_id_middleware(request: Request, call_next):
        """
        Генерируем/прокидываем X-Trace-Id,
        сохраняем его в request.state.trace_id и добавляем в headers ответа.
        """
        incoming_trace_id = request.headers.get("X-Trace-Id")
        trace_id = incoming_trace_id or str(uuid.uuid4())

        request.state.trace_id = trace_id

        response = await call_next(request)
        response.headers["X-Trace-Id"] = trace_id
        return response

    # --- middleware: CORS (добавлен последним => самый внешний) ---
    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        # preflight отвечаем сразу, до роутинга
        if request.method == "OPTIONS":
            response = Response(status_code=status.HTTP_200_OK)
        else:
            response = await call_next(request)

        response.headers.update(CORS_HEADERS)
        return response

    # --- ошибки: всё отдаём plain text ---

    @app.exception_handler(TaskStoreError)
    async def task_store_error_handler(request: Request, exc: TaskStoreError):
        logger.warning(
            "Request rejected: %s %s -> %d %s trace_id=%s",
            request.method,
            request.url.path,
            exc.status_code,
            exc.message,
            getattr(request.state, "trace_id", None),
        )
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        # FastAPI по умолчанию отдаёт 422, нам нужен 400.
        # id парсится в роутере (parse_task_id), сюда доходят только ошибки тела
        error = ValidationError("Failed to parse request body")
        return await task_store_error_handler(request, error)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            response = await task_store_error_handler(request, MethodNotAllowedError())
        else:
            response = PlainTextResponse(str(exc.detail), status_code=exc.status_code)
        # Allow для 405 и т.п.
        response.headers.update(exc.headers or {})
        return response

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(status="ok", service=settings.PROJECT_NAME)

    app.include_router(tasks_router)
    return app


app = create_app()


def run() -> None:
    logger.info("Server listening on %s:%d", settings.HOST, settings.PORT)
    # ошибка bind-а фатальна: uvicorn сам пишет в лог и завершает процесс
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    run()
