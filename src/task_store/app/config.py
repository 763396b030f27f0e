# task_store/app/config.py
import os


class Settings:
    """Настройки сервиса через переменные окружения."""

    def __init__(self) -> None:
        self.PROJECT_NAME = os.getenv("TASK_STORE_PROJECT_NAME", "task_store")
        self.HOST = os.getenv("TASK_STORE_HOST", "0.0.0.0")
        self.PORT = int(os.getenv("TASK_STORE_PORT", "8080"))

        # включать/выключать debug через переменную окружения
        self.DEBUG = os.getenv("TASK_STORE_DEBUG", "false").lower() == "true"

        # стартовая "Tarefa de exemplo" — фронт ожидает её при первом запуске
        self.SEED_EXAMPLE = os.getenv("TASK_STORE_SEED_EXAMPLE", "true").lower() == "true"


settings = Settings()
