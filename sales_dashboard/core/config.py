"""Настройки конфигурации приложения."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Загружает настройки из файла .env.

    Атрибуты:
        model_config: Конфигурация для Pydantic моделей.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # База данных
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "sales_dashboard"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    # Полная строка подключения, перекрывает POSTGRES_* (например, для SQLite)
    DATABASE_URL: str | None = None
    DB_ECHO: bool = False
    # Создавать таблицы при старте вместо миграций Alembic (для локальной разработки)
    DB_CREATE_ALL: bool = False

    # HTTP API
    API_PREFIX: str = "/api"
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]
    API_HOST: str = "0.0.0.0"  # noqa: S104
    API_PORT: int = 8000

    # Клиент
    CLIENT_BASE_URL: str = "http://127.0.0.1:8000/api"
    CLIENT_TIMEOUT: float = 10.0

    # Логирование
    LOG_LEVEL: str = "INFO"

    @property
    def database_url(self) -> str:
        """
        Собирает строку подключения к PostgreSQL.

        Returns:
            Строка подключения для SQLAlchemy.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )


settings = Settings()
