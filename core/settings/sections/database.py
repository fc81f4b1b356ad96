from pydantic_settings import BaseSettings


class DatabaseSettings(BaseSettings):
    """
    Database connection settings.
    Loaded automatically from .env with prefix DB_*
    """

    database_url: str = "sqlite+aiosqlite:///epoxiron.db"

    # Connection pool settings (ignored by SQLite)
    pool_size: int = 5
    max_overflow: int = 10
    pool_recycle: int = 3600

    # Echo SQL (for debugging)
    echo_sql: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "DB_",
        "extra": "ignore",
    }

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")
