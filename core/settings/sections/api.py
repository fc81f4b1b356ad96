from typing import List

from pydantic_settings import BaseSettings


class ApiSettings(BaseSettings):
    """
    HTTP API settings.
    Loaded automatically from .env with prefix API_*
    """

    title: str = "Epoxiron API"
    version: str = "1.0.0"
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    # "memory" keeps everything in-process, "database" uses DB_* settings
    storage: str = "database"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "API_",
        "extra": "ignore",
    }
