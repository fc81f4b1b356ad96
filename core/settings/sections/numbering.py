from pydantic_settings import BaseSettings


class NumberingSettings(BaseSettings):
    """
    Delivery note numbering.
    Loaded automatically from .env with prefix NUMBERING_*
    """

    prefix: str = "ALB"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "NUMBERING_",
        "extra": "ignore",
    }
