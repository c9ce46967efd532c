from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Client settings"""

    # BBB API settings
    bbb_server_base_url: str
    bbb_secret: str

    log_level: str = "INFO"

    model_config = {"env_file": ".env"}


@lru_cache()
def get_settings():
    return Settings()
