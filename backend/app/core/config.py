from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Application
    app_name: str = "Number Walls"
    log_level: str = "INFO"

    # Wall generation
    default_ceiling: int = 20
    min_custom_ceiling: int = 20
    max_custom_ceiling: int = 1000
    max_generation_attempts: int = 100
    max_field_selection_attempts: int = 100

    # Auto-check timing (milliseconds)
    digit_input_timeout_ms: int = 1000
    max_input_timeout_ms: int = 2500
    feedback_display_ms: int = 2000

    class Config:
        env_prefix = "NUMBERWALLS_"
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    return Settings()
