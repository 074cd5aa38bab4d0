from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Collaborative Editor"
    environment: str = "development"

    # memory | sql
    storage_backend: str = "memory"
    database_url: str = "sqlite+aiosqlite:///./collab_editor.db"
    database_echo: bool = False
    database_create_schema: bool = True

    session_ttl_seconds: int = 86400
    session_reap_interval_seconds: int = 300

    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


settings = Settings()
