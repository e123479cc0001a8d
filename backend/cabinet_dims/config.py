from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_preferences_path() -> str:
    return str(Path.home() / ".cabinet_dims" / "preferences.json")


class Settings(BaseSettings):
    app_name: str = "Cabinet Dimensions"
    debug: bool = True
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    default_units: str = "in"
    preferences_path: str = _default_preferences_path()
    max_text_length: int = 200  # characters per dimension field
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="CABDIMS_")


settings = Settings()
