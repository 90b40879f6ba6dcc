"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    bodymap_env: str = "development"
    bodymap_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Render defaults applied at the request boundary
    default_colors: list[str] = ["#0984e3", "#74b9ff"]
    default_fill: str = "#3f3f3f"
    default_stroke: str = "none"
    default_stroke_width: float = 0.0
    default_border: str = "#dfdfdf"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
