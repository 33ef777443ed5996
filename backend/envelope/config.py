from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Initial control panel values (meters)
    default_lot_width: float = 25
    default_lot_depth: float = 40
    default_max_height: float = 12
    default_front_setback: float = 6
    default_rear_setback: float = 8
    default_left_setback: float = 3
    default_right_setback: float = 3

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
