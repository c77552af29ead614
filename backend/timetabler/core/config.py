from functools import lru_cache
import json
from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


BACKEND_ENV_FILE = Path(__file__).resolve().parents[2] / ".env"

DEFAULT_DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
DEFAULT_TIME_SLOTS = [
    "9:30-10:25",
    "10:25-11:20",
    "11:20-11:30",
    "11:30-12:25",
    "12:25-1:20",
    "1:20-2:20",
    "2:20-3:15",
    "3:15-4:10",
    "4:10-5:05",
]
DEFAULT_BREAK_SLOTS = ["11:20-11:30", "1:20-2:20"]


def _split_list(value: str | list[str]) -> list[str]:
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.startswith("["):
            try:
                parsed = json.loads(stripped)
                if isinstance(parsed, list):
                    return [str(item).strip() for item in parsed if str(item).strip()]
            except json.JSONDecodeError:
                pass
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


class Settings(BaseSettings):
    # Resolve to backend/.env so `uvicorn --app-dir backend` works from any cwd.
    model_config = SettingsConfigDict(env_file=str(BACKEND_ENV_FILE), env_file_encoding="utf-8")

    project_name: str = "Timetabler API"
    api_prefix: str = "/api"
    log_level: str = "INFO"

    max_request_size_bytes: int = 2_500_000

    schedule_days: list[str] = list(DEFAULT_DAYS)
    schedule_time_slots: list[str] = list(DEFAULT_TIME_SLOTS)
    schedule_break_slots: list[str] = list(DEFAULT_BREAK_SLOTS)
    teacher_daily_cap: int = 2
    session_minutes: int = 60

    conflict_penalty: int = 10
    constraint_violation_penalty: int = 5

    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    @field_validator("cors_origins", "schedule_days", "schedule_time_slots", "schedule_break_slots", mode="before")
    @classmethod
    def split_list_values(cls, value: str | list[str]) -> list[str]:
        return _split_list(value)

    @model_validator(mode="after")
    def validate_limits(self) -> "Settings":
        if self.teacher_daily_cap < 1:
            raise ValueError("teacher_daily_cap must be at least 1")
        if self.session_minutes < 1:
            raise ValueError("session_minutes must be at least 1")
        if self.conflict_penalty < 0 or self.constraint_violation_penalty < 0:
            raise ValueError("Fitness penalties cannot be negative")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
