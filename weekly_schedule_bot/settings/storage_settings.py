from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class StorageSettings(BaseSettings):
    data_dir: str = Field(default="./data", description="Directory holding bot data files")
    schedule_file: str = Field(
        default="schedules.json",
        description="JSON file, relative to data_dir, storing user schedules",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="storage_",
        extra="ignore",
    )

    @property
    def schedule_path(self) -> Path:
        return Path(self.data_dir) / self.schedule_file
