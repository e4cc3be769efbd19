# log_search/config.py
from __future__ import annotations

import os
from typing import Optional, Tuple

import yaml
from pydantic import BaseModel, Field


class LogConfig(BaseModel):
    dir: Optional[str] = None
    rotation: str = "1 day"
    retention: str = "30 days"
    level: str = "INFO"


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origin: str = "*"


class SourceConfig(BaseModel):
    parquet_dir: Optional[str] = None
    # EventId, Message, NanoTimeStamp
    columns: Tuple[str, str, str] = ("EventId", "Message", "NanoTimeStamp")


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load a YAML config file.
        - no path: all defaults
        - sections and keys left out of the file keep their defaults
        """
        if path is None:
            return cls()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        return cls(**raw)
