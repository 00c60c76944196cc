from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from homefs.const import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_ROOT_DIR


class WebConfig(BaseModel):
    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)

    def bind(self) -> str:
        return f"{self.host}:{self.port}"


LoggerLevels = Literal["critical", "error", "warning", "info", "debug"]


class LoggerConfig(BaseModel):
    default: LoggerLevels | None = None
    logs: dict[str, LoggerLevels] = Field(default_factory=dict)


class Config(BaseModel):
    root_dir: Path = Path(DEFAULT_ROOT_DIR)
    web: WebConfig = Field(default_factory=WebConfig)
    logger: LoggerConfig | None = None
