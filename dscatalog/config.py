from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .error_handling import validate_log_level


@dataclass
class Settings:
    log_level: str = "WARNING"
    log_file: Optional[Path] = None
    config_file: Optional[str] = None  # defaults to dscatalog/data/default.json

    @staticmethod
    def from_env() -> "Settings":
        log_file = os.environ.get("DSCATALOG_LOG_FILE", "")
        return Settings(
            log_level=os.environ.get("DSCATALOG_LOG_LEVEL", "WARNING"),
            log_file=Path(log_file) if log_file else None,
            config_file=os.environ.get("DSCATALOG_CONFIG_FILE") or None,
        )

    def ensure(self) -> None:
        self.log_level = validate_log_level(self.log_level)
