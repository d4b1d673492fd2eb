"""Engine configuration objects and helpers."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "debtpath"
    LOG_FILENAME = "debtpath.log"
    LOG_MAX_BYTES = 10 * 1024 * 1024
    LOG_BACKUP_COUNT = 5

    def __init__(self) -> None:
        self.DEV_MODE = _env_bool("DEBTPATH_DEV_MODE", default=True)
        self.LOG_LEVEL = self._resolve_log_level(os.getenv("DEBTPATH_LOG_LEVEL", "INFO"))
        self.DATA_DIR = self._resolve_data_dir()

    def _resolve_data_dir(self) -> Path:
        """Return the directory where log files live."""

        data_root = os.getenv("DEBTPATH_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _resolve_log_level(value: str) -> int:
        level = logging.getLevelName(value.strip().upper())
        if not isinstance(level, int):
            raise ValueError(f"DEBTPATH_LOG_LEVEL has unknown level: {value!r}")
        return level

    @property
    def log_file(self) -> Path:
        return Path(self.DATA_DIR) / "logs" / self.LOG_FILENAME


class DevConfig(BaseConfig):
    """Development configuration with verbose console output."""

    DEBUG = True
    TESTING = False

