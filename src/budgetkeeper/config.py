"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .services.money import MoneyFormat

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "BudgetKeeper"
    DB_FILENAME = "budgetkeeper.db"
    DEFAULT_LOCALE = "fr-FR"
    DEFAULT_CURRENCY = "EUR"
    TESTING = False

    def __init__(self) -> None:
        self.SECRET_KEY = os.getenv("BUDGETKEEPER_SECRET_KEY", "replace-me")
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("BUDGETKEEPER_DEV_MODE", default=True)
        self.DATABASE_URL = os.getenv("BUDGETKEEPER_DATABASE_URL", self._build_sqlite_url())
        self.LOCALE = os.getenv("BUDGETKEEPER_LOCALE", self.DEFAULT_LOCALE)
        self.CURRENCY_CODE = os.getenv("BUDGETKEEPER_CURRENCY", self.DEFAULT_CURRENCY).upper()
        self.LOG_TO_FILE = _env_bool("BUDGETKEEPER_LOG_TO_FILE", default=True)
        if not self.DEV_MODE and self.SECRET_KEY == "replace-me":
            raise ValueError("BUDGETKEEPER_SECRET_KEY must be set in non-dev mode.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = os.getenv("BUDGETKEEPER_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        db_path = self.DATA_DIR / self.DB_FILENAME
        return f"sqlite:///{db_path}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        connect_args: dict[str, Any] = {}
        if self.DATABASE_URL.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        return {"connect_args": connect_args}

    def money_format(self) -> MoneyFormat:
        """Return the display/input convention for monetary amounts."""

        return MoneyFormat.for_locale(self.LOCALE, self.CURRENCY_CODE)


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True


class TestConfig(BaseConfig):
    """Configuration used by the test-suite; no log files are written."""

    TESTING = True

    def __init__(self) -> None:
        super().__init__()
        self.LOG_TO_FILE = False
