"""Database and extension wiring for BudgetKeeper."""

from __future__ import annotations

import atexit
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from flask import Flask, current_app
from sqlalchemy.engine import Engine

from .config import BaseConfig
from .infra.database import SessionFactory, bootstrap_database
from .infra.repositories import Repositories
from .logging_config import get_logger
from .services.money import MoneyFormat

EXTENSION_KEY = "budgetkeeper"

logger = get_logger(__name__)


def local_now() -> datetime:
    """Current local time, timezone-aware."""

    return datetime.now().astimezone()


@dataclass
class AppState:
    """Per-application resources created at startup and released at shutdown."""

    engine: Engine
    session_factory: SessionFactory
    repositories: Repositories
    money_format: MoneyFormat
    clock: Callable[[], datetime] = field(default=local_now)


def init_db(app: Flask) -> AppState:
    """Create the engine, ensure the schema and attach repositories to ``app``."""

    config: BaseConfig = app.config["BUDGETKEEPER_CONFIG"]
    engine, session_factory = bootstrap_database(config)
    state = AppState(
        engine=engine,
        session_factory=session_factory,
        repositories=Repositories.from_session_factory(session_factory),
        money_format=config.money_format(),
    )
    app.extensions[EXTENSION_KEY] = state
    atexit.register(engine.dispose)
    logger.info("Database ready", extra={"database_url": config.DATABASE_URL})
    return state


def shutdown_db(app: Flask) -> None:
    """Dispose of the engine owned by ``app``."""

    state: AppState | None = app.extensions.pop(EXTENSION_KEY, None)
    if state is not None:
        state.engine.dispose()


def get_state() -> AppState:
    """Return the resources of the active application."""

    try:
        return current_app.extensions[EXTENSION_KEY]
    except KeyError:  # pragma: no cover - exercised only on misconfigured apps
        raise RuntimeError("Database not initialized; call init_db(app) first") from None


def get_repositories() -> Repositories:
    return get_state().repositories
