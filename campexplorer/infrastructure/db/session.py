# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, scoped_session, sessionmaker

from campexplorer.shared.config import load_config
from campexplorer.shared.logging import logger

_config = load_config()


class Base(DeclarativeBase):
    pass


connect_args: dict[str, object] = {}
if _config.database.url.startswith("sqlite"):
    connect_args = {
        "check_same_thread": False,
        "timeout": int(_config.database.pool_timeout),
    }

ENGINE: Engine = create_engine(
    _config.database.url,
    echo=False,
    pool_pre_ping=True,
    pool_size=_config.database.pool_size,
    max_overflow=_config.database.max_overflow,
    pool_timeout=_config.database.pool_timeout,
    connect_args=connect_args,
)


SessionLocal = scoped_session(
    sessionmaker(bind=ENGINE, autoflush=False, autocommit=False, expire_on_commit=False)
)


def init_db(engine: Engine | None = None) -> None:
    # models must be registered on Base before create_all
    from campexplorer.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=engine or ENGINE)
    logger.info("Database schema ensured")
