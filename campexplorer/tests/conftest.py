from __future__ import annotations

import os
import tempfile
from collections.abc import Callable, Iterator

# Must be set before anything under campexplorer reads the config.
_TMP_DIR = tempfile.mkdtemp(prefix="campexplorer-tests-")
os.environ["JWT_SECRET"] = "test-signing-secret-0123456789abcdef0123456789"
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'app.db')}"
os.environ["LOG_FILE"] = os.path.join(_TMP_DIR, "app.log")
os.environ["PASSWORD_HASH_METHOD"] = "pbkdf2:sha256:1000"
os.environ["APP_ENV"] = "test"

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from campexplorer.application.services.password_hashing import WerkzeugPasswordHasher  # noqa: E402
from campexplorer.infrastructure.db import Base  # noqa: E402
from campexplorer.infrastructure.db import models  # noqa: E402,F401

TEST_SECRET = os.environ["JWT_SECRET"]


@pytest.fixture()
def session_factory(tmp_path) -> Iterator[Callable[[], Session]]:
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    engine.dispose()


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")


@pytest.fixture()
def app(session_factory: Callable[[], Session]) -> Flask:
    from campexplorer.app import create_app
    from campexplorer.infrastructure.container import Container

    return create_app(Container(session_factory=session_factory))


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()
