from __future__ import annotations

from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from campexplorer.application.services.auth_service import AuthService
from campexplorer.domain.accounts.entities import AuthResult
from campexplorer.domain.accounts.exceptions import (
    InvalidCredentialsError,
    MissingCredentialsError,
    UsernameTakenError,
)
from campexplorer.interfaces.http.controllers.auth_controller import AuthController
from campexplorer.shared.middleware.error_handler import configure_error_handling


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def _register(flask_app: Flask, service: object) -> None:
    controller = AuthController(auth_service=cast(AuthService, service))
    flask_app.register_blueprint(controller.as_blueprint())


def test_signup_returns_201_with_user_and_token(flask_app: Flask) -> None:
    service = MagicMock()
    service.signup.return_value = AuthResult(username="alice", token="token123")
    _register(flask_app, service)

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/signup", json={"username": "alice", "password": "secret123"}
        )

    assert response.status_code == 201
    assert response.get_json() == {"user": "alice", "token": "token123"}
    service.signup.assert_called_once_with("alice", "secret123")


def test_login_returns_200_with_user_and_token(flask_app: Flask) -> None:
    service = MagicMock()
    service.login.return_value = AuthResult(username="alice", token="token456")
    _register(flask_app, service)

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/login", json={"username": "alice", "password": "secret123"}
        )

    assert response.status_code == 200
    assert response.get_json() == {"user": "alice", "token": "token456"}


def test_absent_fields_reach_service_as_none(flask_app: Flask) -> None:
    service = MagicMock()
    service.signup.side_effect = MissingCredentialsError()
    _register(flask_app, service)

    with flask_app.test_client() as client:
        response = client.post("/api/auth/signup", json={"username": "alice"})

    assert response.status_code == 400
    assert response.get_json()["error"] == "missing_credentials"
    service.signup.assert_called_once_with("alice", None)


def test_non_json_body_is_treated_as_empty(flask_app: Flask) -> None:
    service = MagicMock()
    service.signup.side_effect = MissingCredentialsError()
    _register(flask_app, service)

    with flask_app.test_client() as client:
        response = client.post("/api/auth/signup", data="not json")

    assert response.status_code == 400
    service.signup.assert_called_once_with(None, None)


def test_conflict_maps_to_409(flask_app: Flask) -> None:
    service = MagicMock()
    service.signup.side_effect = UsernameTakenError()
    _register(flask_app, service)

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/signup", json={"username": "alice", "password": "secret123"}
        )

    assert response.status_code == 409
    assert response.get_json() == {
        "error": "user_already_exists",
        "message": "User already exists",
    }


def test_invalid_credentials_map_to_401(flask_app: Flask) -> None:
    service = MagicMock()
    service.login.side_effect = InvalidCredentialsError()
    _register(flask_app, service)

    with flask_app.test_client() as client:
        response = client.post("/api/auth/login", json={"username": "alice", "password": "x"})

    assert response.status_code == 401
    assert response.get_json()["error"] == "invalid_credentials"


def test_wrongly_typed_payload_returns_422(flask_app: Flask) -> None:
    service = MagicMock()
    _register(flask_app, service)

    with flask_app.test_client() as client:
        response = client.post("/api/auth/login", json={"username": 42, "password": ["x"]})

    assert response.status_code == 422
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert payload["context"]["fields"] == ["password", "username"]
    service.login.assert_not_called()


def test_unexpected_failure_is_generic_500(flask_app: Flask) -> None:
    service = MagicMock()
    service.login.side_effect = RuntimeError("db exploded at /var/lib/secret")
    _register(flask_app, service)

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/login", json={"username": "alice", "password": "secret123"}
        )

    assert response.status_code == 500
    assert response.get_json() == {"error": "internal_error"}
