# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from campexplorer.application.services.auth_service import AuthService
from campexplorer.infrastructure.audit import AuditAction, audit_log
from campexplorer.interfaces.http.dto.auth import AuthSuccessDTO, CredentialsRequestDTO
from campexplorer.shared.errors.base import AppError
from campexplorer.shared.errors.validation import raise_validation_error


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


def _parse_credentials() -> CredentialsRequestDTO:
    try:
        return CredentialsRequestDTO.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)


class AuthController:
    def __init__(self, *, auth_service: AuthService) -> None:
        self._auth_service = auth_service

    def signup(self) -> tuple[Response, int]:
        dto = _parse_credentials()
        ip_address = _get_client_ip()

        try:
            result = self._auth_service.signup(dto.username, dto.password)
        except AppError as exc:
            audit_log(
                AuditAction.SIGNUP_FAILED,
                ip_address=ip_address,
                details={"username": dto.username, "error": exc.code},
                success=False,
            )
            raise

        audit_log(
            AuditAction.SIGNUP,
            ip_address=ip_address,
            details={"username": result.username},
        )
        return jsonify(AuthSuccessDTO.from_result(result).model_dump()), 201

    def login(self) -> tuple[Response, int]:
        dto = _parse_credentials()
        ip_address = _get_client_ip()

        try:
            result = self._auth_service.login(dto.username, dto.password)
        except AppError as exc:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"username": dto.username, "error": exc.code},
                success=False,
            )
            raise

        audit_log(
            AuditAction.LOGIN_SUCCESS,
            ip_address=ip_address,
            details={"username": result.username},
        )
        return jsonify(AuthSuccessDTO.from_result(result).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/signup", view_func=self.signup, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
