# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from campexplorer.shared.errors.base import DomainError


class MissingCredentialsError(DomainError):
    code = "missing_credentials"
    status = HTTPStatus.BAD_REQUEST
    message = "Username and password are required"


class UsernameTakenError(DomainError):
    code = "user_already_exists"
    status = HTTPStatus.CONFLICT
    message = "User already exists"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid credentials"


class TokenInvalidError(DomainError):
    code = "token_invalid"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid token"


class TokenExpiredError(DomainError):
    code = "token_expired"
    status = HTTPStatus.UNAUTHORIZED
    message = "Token expired"
