# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Account, AuthResult
from .exceptions import (
    InvalidCredentialsError,
    MissingCredentialsError,
    TokenExpiredError,
    TokenInvalidError,
    UsernameTakenError,
)
from .repositories import AccountRepository, PasswordHasher, TokenIssuer, TokenValidator

__all__ = [
    "Account",
    "AccountRepository",
    "AuthResult",
    "InvalidCredentialsError",
    "MissingCredentialsError",
    "PasswordHasher",
    "TokenExpiredError",
    "TokenInvalidError",
    "TokenIssuer",
    "TokenValidator",
    "UsernameTakenError",
]
