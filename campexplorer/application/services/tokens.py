# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed bearer tokens (JWT, HMAC).

Tokens are self-contained: nothing is stored server-side and expiry is the
only way a token stops working. Claims are ``sub`` (account id), ``iat``,
``exp`` and a random ``jti``.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from campexplorer.domain.accounts.exceptions import TokenExpiredError, TokenInvalidError
from campexplorer.domain.accounts.repositories import TokenIssuer, TokenValidator
from campexplorer.shared.errors.base import ConfigurationError

DEFAULT_LIFETIME = timedelta(days=7)
DEFAULT_ALGORITHM = "HS256"

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _require_secret(secret: str | None) -> str:
    if not secret:
        raise ConfigurationError("JWT_SECRET is not configured; refusing to sign tokens")
    return secret


class JwtTokenIssuer(TokenIssuer):
    def __init__(
        self,
        *,
        secret: str | None,
        lifetime: timedelta = DEFAULT_LIFETIME,
        algorithm: str = DEFAULT_ALGORITHM,
        clock: Clock = _utcnow,
    ) -> None:
        self._secret = _require_secret(secret)
        self._lifetime = lifetime
        self._algorithm = algorithm
        self._clock = clock

    @property
    def lifetime(self) -> timedelta:
        return self._lifetime

    def issue(self, account_id: str) -> str:
        issued_at = self._clock()
        expires_at = issued_at + self._lifetime
        claims = {
            "sub": str(account_id),
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)


class JwtTokenValidator(TokenValidator):
    def __init__(
        self,
        *,
        secret: str | None,
        algorithm: str = DEFAULT_ALGORITHM,
        clock: Clock = _utcnow,
    ) -> None:
        self._secret = _require_secret(secret)
        self._algorithm = algorithm
        self._clock = clock

    def validate(self, token: str) -> str:
        """Return the account id bound to ``token``.

        Raises ``TokenInvalidError`` for anything that does not verify against
        the current secret and ``TokenExpiredError`` once ``now >= exp``.
        Expiry is checked against the injected clock rather than PyJWT's own.
        """
        if not token:
            raise TokenInvalidError()
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "require": ["sub", "iat", "exp"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidTokenError as exc:
            raise TokenInvalidError() from exc

        exp = claims["exp"]
        if isinstance(exp, bool) or not isinstance(exp, int | float):
            raise TokenInvalidError()
        if self._clock() >= datetime.fromtimestamp(exp, UTC):
            raise TokenExpiredError()

        subject = claims["sub"]
        if not isinstance(subject, str) or not subject:
            raise TokenInvalidError()
        return subject
