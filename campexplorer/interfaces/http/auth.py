# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import wraps

from flask import g, request

from campexplorer.domain.accounts.exceptions import TokenExpiredError, TokenInvalidError
from campexplorer.domain.accounts.repositories import AccountRepository, TokenValidator
from campexplorer.infrastructure.audit import AuditAction, audit_log
from campexplorer.shared.errors.base import AuthenticationRequiredError
from campexplorer.shared.logging import logger


def bearer_token() -> str:
    auth = request.headers.get("Authorization", "")
    scheme, _, value = auth.partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return value.strip()


def _reject(reason: str) -> None:
    audit_log(
        AuditAction.TOKEN_REJECTED,
        ip_address=request.remote_addr,
        details={"reason": reason, "path": request.path},
        success=False,
    )


def auth_required(validator: TokenValidator, accounts: AccountRepository | None = None):
    """Reject the request unless it carries a valid bearer token.

    When ``accounts`` is given the token subject must still resolve to a
    stored account. On success the account id is available as
    ``flask.g.account_id``.
    """

    def decorator(f):
        @wraps(f)
        def inner(*a, **kw):
            token = bearer_token()
            if not token:
                logger.warning(
                    f"No bearer token on {request.method} {request.path} "
                    f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
                )
                raise AuthenticationRequiredError()

            try:
                account_id = validator.validate(token)
            except (TokenInvalidError, TokenExpiredError) as exc:
                _reject(exc.code)
                raise

            if accounts is not None and accounts.find_by_id(account_id) is None:
                _reject("account_not_found")
                raise TokenInvalidError()

            g.account_id = account_id
            logger.debug(f"Auth OK: account={account_id} {request.method} {request.path}")
            return f(*a, **kw)

        return inner

    return decorator
