# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from campexplorer.domain.accounts.entities import AuthResult
from campexplorer.domain.accounts.exceptions import (
    InvalidCredentialsError,
    MissingCredentialsError,
    UsernameTakenError,
)
from campexplorer.domain.accounts.repositories import (
    AccountRepository,
    PasswordHasher,
    TokenIssuer,
)
from campexplorer.shared.logging import logger


class AuthService:
    """Signup and login on top of the credential store, hasher and issuer."""

    def __init__(
        self,
        *,
        accounts: AccountRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ) -> None:
        self._accounts = accounts
        self._password_hasher = password_hasher
        self._token_issuer = token_issuer
        self._dummy_hash: str | None = None

    def signup(self, username: str | None, password: str | None) -> AuthResult:
        if not username or not password:
            raise MissingCredentialsError()

        if self._accounts.find_by_username(username) is not None:
            logger.info("auth.signup: username already taken")
            raise UsernameTakenError()

        hashed = self._password_hasher.hash(password)
        # create() raises UsernameTakenError itself if a concurrent signup won
        account = self._accounts.create(username, hashed)
        token = self._token_issuer.issue(account.id)

        logger.info(f"auth.signup: ok account_id={account.id}")
        return AuthResult(username=account.username, token=token)

    def login(self, username: str | None, password: str | None) -> AuthResult:
        account = self._accounts.find_by_username(username) if username else None

        if account is None:
            # burn the same hashing work so a missing user is not faster
            self._password_hasher.verify(password or "", self._placeholder_hash())
            logger.info("auth.login: rejected")
            raise InvalidCredentialsError()

        if not password or not self._password_hasher.verify(password, account.password_hash):
            logger.info(f"auth.login: rejected account_id={account.id}")
            raise InvalidCredentialsError()

        token = self._token_issuer.issue(account.id)
        logger.info(f"auth.login: ok account_id={account.id}")
        return AuthResult(username=account.username, token=token)

    def _placeholder_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self._password_hasher.hash("placeholder-password")
        return self._dummy_hash
