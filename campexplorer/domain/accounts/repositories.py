# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Account


class AccountRepository(Protocol):
    def find_by_username(self, username: str) -> Account | None: ...
    def find_by_id(self, account_id: str) -> Account | None: ...

    def create(self, username: str, password_hash: str) -> Account:
        """Persist a new account.

        Raises ``UsernameTakenError`` when the username is already stored,
        including when a concurrent insert wins the race.
        """
        ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenIssuer(Protocol):
    def issue(self, account_id: str) -> str: ...


class TokenValidator(Protocol):
    def validate(self, token: str) -> str: ...
