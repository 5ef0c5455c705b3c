# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from campexplorer.domain.accounts.entities import Account
from campexplorer.domain.accounts.exceptions import UsernameTakenError
from campexplorer.domain.accounts.repositories import AccountRepository
from campexplorer.infrastructure.db.models import AccountRow
from campexplorer.infrastructure.unit_of_work import unit_of_work_scope
from campexplorer.shared.errors.base import StorageError
from campexplorer.shared.logging import logger


def _to_domain(row: AccountRow) -> Account:
    return Account(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyAccountRepository(AccountRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> Account | None:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = session.scalars(
                    select(AccountRow).where(AccountRow.username == username)
                ).first()
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.error(f"accounts.find_by_username: storage failure {type(exc).__name__}")
            raise StorageError() from exc

    def find_by_id(self, account_id: str) -> Account | None:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = session.get(AccountRow, account_id)
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.error(f"accounts.find_by_id: storage failure {type(exc).__name__}")
            raise StorageError() from exc

    def create(self, username: str, password_hash: str) -> Account:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = AccountRow(username=username, password_hash=password_hash)
                session.add(row)
                session.flush()
                account = _to_domain(row)
        except IntegrityError as exc:
            logger.info("accounts.create: unique constraint rejected duplicate username")
            raise UsernameTakenError() from exc
        except SQLAlchemyError as exc:
            logger.error(f"accounts.create: storage failure {type(exc).__name__}")
            raise StorageError() from exc
        return account
