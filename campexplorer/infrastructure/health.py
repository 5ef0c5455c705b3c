# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import text
from sqlalchemy.orm import Session

from campexplorer.infrastructure.unit_of_work import unit_of_work_scope


def check_database(session_factory: Callable[[], Session]) -> bool:
    with unit_of_work_scope(session_factory) as session:
        session.execute(text("SELECT 1"))
    return True


__all__ = ["check_database"]
