# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Account:

    id: str
    username: str
    password_hash: str = field(repr=False)
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class AuthResult:
    """What signup and login hand back to the caller. Never carries the hash."""

    username: str
    token: str
