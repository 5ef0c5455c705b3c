# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Camp, CampImage


class CampRepository(Protocol):
    def list_all(self) -> Sequence[Camp]: ...
    def get(self, camp_id: str) -> Camp | None: ...

    def add(
        self,
        *,
        title: str,
        location: str | None,
        description: str | None,
        price: float | None,
        image: CampImage | None,
    ) -> Camp: ...

    def update(
        self, camp_id: str, fields: dict[str, object], image: CampImage | None = None
    ) -> Camp | None:
        """Apply ``fields`` (and ``image`` when given); ``None`` if the camp is gone."""
        ...

    def delete(self, camp_id: str) -> bool: ...
