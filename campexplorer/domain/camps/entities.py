# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Camp listings and their embedded image."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(slots=True, frozen=True)
class CampImage:
    data: bytes = field(repr=False)
    content_type: str | None
    filename: str | None

    @property
    def has_data(self) -> bool:
        return bool(self.data)


@dataclass(slots=True, frozen=True)
class Camp:
    id: str
    title: str
    location: str | None
    description: str | None
    price: float | None
    image: CampImage | None
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class CampChanges:
    """Fields of a partial update; ``None`` means leave unchanged."""

    title: str | None = None
    location: str | None = None
    description: str | None = None
    price: float | None = None

    def as_dict(self) -> dict[str, object]:
        values = {
            "title": self.title,
            "location": self.location,
            "description": self.description,
            "price": self.price,
        }
        return {key: value for key, value in values.items() if value is not None}
