# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from campexplorer.domain.camps.entities import Camp, CampImage
from campexplorer.domain.camps.repositories import CampRepository
from campexplorer.infrastructure.db.models import CampRow
from campexplorer.infrastructure.unit_of_work import unit_of_work_scope

_UPDATABLE = frozenset({"title", "location", "description", "price"})


def _to_domain(row: CampRow) -> Camp:
    image = None
    if row.image_data is not None or row.image_content_type or row.image_filename:
        image = CampImage(
            data=row.image_data or b"",
            content_type=row.image_content_type,
            filename=row.image_filename,
        )
    return Camp(
        id=row.id,
        title=row.title,
        location=row.location,
        description=row.description,
        price=row.price,
        image=image,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _apply_image(row: CampRow, image: CampImage) -> None:
    row.image_data = image.data
    row.image_content_type = image.content_type
    row.image_filename = image.filename


class SqlAlchemyCampRepository(CampRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def list_all(self) -> Sequence[Camp]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.scalars(
                select(CampRow).order_by(CampRow.created_at.asc(), CampRow.id.asc())
            ).all()
            return [_to_domain(row) for row in rows]

    def get(self, camp_id: str) -> Camp | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(CampRow, camp_id)
            return _to_domain(row) if row else None

    def add(
        self,
        *,
        title: str,
        location: str | None,
        description: str | None,
        price: float | None,
        image: CampImage | None,
    ) -> Camp:
        with unit_of_work_scope(self._session_factory) as session:
            row = CampRow(
                title=title,
                location=location,
                description=description,
                price=price,
            )
            if image is not None:
                _apply_image(row, image)
            session.add(row)
            session.flush()
            return _to_domain(row)

    def update(
        self, camp_id: str, fields: dict[str, object], image: CampImage | None = None
    ) -> Camp | None:
        unknown = set(fields) - _UPDATABLE
        if unknown:
            raise ValueError(f"not updatable: {sorted(unknown)}")

        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(CampRow, camp_id)
            if row is None:
                return None
            for name, value in fields.items():
                setattr(row, name, value)
            if image is not None:
                _apply_image(row, image)
            session.flush()
            return _to_domain(row)

    def delete(self, camp_id: str) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(CampRow, camp_id)
            if row is None:
                return False
            session.delete(row)
            return True
