# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import math
from collections.abc import Sequence

from campexplorer.domain.camps.entities import Camp, CampChanges, CampImage
from campexplorer.domain.camps.exceptions import (
    CampFieldsRequiredError,
    CampNotFoundError,
    ImageNotFoundError,
    InvalidPriceError,
)
from campexplorer.domain.camps.repositories import CampRepository
from campexplorer.shared.logging import logger


def parse_price(value: object) -> float | None:
    """Coerce a form or JSON price to float; ``None``/blank stays ``None``."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidPriceError()
    if isinstance(value, int | float):
        price = float(value)
    elif isinstance(value, str):
        if not value.strip():
            return None
        try:
            price = float(value.strip())
        except ValueError as exc:
            raise InvalidPriceError() from exc
    else:
        raise InvalidPriceError()
    if not math.isfinite(price):
        raise InvalidPriceError()
    return price


def _blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class CampService:
    def __init__(self, *, camps: CampRepository) -> None:
        self._camps = camps

    def list_camps(self) -> Sequence[Camp]:
        return self._camps.list_all()

    def get_camp(self, camp_id: str) -> Camp:
        camp = self._camps.get(camp_id)
        if camp is None:
            raise CampNotFoundError(camp_id)
        return camp

    def create_camp(
        self,
        *,
        title: str | None,
        location: str | None,
        description: str | None,
        price: object,
        image: CampImage | None = None,
    ) -> Camp:
        provided = {
            "title": title,
            "location": location,
            "description": description,
            "price": price,
        }
        missing = [name for name, value in provided.items() if _blank(value)]
        if missing:
            raise CampFieldsRequiredError(missing)

        camp = self._camps.add(
            title=str(title),
            location=location,
            description=description,
            price=parse_price(price),
            image=image,
        )
        logger.info(f"camps.create: ok camp_id={camp.id} image={image is not None}")
        return camp

    def update_camp(
        self, camp_id: str, changes: CampChanges, image: CampImage | None = None
    ) -> Camp:
        camp = self._camps.update(camp_id, changes.as_dict(), image)
        if camp is None:
            raise CampNotFoundError(camp_id)
        logger.info(f"camps.update: ok camp_id={camp_id} fields={sorted(changes.as_dict())}")
        return camp

    def delete_camp(self, camp_id: str) -> None:
        if not self._camps.delete(camp_id):
            raise CampNotFoundError(camp_id)
        logger.info(f"camps.delete: ok camp_id={camp_id}")

    def get_camp_image(self, camp_id: str) -> CampImage:
        camp = self._camps.get(camp_id)
        if camp is None or camp.image is None or not camp.image.has_data:
            raise ImageNotFoundError(camp_id)
        return camp.image
