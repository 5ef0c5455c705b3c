from __future__ import annotations

import uuid
from collections.abc import Sequence
from dataclasses import replace
from datetime import UTC, datetime

import pytest

from campexplorer.application.services.camp_service import CampService, parse_price
from campexplorer.domain.camps.entities import Camp, CampChanges, CampImage
from campexplorer.domain.camps.exceptions import (
    CampFieldsRequiredError,
    CampNotFoundError,
    ImageNotFoundError,
    InvalidPriceError,
)
from campexplorer.domain.camps.repositories import CampRepository


class InMemoryCampRepository(CampRepository):
    def __init__(self) -> None:
        self._camps: dict[str, Camp] = {}

    def list_all(self) -> Sequence[Camp]:
        return list(self._camps.values())

    def get(self, camp_id: str) -> Camp | None:
        return self._camps.get(camp_id)

    def add(self, *, title, location, description, price, image) -> Camp:
        now = datetime.now(UTC)
        camp = Camp(
            id=uuid.uuid4().hex,
            title=title,
            location=location,
            description=description,
            price=price,
            image=image,
            created_at=now,
            updated_at=now,
        )
        self._camps[camp.id] = camp
        return camp

    def update(self, camp_id, fields, image=None) -> Camp | None:
        camp = self._camps.get(camp_id)
        if camp is None:
            return None
        camp = replace(camp, **fields)
        if image is not None:
            camp = replace(camp, image=image)
        self._camps[camp_id] = camp
        return camp

    def delete(self, camp_id: str) -> bool:
        return self._camps.pop(camp_id, None) is not None


@pytest.fixture()
def service() -> CampService:
    return CampService(camps=InMemoryCampRepository())


def _create(service: CampService, **overrides) -> Camp:
    fields = {
        "title": "Pine Lake",
        "location": "Oregon",
        "description": "Quiet lakeside sites",
        "price": "25",
    }
    fields.update(overrides)
    return service.create_camp(**fields)


def test_create_camp_parses_price(service: CampService) -> None:
    camp = _create(service)

    assert camp.title == "Pine Lake"
    assert camp.price == 25.0
    assert camp.image is None


def test_create_camp_with_image(service: CampService) -> None:
    image = CampImage(data=b"\x89PNG", content_type="image/png", filename="lake.png")

    camp = _create(service, image=image)

    assert camp.image == image
    assert service.get_camp_image(camp.id).data == b"\x89PNG"


@pytest.mark.parametrize("missing", ["title", "location", "description", "price"])
def test_create_camp_requires_all_fields(service: CampService, missing: str) -> None:
    with pytest.raises(CampFieldsRequiredError) as excinfo:
        _create(service, **{missing: ""})

    assert excinfo.value.context == {"missing": [missing]}
    assert service.list_camps() == []


def test_create_camp_rejects_non_numeric_price(service: CampService) -> None:
    with pytest.raises(InvalidPriceError):
        _create(service, price="cheap")


def test_get_missing_camp_raises(service: CampService) -> None:
    with pytest.raises(CampNotFoundError):
        service.get_camp("nope")


def test_update_camp_changes_only_given_fields(service: CampService) -> None:
    camp = _create(service)

    updated = service.update_camp(camp.id, CampChanges(price=30.0))

    assert updated.price == 30.0
    assert updated.title == camp.title
    assert updated.location == camp.location


def test_update_missing_camp_raises(service: CampService) -> None:
    with pytest.raises(CampNotFoundError):
        service.update_camp("nope", CampChanges(title="x"))


def test_delete_camp(service: CampService) -> None:
    camp = _create(service)

    service.delete_camp(camp.id)

    assert service.list_camps() == []
    with pytest.raises(CampNotFoundError):
        service.delete_camp(camp.id)


def test_image_missing_when_camp_has_none(service: CampService) -> None:
    camp = _create(service)

    with pytest.raises(ImageNotFoundError):
        service.get_camp_image(camp.id)
    with pytest.raises(ImageNotFoundError):
        service.get_camp_image("nope")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, None), ("", None), ("  ", None), ("12.5", 12.5), (" 7 ", 7.0), (3, 3.0), (0, 0.0)],
)
def test_parse_price(raw: object, expected: float | None) -> None:
    assert parse_price(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "nan", "inf", True, [1]])
def test_parse_price_rejects(raw: object) -> None:
    with pytest.raises(InvalidPriceError):
        parse_price(raw)
