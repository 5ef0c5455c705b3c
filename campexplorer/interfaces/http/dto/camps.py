from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from campexplorer.domain.camps.entities import Camp, CampImage


class CampImageDTO(BaseModel):
    """Image metadata only; the bytes are served by the image endpoint."""

    content_type: str | None = Field(serialization_alias="contentType")
    filename: str | None
    has_data: bool = Field(serialization_alias="hasData")

    @classmethod
    def from_entity(cls, image: CampImage) -> CampImageDTO:
        return cls(
            content_type=image.content_type,
            filename=image.filename,
            has_data=image.has_data,
        )


class CampDTO(BaseModel):
    id: str
    title: str
    location: str | None
    description: str | None
    price: float | None
    image: CampImageDTO | None
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    @classmethod
    def from_entity(cls, camp: Camp) -> CampDTO:
        return cls(
            id=camp.id,
            title=camp.title,
            location=camp.location,
            description=camp.description,
            price=camp.price,
            image=CampImageDTO.from_entity(camp.image) if camp.image else None,
            created_at=camp.created_at,
            updated_at=camp.updated_at,
        )

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class CampFormDTO(BaseModel):
    """Camp fields from a multipart form or a JSON body.

    Everything is optional here; presence rules live in CampService.
    """

    title: str | None = None
    location: str | None = None
    description: str | None = None
    # left untyped so booleans and lists reach parse_price and get rejected there
    price: Any = None

    model_config = ConfigDict(extra="ignore")
