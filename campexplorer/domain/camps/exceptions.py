# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from campexplorer.shared.errors.base import DomainError


class CampNotFoundError(DomainError):
    code = "camp_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Camp not found"

    def __init__(self, camp_id: str) -> None:
        super().__init__(context={"camp_id": camp_id})


class ImageNotFoundError(DomainError):
    code = "image_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Image not found"

    def __init__(self, camp_id: str) -> None:
        super().__init__(context={"camp_id": camp_id})


class CampFieldsRequiredError(DomainError):
    code = "camp_fields_required"
    status = HTTPStatus.BAD_REQUEST
    message = "All fields (title, location, description, price) are required"

    def __init__(self, missing: list[str]) -> None:
        super().__init__(context={"missing": missing})


class InvalidPriceError(DomainError):
    code = "price_invalid"
    status = HTTPStatus.BAD_REQUEST
    message = "Price must be a number"
