# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Camp, CampChanges, CampImage
from .exceptions import (
    CampFieldsRequiredError,
    CampNotFoundError,
    ImageNotFoundError,
    InvalidPriceError,
)
from .repositories import CampRepository

__all__ = [
    "Camp",
    "CampChanges",
    "CampFieldsRequiredError",
    "CampImage",
    "CampNotFoundError",
    "CampRepository",
    "ImageNotFoundError",
    "InvalidPriceError",
]
