# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.auth_service import AuthService
from .services.camp_service import CampService, parse_price
from .services.password_hashing import WerkzeugPasswordHasher
from .services.tokens import JwtTokenIssuer, JwtTokenValidator

__all__ = [
    "AuthService",
    "CampService",
    "JwtTokenIssuer",
    "JwtTokenValidator",
    "WerkzeugPasswordHasher",
    "parse_price",
]
