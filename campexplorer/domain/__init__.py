# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .accounts import Account, AuthResult
from .camps import Camp, CampChanges, CampImage

__all__ = [
    "Account",
    "AuthResult",
    "Camp",
    "CampChanges",
    "CampImage",
]
