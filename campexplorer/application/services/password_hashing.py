"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from campexplorer.domain.accounts.repositories import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted one-way hashing via werkzeug.

    ``method`` is a werkzeug method string and carries the work factor, e.g.
    ``scrypt:32768:8:1`` or ``pbkdf2:sha256:600000``. Each call draws a fresh
    salt, so hashing the same password twice yields two different strings.
    """

    def __init__(self, method: str = "scrypt:32768:8:1", salt_length: int = 16) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        return str(
            generate_password_hash(password, method=self._method, salt_length=self._salt_length)
        )

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed:
            return False
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError):
            # unknown method or malformed parameters in the stored string
            return False
