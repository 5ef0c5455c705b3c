from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from campexplorer.domain.accounts.entities import AuthResult


class CredentialsRequestDTO(BaseModel):
    # Presence is checked by AuthService so an absent field is a 400, not a 422.
    # No length or format policy is applied.
    username: str | None = None
    password: str | None = None

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=False)


class AuthSuccessDTO(BaseModel):
    user: str
    token: str

    @classmethod
    def from_result(cls, result: AuthResult) -> AuthSuccessDTO:
        return cls(user=result.username, token=result.token)
