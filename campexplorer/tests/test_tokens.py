from __future__ import annotations

import base64
from datetime import UTC, datetime, timedelta

import jwt
import pytest

from campexplorer.application.services.tokens import JwtTokenIssuer, JwtTokenValidator
from campexplorer.domain.accounts.exceptions import TokenExpiredError, TokenInvalidError
from campexplorer.shared.errors.base import ConfigurationError

SECRET = "unit-test-secret-with-enough-length-0123456789"
OTHER_SECRET = "another-secret-with-enough-length-9876543210"
NOW = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


class FakeClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(NOW)


@pytest.fixture()
def issuer(clock: FakeClock) -> JwtTokenIssuer:
    return JwtTokenIssuer(secret=SECRET, clock=clock)


@pytest.fixture()
def validator(clock: FakeClock) -> JwtTokenValidator:
    return JwtTokenValidator(secret=SECRET, clock=clock)


def _flip_signature_bit(token: str) -> str:
    header, payload, signature = token.split(".")
    raw = bytearray(base64.urlsafe_b64decode(signature + "=" * (-len(signature) % 4)))
    raw[0] ^= 0x01
    tampered = base64.urlsafe_b64encode(bytes(raw)).rstrip(b"=").decode()
    return f"{header}.{payload}.{tampered}"


def test_issue_then_validate_returns_account_id(
    issuer: JwtTokenIssuer, validator: JwtTokenValidator
) -> None:
    token = issuer.issue("abc123")

    assert validator.validate(token) == "abc123"


def test_token_carries_seven_day_expiry(issuer: JwtTokenIssuer) -> None:
    token = issuer.issue("abc123")

    claims = jwt.decode(token, options={"verify_signature": False})
    assert claims["sub"] == "abc123"
    assert claims["iat"] == int(NOW.timestamp())
    assert claims["exp"] == int((NOW + timedelta(days=7)).timestamp())


def test_tokens_issued_in_the_same_instant_differ(issuer: JwtTokenIssuer) -> None:
    assert issuer.issue("abc123") != issuer.issue("abc123")


def test_token_is_valid_just_before_expiry(
    issuer: JwtTokenIssuer, validator: JwtTokenValidator, clock: FakeClock
) -> None:
    token = issuer.issue("abc123")
    clock.advance(timedelta(days=7) - timedelta(seconds=1))

    assert validator.validate(token) == "abc123"


def test_token_expires_at_lifetime(
    issuer: JwtTokenIssuer, validator: JwtTokenValidator, clock: FakeClock
) -> None:
    token = issuer.issue("abc123")
    clock.advance(timedelta(days=7))

    with pytest.raises(TokenExpiredError):
        validator.validate(token)


def test_custom_lifetime_is_honoured(clock: FakeClock, validator: JwtTokenValidator) -> None:
    issuer = JwtTokenIssuer(secret=SECRET, lifetime=timedelta(minutes=5), clock=clock)
    token = issuer.issue("abc123")
    clock.advance(timedelta(minutes=6))

    with pytest.raises(TokenExpiredError):
        validator.validate(token)


def test_single_bit_flip_in_signature_is_rejected(
    issuer: JwtTokenIssuer, validator: JwtTokenValidator
) -> None:
    token = issuer.issue("abc123")

    with pytest.raises(TokenInvalidError):
        validator.validate(_flip_signature_bit(token))


def test_tampered_payload_is_rejected(
    issuer: JwtTokenIssuer, validator: JwtTokenValidator
) -> None:
    header, _, signature = issuer.issue("abc123").split(".")
    forged_payload = (
        base64.urlsafe_b64encode(b'{"sub":"someone-else","iat":0,"exp":9999999999}')
        .rstrip(b"=")
        .decode()
    )

    with pytest.raises(TokenInvalidError):
        validator.validate(f"{header}.{forged_payload}.{signature}")


def test_token_signed_with_other_key_is_rejected(
    validator: JwtTokenValidator, clock: FakeClock
) -> None:
    foreign = JwtTokenIssuer(secret=OTHER_SECRET, clock=clock).issue("abc123")

    with pytest.raises(TokenInvalidError):
        validator.validate(foreign)


def test_unsigned_token_is_rejected(validator: JwtTokenValidator) -> None:
    claims = {
        "sub": "abc123",
        "iat": int(NOW.timestamp()),
        "exp": int((NOW + timedelta(days=1)).timestamp()),
    }
    unsigned = jwt.encode(claims, key=None, algorithm="none")

    with pytest.raises(TokenInvalidError):
        validator.validate(unsigned)


def test_token_missing_expiry_is_rejected(validator: JwtTokenValidator) -> None:
    token = jwt.encode({"sub": "abc123", "iat": int(NOW.timestamp())}, SECRET, algorithm="HS256")

    with pytest.raises(TokenInvalidError):
        validator.validate(token)


@pytest.mark.parametrize("garbage", ["", "abc", "a.b.c", "not.a.jwt.at.all"])
def test_malformed_tokens_are_invalid(validator: JwtTokenValidator, garbage: str) -> None:
    with pytest.raises(TokenInvalidError):
        validator.validate(garbage)


@pytest.mark.parametrize("secret", [None, ""])
def test_issuer_refuses_to_start_without_secret(secret: str | None) -> None:
    with pytest.raises(ConfigurationError):
        JwtTokenIssuer(secret=secret)


@pytest.mark.parametrize("secret", [None, ""])
def test_validator_refuses_to_start_without_secret(secret: str | None) -> None:
    with pytest.raises(ConfigurationError):
        JwtTokenValidator(secret=secret)
