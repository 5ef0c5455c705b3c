from __future__ import annotations

import pytest

from campexplorer.shared.logging.sensitive_filter import sanitize_message, sanitize_record

TOKEN = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJzdWIiOiJhYmMxMjMifQ"
    ".c2lnbmF0dXJlLWJ5dGVzLWhlcmU"
)


@pytest.mark.parametrize(
    ("raw", "leaked"),
    [
        (f"Authorization: Bearer {TOKEN}", TOKEN),
        (f"issued {TOKEN} for alice", TOKEN),
        ("password=secret123 user=alice", "secret123"),
        ('{"password": "hunter2"}', "hunter2"),
        ("JWT_SECRET=super-long-signing-key", "super-long-signing-key"),
        ("stored pbkdf2:sha256:1000$abcdSALT$0123456789abcdef", "0123456789abcdef"),
        ("postgresql+psycopg://camp:topsecret@db:5432/camps", "topsecret"),
    ],
)
def test_sensitive_values_are_redacted(raw: str, leaked: str) -> None:
    assert leaked not in sanitize_message(raw)


def test_plain_messages_pass_through() -> None:
    message = "camps.create: ok camp_id=abc123 image=True"

    assert sanitize_message(message) == message


def test_record_patcher_rewrites_message() -> None:
    record = {"message": f"token={TOKEN}"}

    sanitize_record(record)

    assert TOKEN not in record["message"]
