from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from utils.auth import create_access_token, hash_password, pwd_context, read_access_token, verify_password

SECRET = "test-secret"


def test_hash_and_verify():
    digest = hash_password("secret1")

    assert digest != "secret1"
    assert verify_password("secret1", digest)


def test_hash_is_salted():
    assert hash_password("secret1") != hash_password("secret1")


def test_verify_rejects_other_password():
    assert not verify_password("secret2", hash_password("secret1"))


@pytest.mark.parametrize("digest", ["", None, "not-a-hash", "$2b$04$tooshort"])
def test_verify_malformed_digest_returns_false(digest):
    assert verify_password("secret1", digest) is False


def test_missing_password_is_hashed_as_empty():
    digest = hash_password(None)

    assert verify_password("", digest)
    assert verify_password(None, digest)


def test_token_expires_after_one_hour():
    issued_at = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
    token = create_access_token(42, SECRET, now=issued_at)

    assert read_access_token(token, SECRET, now=issued_at + timedelta(minutes=59)) == "42"
    assert read_access_token(token, SECRET, now=issued_at + timedelta(minutes=61)) is None


def test_token_signed_with_other_secret_is_invalid():
    token = create_access_token(42, "other-secret")

    assert read_access_token(token, SECRET) is None


def test_tampered_token_is_invalid():
    token = create_access_token(42, SECRET)
    header, _, signature = token.split(".")
    forged_payload = jwt.encode({"sub": "1", "exp": 4102444800}, "x").split(".")[1]

    assert read_access_token(f"{header}.{forged_payload}.{signature}", SECRET) is None


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c", None])
def test_malformed_token_is_invalid(token):
    assert read_access_token(token, SECRET) is None


@pytest.mark.parametrize("password", ["a\x00b", "\ud800", "p" * 100, "ä" * 40])
def test_unusual_passwords_hash_and_verify(password):
    digest = hash_password(password)

    assert verify_password(password, digest)
    assert not verify_password(password + "x", digest)


def test_long_passwords_are_not_truncated():
    digest = hash_password("a" * 72 + "first")

    assert not verify_password("a" * 72 + "second", digest)


def test_nul_byte_is_significant():
    assert not verify_password("a", hash_password("a\x00b"))


def test_plain_bcrypt_digest_still_verifies():
    legacy = pwd_context.handler("bcrypt").using(rounds=4).hash("secret1")

    assert verify_password("secret1", legacy)
    assert not verify_password("wrong", legacy)
