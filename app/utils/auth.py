from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt

from config import Settings

_rounds = Settings().bcrypt_rounds

# bcrypt_sha256 pre-hashes the secret, so NUL bytes and passwords over 72 bytes
# are accepted; plain bcrypt stays for verifying older hashes
pwd_context = CryptContext(
    schemes=["bcrypt_sha256", "bcrypt"],
    deprecated=["bcrypt"],
    bcrypt_sha256__rounds=_rounds,
    bcrypt__rounds=_rounds,
)

ACCESS_TOKEN_TTL = timedelta(hours=1)


def _secret_bytes(password: Optional[str]) -> bytes:
    # missing passwords are hashed as the empty string; lone surrogates are kept as-is
    return (password or "").encode("utf-8", "surrogatepass")


def hash_password(password: Optional[str]) -> str:
    return pwd_context.hash(_secret_bytes(password))


def verify_password(plain_password: Optional[str], hashed_password: Optional[str]) -> bool:
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(_secret_bytes(plain_password), hashed_password)
    except (ValueError, TypeError):
        return False


def create_access_token(user_id, secret_key: str, algorithm: str = "HS256",
                        expires_delta: timedelta = ACCESS_TOKEN_TTL, now: Optional[datetime] = None) -> str:
    issued_at = now or datetime.now(timezone.utc)
    expire = issued_at + expires_delta
    to_encode = {
        "sub": str(user_id),
        "iat": int(issued_at.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(to_encode, secret_key, algorithm=algorithm)


def read_access_token(token: str, secret_key: str, algorithm: str = "HS256",
                      now: Optional[datetime] = None) -> Optional[str]:
    """Return the user id a token was issued for, or None if it is expired, tampered or malformed.

    Expiry is checked here against ``now`` rather than inside jose so callers can
    evaluate a token at a chosen instant.
    """
    try:
        payload = jwt.decode(token, secret_key, algorithms=[algorithm], options={"verify_exp": False})
    except (JWTError, AttributeError):
        return None

    user_id = payload.get("sub")
    expires_at = payload.get("exp")
    if user_id is None or not isinstance(expires_at, (int, float)):
        return None

    current = now or datetime.now(timezone.utc)
    if current.timestamp() >= expires_at:
        return None
    return user_id
