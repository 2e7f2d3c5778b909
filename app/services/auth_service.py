import logging
from datetime import datetime, timedelta
from typing import NamedTuple, Optional

from errors import InvalidCredentials, UserNotFound
from models.user_model import User
from services.user_store import UserStore
from utils.auth import ACCESS_TOKEN_TTL, create_access_token, hash_password, read_access_token, verify_password

logger = logging.getLogger(__name__)


class LoginResult(NamedTuple):
    token: str
    user_id: int


class AuthService:
    """Signup, login and bearer token validation on top of the credential store."""

    def __init__(self, users: UserStore, secret_key: str, algorithm: str = "HS256",
                 token_ttl: timedelta = ACCESS_TOKEN_TTL):
        self.users = users
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.token_ttl = token_ttl

    def signup(self, full_name: Optional[str], email: Optional[str], password: Optional[str]) -> User:
        # no field validation: absent values are stored as absent
        user = self.users.create(full_name=full_name, email=email, password_hash=hash_password(password))
        logger.info("Registered user id=%s", user.id)
        return user

    def login(self, email: Optional[str], password: Optional[str], now: Optional[datetime] = None) -> LoginResult:
        user = self.users.find_by_email(email)
        if user is None:
            logger.info("Login failed: unknown email")
            raise UserNotFound()

        if not verify_password(password, user.password_hash):
            logger.info("Login failed: wrong password for user id=%s", user.id)
            raise InvalidCredentials()

        token = create_access_token(user.id, self.secret_key, self.algorithm,
                                    expires_delta=self.token_ttl, now=now)
        logger.info("User id=%s logged in", user.id)
        return LoginResult(token=token, user_id=user.id)

    def validate(self, token: str, now: Optional[datetime] = None) -> Optional[int]:
        """User id bound to ``token``, or None when the token is not valid."""
        subject = read_access_token(token, self.secret_key, self.algorithm, now=now)
        if subject is None:
            return None
        try:
            return int(subject)
        except ValueError:
            return None

    def current_user(self, token: str) -> Optional[User]:
        user_id = self.validate(token)
        if user_id is None:
            return None
        return self.users.find_by_id(user_id)
