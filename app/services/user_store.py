from typing import Optional

from sqlalchemy.orm import Session

from database import Collection
from models.user_model import User


class UserStore:
    """Credential store: persists users with their hashed password."""

    def __init__(self, session: Session):
        self.users = Collection(session, User)

    def create(self, full_name: Optional[str], email: Optional[str], password_hash: str) -> User:
        return self.users.create(full_name=full_name, email=email, password_hash=password_hash)

    def find_by_email(self, email: Optional[str]) -> Optional[User]:
        # emails are not unique; the earliest signup wins
        if email is None:
            return self.users.find_one(User.email.is_(None), order_by=(User.id,))
        return self.users.find_one(User.email == email, order_by=(User.id,))

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.users.find_one(User.id == user_id)
