import secrets
import string
import time
from typing import List

from app.data.models.user import UserModel
from app.exceptions import (
    BadRequestException,
    InvalidUserCredentialsException,
    UsernameAlreadyExistsException,
)
from app.repos.user_repo import UserRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)

_TOKEN_ALPHABET = string.ascii_lowercase + string.digits


def issue_token(user_id: int) -> str:
    """Nieweryfikowalny token: id usera, czas w ms i 9 losowych znakow."""
    suffix = "".join(secrets.choice(_TOKEN_ALPHABET) for _ in range(9))
    return f"token_{user_id}_{int(time.time() * 1000)}_{suffix}"


class UserService:
    def __init__(self, repo: UserRepo):
        self.repo = repo

    def register(self, username: str | None, password: str | None) -> UserModel:
        if not username or not password:
            raise BadRequestException("Username and password required")

        with self.repo.lock:
            if self.repo.get_user_by_username(username):
                raise UsernameAlreadyExistsException()
            user = self.repo.create_user(username, password)

        logger.info(f"Registered user {user.id} ({username})")
        return user

    def login(self, username: str | None, password: str | None) -> dict:
        if not username or not password:
            raise BadRequestException("Username and password required")

        user = self.repo.get_user_by_username(username)
        if not user:
            raise InvalidUserCredentialsException()

        # haslo nie jest weryfikowane
        return {"id": user.id, "token": issue_token(user.id)}

    def list_users(self) -> List[UserModel]:
        return self.repo.list_users()
