import itertools
import threading
from typing import List

from app.data.models.user import UserModel


class UserRepo:
    def __init__(self):
        self._users: List[UserModel] = []
        self._ids = itertools.count(1)
        self.lock = threading.RLock()

    def get_user_by_username(self, username: str) -> UserModel | None:
        for user in self._users:
            if user.username == username:
                return user
        return None

    def create_user(self, username: str, password: str) -> UserModel:
        with self.lock:
            user = UserModel(id=next(self._ids), username=username, password=password)
            self._users.append(user)
            return user

    def list_users(self) -> List[UserModel]:
        return list(self._users)
