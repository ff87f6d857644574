from dataclasses import dataclass


@dataclass
class UserModel:
    id: int
    username: str
    password: str
