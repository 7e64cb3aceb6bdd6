from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel
from sqlalchemy import UniqueConstraint


class Role(str, Enum):
    SUPERVISOR = "supervisor"
    ADMIN = "admin"
    USER = "user"

    @property
    def rank(self) -> int:
        return ROLE_ORDER[self]

    def outranks(self, other: "Role") -> bool:
        return self.rank > other.rank

    @classmethod
    def parse(cls, value) -> Optional["Role"]:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


ROLE_ORDER = {Role.USER: 1, Role.ADMIN: 2, Role.SUPERVISOR: 3}


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"

    @classmethod
    def parse(cls, value) -> Optional["Gender"]:
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class Player(SQLModel, table=True):
    # autoincrement keeps ids of deleted rows from being handed out again
    __table_args__ = (
        UniqueConstraint("login", name="uq_player_login"),
        UniqueConstraint("screen_name", name="uq_player_screen_name"),
        {"sqlite_autoincrement": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    login: str = Field(index=True)
    password: str
    age: int
    gender: str  # "male" | "female"; legacy rows may hold anything
    role: str = Field(default=Role.USER.value, index=True)
    screen_name: str = Field(index=True)

    @property
    def role_enum(self) -> Optional[Role]:
        return Role.parse(self.role)
