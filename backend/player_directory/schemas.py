from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .models import Player


class LoginBody(BaseModel):
    login: str = ""
    password: str = ""


class PlayerIdBody(BaseModel):
    # any JSON type; parse_player_id decides what is well formed
    model_config = ConfigDict(extra="ignore")

    playerId: Any = None


class PlayerUpdateBody(BaseModel):
    """
    Partial update. A key that is absent from the JSON is "leave unchanged";
    a key that is present (even as null) is validated. Unknown keys such as
    ``id`` are dropped.
    """

    model_config = ConfigDict(extra="ignore")

    age: Any = None
    gender: Any = None
    login: Any = None
    password: Any = None
    role: Any = None
    screen_name: Any = Field(default=None, alias="screenName")

    def supplied(self) -> dict[str, Any]:
        return self.model_dump(include=self.model_fields_set, by_alias=True)


class PlayerDetails(BaseModel):
    id: int
    age: int
    gender: str
    login: str
    password: str
    role: str
    screenName: str

    @classmethod
    def from_player(cls, p: Player) -> "PlayerDetails":
        return cls(
            id=int(p.id),
            age=p.age,
            gender=p.gender,
            login=p.login,
            password=p.password,
            role=p.role,
            screenName=p.screen_name,
        )


class PlayerItem(BaseModel):
    age: int
    gender: str
    id: int
    role: str
    screenName: str

    @classmethod
    def from_player(cls, p: Player) -> "PlayerItem":
        return cls(age=p.age, gender=p.gender, id=int(p.id), role=p.role, screenName=p.screen_name)


class PlayerList(BaseModel):
    players: list[PlayerItem] = Field(default_factory=list)
