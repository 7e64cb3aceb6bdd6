import logging
from fastapi import APIRouter, Depends, Request
from sqlmodel import Session

from ..auth import create_token, resolve_player_login
from ..db import get_session
from ..errors import AuthenticationError
from ..schemas import LoginBody
from ..store import PlayerStore

log = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login")
def login(request: Request, body: LoginBody, s: Session = Depends(get_session)) -> dict:
    player = resolve_player_login(
        PlayerStore(s),
        login=str(body.login or ""),
        password=str(body.password or ""),
    )
    if player is None:
        raise AuthenticationError("Wrong login/password")

    log.info("Login: %s (id=%s)", player.login, player.id)
    return {
        "token": create_token(request, player),
        "player_id": int(player.id),
        "role": player.role,
    }
