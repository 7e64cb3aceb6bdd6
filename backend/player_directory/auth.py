import time
import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from .config import JWT_ALG, TOKEN_TTL_SECONDS
from .db import get_session
from .errors import AuthenticationError, AuthorizationError
from .models import Player
from .store import PlayerStore

bearer = HTTPBearer(auto_error=False)


def create_token(request: Request, player: Player) -> str:
    s = request.app.state.settings
    now = int(time.time())
    payload = {
        "sub": str(player.id),
        "login": player.login,
        "role": player.role,
        "iat": now,
        "exp": now + TOKEN_TTL_SECONDS,
    }
    return jwt.encode(payload, s.jwt_secret, algorithm=JWT_ALG)


def resolve_player_login(store: PlayerStore, *, login: str, password: str) -> Player | None:
    if not login or not password:
        return None
    p = store.find_by_login(login)
    if p is None or p.password != password:
        return None
    return p


def decode_token(
    request: Request,
    creds: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> dict | None:
    if creds is None:
        return None
    s = request.app.state.settings
    try:
        return jwt.decode(creds.credentials, s.jwt_secret, algorithms=[JWT_ALG])
    except jwt.PyJWTError:
        return None


def require_caller(
    claims: dict | None = Depends(decode_token),
    s: Session = Depends(get_session),
) -> Player:
    """
    The calling player for read endpoints, taken from the bearer token.
    Role is re-read from the store, never trusted from the token.
    """
    if claims is None:
        raise AuthenticationError()
    try:
        player_id = int(claims.get("sub"))
    except (TypeError, ValueError):
        raise AuthenticationError("Invalid token")

    p = PlayerStore(s).find_by_id(player_id)
    if p is None:
        raise AuthorizationError("Caller no longer exists")
    return p
