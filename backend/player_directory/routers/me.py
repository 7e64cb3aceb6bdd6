from fastapi import APIRouter, Depends

from ..auth import decode_token, require_caller
from ..models import Player

router = APIRouter(tags=["auth"])


@router.get("/me")
def me(caller: Player = Depends(require_caller), claims: dict | None = Depends(decode_token)) -> dict:
    # role comes from the store; the token's copy may be stale after an update
    return {
        "player_id": int(caller.id),
        "login": caller.login,
        "role": caller.role,
        "exp": (claims or {}).get("exp"),
    }
