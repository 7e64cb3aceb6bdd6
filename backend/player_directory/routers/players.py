import logging
from fastapi import APIRouter, Depends, Query, Request, Response
from sqlmodel import Session

from ..auth import require_caller
from ..db import get_session
from ..models import Player
from ..schemas import PlayerDetails, PlayerIdBody, PlayerItem, PlayerList, PlayerUpdateBody
from ..services.players import PlayerService
from ..store import PlayerStore

log = logging.getLogger(__name__)
router = APIRouter(prefix="/player", tags=["players"])


def get_service(request: Request, s: Session = Depends(get_session)) -> PlayerService:
    return PlayerService(PlayerStore(s), request.app.state.settings)


@router.get("/create/{editor}", response_model=PlayerDetails)
def create_player(
    editor: str,
    age: str | None = Query(default=None),
    gender: str | None = Query(default=None),
    login: str | None = Query(default=None),
    password: str | None = Query(default=None),
    role: str | None = Query(default=None),
    screen_name: str | None = Query(default=None, alias="screenName"),
    svc: PlayerService = Depends(get_service),
):
    """
    Player fields travel as query parameters. Every field is required;
    unknown parameters are ignored.
    """
    supplied = {
        "age": age,
        "gender": gender,
        "login": login,
        "password": password,
        "role": role,
        "screenName": screen_name,
    }
    fields = {k: v for k, v in supplied.items() if v is not None}
    p = svc.create(editor, fields)
    return PlayerDetails.from_player(p)


@router.post("/get", response_model=PlayerDetails)
def get_player(
    body: PlayerIdBody,
    caller: Player = Depends(require_caller),
    svc: PlayerService = Depends(get_service),
):
    p = svc.get_one(caller, body.playerId)
    return PlayerDetails.from_player(p)


@router.get("/get/all", response_model=PlayerList)
def list_players(
    caller: Player = Depends(require_caller),
    svc: PlayerService = Depends(get_service),
):
    # list items carry no login or password
    return PlayerList(players=[PlayerItem.from_player(p) for p in svc.get_all(caller)])


@router.patch("/update/{editor}/{player_id}", response_model=PlayerDetails)
def update_player(
    editor: str,
    player_id: str,
    body: PlayerUpdateBody,
    svc: PlayerService = Depends(get_service),
):
    """
    Partial update: only keys present in the body are applied.
    ``login`` may not appear at all; ``role`` may not appear on self-updates.
    """
    p = svc.update(editor, player_id, body.supplied())
    return PlayerDetails.from_player(p)


@router.delete("/delete/{editor}", status_code=204)
def delete_player(
    editor: str,
    body: PlayerIdBody,
    svc: PlayerService = Depends(get_service),
):
    svc.delete(editor, body.playerId)
    return Response(status_code=204)
