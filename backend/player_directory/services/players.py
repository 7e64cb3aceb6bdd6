from __future__ import annotations

import logging
from typing import Any

from ..errors import AuthorizationError, NotFoundError, StructuralError
from ..models import Player
from ..permissions import Operation, authorize
from ..settings import Settings
from ..store import PlayerStore
from ..validation import parse_player_id, validate_create, validate_update

log = logging.getLogger(__name__)


class PlayerService:
    """
    Entry point for every player operation.

    Fixed order: identifiers are parsed, the actor is resolved, the actor is
    authorized against the requested id, the payload is validated, and only
    then is the store touched. Denials therefore win over bad payloads and
    over unknown ids.
    """

    def __init__(self, store: PlayerStore, settings: Settings) -> None:
        self.store = store
        self.settings = settings

    def resolve_actor(self, editor: str | None) -> Player:
        login = editor or ""
        if not login.strip():
            raise StructuralError("Missing editor", ["MissingEditor"])
        actor = self.store.find_by_login(login)
        if actor is None:
            log.info("Unknown editor %r", login)
            raise AuthorizationError("Unknown editor")
        return actor

    def create(self, editor: str | None, fields: dict[str, Any]) -> Player:
        actor = self.resolve_actor(editor)
        authorize(actor, Operation.CREATE, requested_role=fields.get("role"))
        clean = validate_create(fields)
        p = self.store.create(clean)
        log.info("%s created player id=%s (%s)", actor.login, p.id, p.role)
        return p

    def get_one(self, actor: Player, raw_id: Any) -> Player:
        player_id = parse_player_id(raw_id)
        authorize(actor, Operation.READ_ONE, target_id=player_id)
        return self.store.get_by_id(player_id)

    def get_all(self, actor: Player) -> list[Player]:
        authorize(actor, Operation.READ_ALL)
        return self.store.get_all()

    def update(self, editor: str | None, raw_id: Any, fields: dict[str, Any]) -> Player:
        player_id = parse_player_id(raw_id)
        actor = self.resolve_actor(editor)

        with self.store.write_lock():
            target = self.store.find_by_id(player_id)
            authorize(
                actor,
                Operation.UPDATE,
                target_id=player_id,
                target=target,
                requested_role=fields.get("role"),
                changes_role="role" in fields,
            )
            changes = validate_update(fields)
            if target is None:
                raise NotFoundError(player_id)
            p = self.store.update_by_id(player_id, changes)

        log.info("%s updated player id=%s", actor.login, player_id)
        return p

    def delete(self, editor: str | None, raw_id: Any) -> None:
        player_id = parse_player_id(raw_id)
        actor = self.resolve_actor(editor)

        with self.store.write_lock():
            target = self.store.find_by_id(player_id)
            authorize(
                actor,
                Operation.DELETE,
                target_id=player_id,
                target=target,
                admin_can_delete_admin=self.settings.admin_can_delete_admin,
            )
            if target is None:
                raise NotFoundError(player_id)
            self.store.delete_by_id(player_id)

        log.info("%s deleted player id=%s", actor.login, player_id)
