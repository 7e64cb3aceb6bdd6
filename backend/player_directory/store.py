from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .errors import ConflictError, NotFoundError
from .models import Player

log = logging.getLogger(__name__)

# All writes in this process go through here, so check-then-write is atomic.
# The UNIQUE constraints on the table cover writers in other processes.
_WRITE_LOCK = RLock()

UNIQUE_FIELDS = (("login", "login"), ("screen_name", "screenName"))


class PlayerStore:
    """
    Persistence for player rows on top of one SQLModel session.

    Reads go straight to the session. Mutations take the process-wide write
    lock, re-read what they depend on, and either commit every change or
    roll back and raise.
    """

    def __init__(self, session: Session) -> None:
        self.s = session

    def write_lock(self) -> RLock:
        """Held by callers that must read, decide and write as one unit."""
        return _WRITE_LOCK

    # --- reads ---

    def get_by_id(self, player_id: int) -> Player:
        p = self.s.get(Player, player_id, populate_existing=True)
        if p is None:
            raise NotFoundError(player_id)
        return p

    def find_by_id(self, player_id: int) -> Optional[Player]:
        return self.s.get(Player, player_id, populate_existing=True)

    def find_by_login(self, login: str) -> Optional[Player]:
        return self.s.exec(select(Player).where(Player.login == login)).first()

    def get_all(self) -> list[Player]:
        return list(self.s.exec(select(Player).order_by(Player.id)).all())

    def get_by_role(self, role: str) -> list[Player]:
        return list(self.s.exec(select(Player).where(Player.role == role).order_by(Player.id)).all())

    # --- uniqueness ---

    def _conflicting_field(self, values: dict[str, Any], exclude_id: int | None = None) -> str | None:
        for attr, wire in UNIQUE_FIELDS:
            if attr not in values:
                continue
            q = select(Player.id).where(getattr(Player, attr) == values[attr])
            if exclude_id is not None:
                q = q.where(Player.id != exclude_id)
            if self.s.exec(q).first() is not None:
                return wire
        return None

    def _commit(self, values: dict[str, Any], exclude_id: int | None = None) -> None:
        try:
            self.s.commit()
        except IntegrityError:
            self.s.rollback()
            field = self._conflicting_field(values, exclude_id)
            if field is None:
                raise
            raise ConflictError(field)

    # --- writes ---

    def create(self, fields: dict[str, Any]) -> Player:
        with _WRITE_LOCK:
            field = self._conflicting_field(fields)
            if field is not None:
                raise ConflictError(field)

            p = Player(**fields)
            self.s.add(p)
            self._commit(fields)
            self.s.refresh(p)

        log.info("Created player id=%s login=%s role=%s", p.id, p.login, p.role)
        return p

    def update_by_id(self, player_id: int, changes: dict[str, Any]) -> Player:
        with _WRITE_LOCK:
            p = self.get_by_id(player_id)
            if not changes:
                return p

            field = self._conflicting_field(changes, exclude_id=player_id)
            if field is not None:
                raise ConflictError(field)

            for attr, value in changes.items():
                setattr(p, attr, value)
            self.s.add(p)
            self._commit(changes, exclude_id=player_id)
            self.s.refresh(p)

        log.info("Updated player id=%s fields=%s", player_id, sorted(changes))
        return p

    def delete_by_id(self, player_id: int) -> None:
        with _WRITE_LOCK:
            p = self.get_by_id(player_id)
            self.s.delete(p)
            self.s.commit()

        log.info("Deleted player id=%s", player_id)
