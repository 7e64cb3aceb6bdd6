"""
Role-based access rules for player operations.

Rules are plain predicates over an ``AccessRequest`` and live in ``RULES``,
one per operation. ``authorize`` only looks up the rule and raises on denial,
so the whole policy can be read (and tested) as a table.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .errors import AuthorizationError
from .models import Player, Role

log = logging.getLogger(__name__)


class Operation(str, Enum):
    CREATE = "create"
    READ_ONE = "read_one"
    READ_ALL = "read_all"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class AccessRequest:
    actor_role: Role
    is_self: bool = False
    # None when the target does not exist (or has an unreadable role)
    target_role: Optional[Role] = None
    # create: role of the player to be created; update: role being assigned
    requested_role: Optional[Role] = None
    changes_role: bool = False
    admin_can_delete_admin: bool = False


PRIVILEGED = (Role.SUPERVISOR, Role.ADMIN)


def _privileged(r: AccessRequest) -> bool:
    return r.actor_role in PRIVILEGED


def can_create(r: AccessRequest) -> bool:
    if not _privileged(r):
        return False
    # unparseable role: let validation report it
    if r.requested_role is None:
        return True
    return r.actor_role.outranks(r.requested_role)


def can_read_one(r: AccessRequest) -> bool:
    return r.is_self or _privileged(r)


def can_read_all(r: AccessRequest) -> bool:
    return _privileged(r)


def can_update(r: AccessRequest) -> bool:
    if r.is_self:
        return not r.changes_role
    if not _privileged(r):
        return False
    if r.changes_role:
        if r.target_role == Role.SUPERVISOR or r.requested_role == Role.SUPERVISOR:
            return False
    return True


def can_delete(r: AccessRequest) -> bool:
    if r.target_role == Role.SUPERVISOR:
        return False
    if r.actor_role == Role.SUPERVISOR:
        return not r.is_self
    if r.actor_role == Role.ADMIN:
        if r.is_self or r.target_role in (None, Role.USER):
            return True
        if r.target_role == Role.ADMIN:
            return r.admin_can_delete_admin
        return False
    return False


RULES: dict[Operation, Callable[[AccessRequest], bool]] = {
    Operation.CREATE: can_create,
    Operation.READ_ONE: can_read_one,
    Operation.READ_ALL: can_read_all,
    Operation.UPDATE: can_update,
    Operation.DELETE: can_delete,
}


def is_allowed(op: Operation, request: AccessRequest) -> bool:
    return RULES[op](request)


def authorize(
    actor: Player,
    op: Operation,
    *,
    target_id: int | None = None,
    target: Player | None = None,
    requested_role: str | None = None,
    changes_role: bool = False,
    admin_can_delete_admin: bool = False,
) -> None:
    """
    Raise AuthorizationError unless ``actor`` may perform ``op``.

    Self-ness is decided by the requested id, so the check does not depend on
    whether the target exists.
    """
    actor_role = actor.role_enum
    if actor_role is None:
        log.warning("Player id=%s has unknown role %r, denying %s", actor.id, actor.role, op.value)
        raise AuthorizationError()

    request = AccessRequest(
        actor_role=actor_role,
        is_self=target_id is not None and target_id == actor.id,
        target_role=target.role_enum if target is not None else None,
        requested_role=Role.parse(requested_role),
        changes_role=changes_role,
        admin_can_delete_admin=admin_can_delete_admin,
    )
    if not is_allowed(op, request):
        log.info("Denied %s by %s (id=%s) on target=%s", op.value, actor.login, actor.id, target_id)
        raise AuthorizationError()
