import json
import logging
from pathlib import Path
from typing import Any

from sqlmodel import Session

from .errors import ConflictError, ValidationError
from .models import Role
from .settings import SeedAccount, Settings
from .store import PlayerStore
from .validation import validate_create

log = logging.getLogger(__name__)


def load_seed_file(path: str) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)
    return json.loads(p.read_text(encoding="utf-8"))


def _account_fields(acc: SeedAccount, role: Role) -> dict[str, Any]:
    return {
        "login": acc.login,
        "password": acc.password,
        "age": acc.age,
        "gender": acc.gender,
        "role": role.value,
        "screenName": acc.screen_name,
    }


def upsert_players(s: Session, players: list[dict[str, Any]]) -> dict[str, int]:
    """
    Insert players whose login is not taken yet. Existing logins are left as
    they are; every new row goes through the same field checks as the API.
    """
    store = PlayerStore(s)
    created = 0
    skipped = 0

    for item in players:
        login = str(item.get("login") or "")
        if login and store.find_by_login(login) is not None:
            skipped += 1
            continue
        try:
            store.create(validate_create(item))
        except ValidationError as e:
            raise ValueError(f"Invalid seed player {login!r}: {', '.join(e.errors)}") from e
        except ConflictError as e:
            raise ValueError(f"Seed player {login!r} clashes on {e.field}") from e
        created += 1

    return {"created": created, "skipped": skipped}


def seed_accounts(s: Session, settings: Settings) -> dict[str, int]:
    """
    Provision the configured supervisor and admins. Idempotent: safe on every start.

    Only one supervisor may exist. If the database already has one, the
    configured supervisor is not inserted, even when its login differs.
    """
    rows = []
    kept_supervisor = 0
    existing = PlayerStore(s).get_by_role(Role.SUPERVISOR.value)
    if existing:
        kept_supervisor = 1
        if existing[0].login != settings.supervisor.login:
            log.warning(
                "Configured supervisor %r ignored: %r (id=%s) already holds the role",
                settings.supervisor.login,
                existing[0].login,
                existing[0].id,
            )
    else:
        rows.append(_account_fields(settings.supervisor, Role.SUPERVISOR))
    rows += [_account_fields(a, Role.ADMIN) for a in settings.admins]

    res = upsert_players(s, rows)
    res["skipped"] += kept_supervisor
    if res["created"]:
        log.info("Seeded accounts: %s", res)
    return res


def seed_from_json(s: Session, data: dict[str, Any]) -> dict[str, Any]:
    """
    Idempotent: safe to run multiple times. Seed files cannot add supervisors.
    """
    players = data.get("players") or []
    if not isinstance(players, list):
        raise ValueError("'players' must be a list")

    for item in players:
        if Role.parse(item.get("role")) == Role.SUPERVISOR:
            raise ValueError("Seed files cannot create supervisors")

    out = {"players": upsert_players(s, players)}
    log.info("Seeded players: %s", out["players"])
    return out
