from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import json


@dataclass(frozen=True)
class SeedAccount:
    login: str
    password: str
    screen_name: str
    age: int = 30
    gender: str = "male"


@dataclass(frozen=True)
class Settings:
    db_url: str
    jwt_secret: str
    log_level: str
    supervisor: SeedAccount
    admins: tuple[SeedAccount, ...] = ()
    # Whether an admin may delete a *different* admin. Self-delete is always allowed.
    admin_can_delete_admin: bool = False


DEFAULT_SUPERVISOR = SeedAccount(login="supervisor", password="supervisor1", screen_name="Supervisor")
DEFAULT_ADMIN = SeedAccount(login="admin", password="admin1234", screen_name="Admin")


def _account(raw: dict) -> SeedAccount:
    return SeedAccount(
        login=str(raw["login"]),
        password=str(raw["password"]),
        screen_name=str(raw.get("screen_name") or raw.get("screenName") or raw["login"]),
        age=int(raw.get("age", 30)),
        gender=str(raw.get("gender", "male")),
    )


def _as_bool(v) -> bool:
    if isinstance(v, bool):
        return v
    return str(v).strip().lower() in ("1", "true", "yes", "on")


def load_settings(
    *,
    secrets_path: str,
    db_url: str | None = None,
    jwt_secret: str | None = None,
    log_level: str | None = None,
    admin_can_delete_admin: bool | None = None,
) -> Settings:
    secrets: dict = {}
    p = Path(secrets_path)
    if p.exists():
        secrets = json.loads(p.read_text(encoding="utf-8"))

    def pick(key: str, cli_val: str | None, default: str) -> str:
        return cli_val or secrets.get(key) or default

    supervisor = _account(secrets["supervisor"]) if secrets.get("supervisor") else DEFAULT_SUPERVISOR
    admins_raw = secrets.get("admins")
    admins = tuple(_account(a) for a in admins_raw) if admins_raw else (DEFAULT_ADMIN,)

    if admin_can_delete_admin is None:
        admin_can_delete_admin = _as_bool(secrets.get("admin_can_delete_admin", False))

    return Settings(
        db_url=pick("db_url", db_url, "sqlite:///./players.db"),
        jwt_secret=pick("jwt_secret", jwt_secret, "dev-change-me"),
        log_level=pick("log_level", log_level, "INFO"),
        supervisor=supervisor,
        admins=admins,
        admin_can_delete_admin=admin_can_delete_admin,
    )
