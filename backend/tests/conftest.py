import dataclasses

import pytest
from fastapi.testclient import TestClient

from player_directory.main import create_app
from player_directory.db import configure_db, init_db, session_scope
from player_directory.settings import SeedAccount, Settings

from tests.util import create_player, login_headers, random_player

SUPERVISOR = SeedAccount(login="supervisor", password="supervisor1", screen_name="Supervisor")
ADMIN = SeedAccount(login="admin", password="admin1234", screen_name="Admin")


@pytest.fixture()
def settings(tmp_path):
    return Settings(
        db_url=f"sqlite:///{tmp_path / 'test.db'}",
        jwt_secret="test-jwt-secret",
        log_level="DEBUG",
        supervisor=SUPERVISOR,
        admins=(ADMIN,),
    )


@pytest.fixture()
def make_client(settings):
    """Build a client with some settings overridden (e.g. delete policy)."""
    clients = []

    def _make(**overrides) -> TestClient:
        app = create_app(dataclasses.replace(settings, **overrides))
        c = TestClient(app)
        c.__enter__()
        clients.append(c)
        return c

    yield _make

    for c in clients:
        c.__exit__(None, None, None)


@pytest.fixture()
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def session(settings):
    """Bare DB session for store-level tests (no app)."""
    configure_db(settings.db_url)
    init_db()
    with session_scope() as s:
        yield s


@pytest.fixture()
def supervisor_headers(client):
    return login_headers(client, SUPERVISOR.login, SUPERVISOR.password)


@pytest.fixture()
def admin_headers(client):
    return login_headers(client, ADMIN.login, ADMIN.password)


@pytest.fixture()
def user(client):
    """A freshly created user: (record, bearer headers)."""
    fields = random_player("user")
    rec = create_player(client, SUPERVISOR.login, fields)
    return rec, login_headers(client, fields["login"], fields["password"])
