from tests.conftest import SUPERVISOR
from tests.util import create_player, delete_player, random_player


def test_login_and_me(client):
    # bad password
    r = client.post("/auth/login", json={"login": SUPERVISOR.login, "password": "wrong"})
    assert r.status_code == 401
    assert r.json()["errors"] == ["Unauthenticated"]

    r = client.post("/auth/login", json={"login": SUPERVISOR.login, "password": SUPERVISOR.password})
    assert r.status_code == 200, r.text
    assert r.json()["role"] == "supervisor"
    token = r.json()["token"]

    # /me without token
    assert client.get("/me").status_code == 401

    r = client.get("/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200
    assert r.json()["login"] == SUPERVISOR.login
    assert r.json()["role"] == "supervisor"
    assert "exp" in r.json()


def test_token_of_deleted_player_is_forbidden(client):
    fields = random_player()
    rec = create_player(client, SUPERVISOR.login, fields)
    r = client.post("/auth/login", json={"login": fields["login"], "password": fields["password"]})
    headers = {"Authorization": f"Bearer {r.json()['token']}"}

    assert delete_player(client, SUPERVISOR.login, rec["id"]).status_code == 204
    r = client.post("/player/get", json={"playerId": rec["id"]}, headers=headers)
    assert r.status_code == 403
    assert r.json()["errors"] == ["Forbidden"]


def test_role_is_read_from_store_not_token(client):
    fields = random_player()
    rec = create_player(client, SUPERVISOR.login, fields)
    r = client.post("/auth/login", json={"login": fields["login"], "password": fields["password"]})
    headers = {"Authorization": f"Bearer {r.json()['token']}"}
    assert client.get("/player/get/all", headers=headers).status_code == 403

    r = client.patch(f"/player/update/{SUPERVISOR.login}/{rec['id']}", json={"role": "admin"})
    assert r.status_code == 200, r.text
    assert client.get("/player/get/all", headers=headers).status_code == 200
