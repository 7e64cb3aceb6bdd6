import pytest

from tests.conftest import ADMIN, SUPERVISOR
from tests.util import all_players, create_player, get_player, random_player


def test_user_reads_self_but_not_others(client, user):
    rec, headers = user
    other = create_player(client, SUPERVISOR.login, random_player())

    r = get_player(client, headers, rec["id"])
    assert r.status_code == 200, r.text
    assert r.json() == rec

    r = get_player(client, headers, other["id"])
    assert r.status_code == 403


def test_privileged_read_any(client, admin_headers, supervisor_headers, user):
    rec, _ = user
    for headers in (admin_headers, supervisor_headers):
        r = get_player(client, headers, rec["id"])
        assert r.status_code == 200, r.text
        assert r.json()["login"] == rec["login"]


def test_read_not_found_and_malformed(client, admin_headers):
    assert get_player(client, admin_headers, 999999).status_code == 404
    assert get_player(client, admin_headers, "not-a-number").status_code == 400
    assert get_player(client, admin_headers, None).status_code == 400


@pytest.mark.parametrize("player_id", [10**30, str(2**63), -(10**30)])
def test_read_out_of_range_id_is_malformed(client, admin_headers, player_id):
    r = get_player(client, admin_headers, player_id)
    assert r.status_code == 400, r.text
    assert r.json()["errors"] == ["MalformedId"]


def test_user_denial_wins_over_not_found(client, user):
    _, headers = user
    assert get_player(client, headers, 999999).status_code == 403


def test_read_requires_token(client, user):
    rec, _ = user
    r = client.post("/player/get", json={"playerId": rec["id"]})
    assert r.status_code == 401
    assert r.json()["errors"] == ["Unauthenticated"]

    r = client.post("/player/get", json={"playerId": rec["id"]}, headers={"Authorization": "Bearer junk"})
    assert r.status_code == 401
    assert r.json()["errors"] == ["Unauthenticated"]


def test_read_all_lists_everyone_without_login_or_password(client, admin_headers):
    created = create_player(client, SUPERVISOR.login, random_player())

    players = all_players(client, admin_headers)
    by_id = {p["id"]: p for p in players}
    assert created["id"] in by_id
    assert set(by_id[created["id"]]) == {"age", "gender", "id", "role", "screenName"}

    # seeded accounts are always present
    names = {p["screenName"] for p in players}
    assert {SUPERVISOR.screen_name, ADMIN.screen_name} <= names
    roles = [p["role"] for p in players]
    assert roles.count("supervisor") == 1

    for p in players:
        assert 17 <= p["age"] <= 59


def test_user_cannot_read_all(client, user):
    _, headers = user
    r = client.get("/player/get/all", headers=headers)
    assert r.status_code == 403


def test_supervisor_can_read_all(client, supervisor_headers):
    r = client.get("/player/get/all", headers=supervisor_headers)
    assert r.status_code == 200, r.text
