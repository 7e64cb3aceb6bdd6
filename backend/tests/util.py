import uuid

from fastapi.testclient import TestClient


def random_player(role: str = "user", **overrides) -> dict:
    suffix = uuid.uuid4().hex[:8]
    fields = {
        "age": 30,
        "gender": "female",
        "login": f"user_{suffix}",
        "password": "pass1234",
        "role": role,
        "screenName": f"screenName_{suffix}",
    }
    fields.update(overrides)
    return fields


def create_player(client: TestClient, editor: str, fields: dict) -> dict:
    r = client.get(f"/player/create/{editor}", params=fields)
    assert r.status_code == 200, r.text
    return r.json()


def login_headers(client: TestClient, login: str, password: str) -> dict:
    r = client.post("/auth/login", json={"login": login, "password": password})
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['token']}"}


def get_player(client: TestClient, headers: dict, player_id):
    return client.post("/player/get", json={"playerId": player_id}, headers=headers)


def update_player(client: TestClient, editor: str, player_id, body: dict):
    return client.patch(f"/player/update/{editor}/{player_id}", json=body)


def delete_player(client: TestClient, editor: str, player_id):
    # httpx's delete() takes no body
    return client.request("DELETE", f"/player/delete/{editor}", json={"playerId": player_id})


def all_players(client: TestClient, headers: dict) -> list[dict]:
    r = client.get("/player/get/all", headers=headers)
    assert r.status_code == 200, r.text
    return r.json()["players"]
