from fastapi.testclient import TestClient
from fitflex.main import app
import uuid

client = TestClient(app)
PWD = "StrongPassw0rd!"

def headers():
    e = f"{uuid.uuid4().hex[:10]}@ex.com"
    client.post("/auth/register", json={"email": e, "name": "U", "password": PWD})
    tok = client.post("/auth/login", json={"email": e, "password": PWD}).json()["data"]["accessToken"]
    return {"Authorization": f"Bearer {tok}"}

def default_id(h, name):
    return client.get("/exercises", headers=h, params={"search": name}).json()["data"][0]["id"]

def test_create_list_get_template():
    h = headers()
    ids = [default_id(h, "Squat"), default_id(h, "Bench Press"), default_id(h, "Squat")]
    r = client.post("/templates", headers=h, json={"name": "Full body", "exerciseIds": ids})
    assert r.status_code == 201
    tpl = r.json()["data"]
    # order and duplicates preserved
    assert tpl["exerciseIds"] == ids
    assert tpl["status"] == "active"
    assert tpl["lastUsedAt"] is None

    listed = client.get("/templates", headers=h).json()["data"]
    assert [t["id"] for t in listed] == [tpl["id"]]
    assert client.get(f"/templates/{tpl['id']}", headers=h).json()["data"]["name"] == "Full body"

def test_template_needs_exercises():
    h = headers()
    r = client.post("/templates", headers=h, json={"name": "Empty", "exerciseIds": []})
    assert r.status_code == 400
    r = client.post("/templates", headers=h, json={"name": "Ghost", "exerciseIds": [str(uuid.uuid4())]})
    assert r.status_code == 400
    assert r.json()["error"].startswith("Unknown exercise id")

def test_cannot_use_other_users_exercise():
    h1, h2 = headers(), headers()
    ex = client.post("/exercises", headers=h1, json={"name": "Mine", "type": "strength"}).json()["data"]
    r = client.post("/templates", headers=h2, json={"name": "Theirs", "exerciseIds": [ex["id"]]})
    assert r.status_code == 400

def test_update_template():
    h = headers()
    tpl = client.post("/templates", headers=h,
                      json={"name": "Legs", "exerciseIds": [default_id(h, "Squat")]}).json()["data"]
    new_ids = [default_id(h, "Deadlift"), default_id(h, "Squat")]
    r = client.put(f"/templates/{tpl['id']}", headers=h, json={"name": "Legs v2", "exerciseIds": new_ids})
    assert r.status_code == 200
    assert r.json()["data"]["name"] == "Legs v2"
    assert r.json()["data"]["exerciseIds"] == new_ids

def test_archive_hides_template_but_keeps_it_readable():
    h = headers()
    tpl = client.post("/templates", headers=h,
                      json={"name": "Old plan", "exerciseIds": [default_id(h, "Yoga")]}).json()["data"]
    r = client.delete(f"/templates/{tpl['id']}", headers=h)
    assert r.status_code == 200
    assert r.json() == {"success": True, "data": None, "error": None}
    assert client.get("/templates", headers=h).json()["data"] == []
    r = client.get(f"/templates/{tpl['id']}", headers=h)
    assert r.status_code == 200
    assert r.json()["data"]["status"] == "archived"
    # archived templates are read-only
    r = client.put(f"/templates/{tpl['id']}", headers=h, json={"name": "Again", "exerciseIds": [default_id(h, "Yoga")]})
    assert r.status_code == 404
    assert client.delete(f"/templates/{tpl['id']}", headers=h).status_code == 404

def test_templates_are_private():
    h1, h2 = headers(), headers()
    tpl = client.post("/templates", headers=h1,
                      json={"name": "Private", "exerciseIds": [default_id(h1, "Yoga")]}).json()["data"]
    assert client.get(f"/templates/{tpl['id']}", headers=h2).status_code == 404
