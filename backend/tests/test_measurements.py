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

def test_create_and_list_newest_first():
    h = headers()
    r = client.post("/measurements", headers=h, json={"date": "2026-09-01", "weight": 82.5})
    assert r.status_code == 201
    assert r.json()["data"]["weight"] == 82.5
    assert r.json()["data"]["chest"] is None
    client.post("/measurements", headers=h, json={"date": "2026-10-01", "weight": 81, "upperArm": 35})
    items = client.get("/measurements", headers=h).json()["data"]
    assert [m["date"] for m in items] == ["2026-10-01", "2026-09-01"]
    assert items[0]["upperArm"] == 35

def test_needs_at_least_one_metric():
    r = client.post("/measurements", headers=headers(), json={"date": "2026-10-01"})
    assert r.status_code == 400
    assert r.json()["error"] == "At least one measurement must be provided"

def test_negative_metric_rejected():
    r = client.post("/measurements", headers=headers(), json={"date": "2026-10-01", "waist": -1})
    assert r.status_code == 400

def test_delete_only_own():
    h1, h2 = headers(), headers()
    m = client.post("/measurements", headers=h1, json={"date": "2026-10-01", "calf": 38}).json()["data"]
    assert client.delete(f"/measurements/{m['id']}", headers=h2).status_code == 404
    assert client.delete(f"/measurements/{m['id']}", headers=h1).status_code == 200
    assert client.get("/measurements", headers=h1).json()["data"] == []

def test_same_day_entries_newest_first():
    h = headers()
    first = client.post("/measurements", headers=h, json={"date": "2026-10-01", "weight": 80}).json()["data"]
    second = client.post("/measurements", headers=h, json={"date": "2026-10-01", "weight": 79.5}).json()["data"]
    items = client.get("/measurements", headers=h).json()["data"]
    assert [m["id"] for m in items] == [second["id"], first["id"]]
