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

def test_nothing_to_export():
    h = headers()
    assert client.get("/export/workouts", headers=h).status_code == 404
    assert client.get("/export/measurements", headers=h).status_code == 404

def test_export_workouts_csv():
    h = headers()
    run = client.get("/exercises", headers=h, params={"search": "Running"}).json()["data"][0]["id"]
    tpl = client.post("/templates", headers=h, json={"name": "Cardio", "exerciseIds": [run]}).json()["data"]
    client.post("/sessions", headers=h, json={
        "templateId": tpl["id"], "date": "2026-10-14T06:00:00Z",
        "exercises": [{"exerciseId": run, "type": "cardio", "cardio": {"time": 30, "level": 5, "distance": 5}}],
    })
    r = client.get("/export/workouts", headers=h)
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/csv")
    assert 'filename="fitflex-workouts-' in r.headers["content-disposition"]
    assert r.text.splitlines() == [
        "Date,TemplateName,ExerciseName,ExerciseType,Details",
        "2026-10-14,Cardio,Running,cardio,\"30min, Level 5, 5km\"",
    ]

def test_export_measurements_csv():
    h = headers()
    client.post("/measurements", headers=h, json={"date": "2026-10-01", "weight": 80, "thigh": 55.5})
    r = client.get("/export/measurements", headers=h)
    assert r.status_code == 200
    assert 'filename="fitflex-measurements-' in r.headers["content-disposition"]
    assert r.text.splitlines()[1] == "2026-10-01,80,,,,,,55.5,"

def test_export_measurements_same_day_newest_first():
    h = headers()
    client.post("/measurements", headers=h, json={"date": "2026-10-01", "weight": 80})
    client.post("/measurements", headers=h, json={"date": "2026-10-01", "weight": 79.5})
    client.post("/measurements", headers=h, json={"date": "2026-09-01", "weight": 82})
    lines = client.get("/export/measurements", headers=h).text.splitlines()
    assert [line.split(",")[:2] for line in lines[1:]] == [
        ["2026-10-01", "79.5"],
        ["2026-10-01", "80"],
        ["2026-09-01", "82"],
    ]
