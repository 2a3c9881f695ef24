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

def make_template(h, *names, title="Mixed"):
    ids = [default_id(h, n) for n in names]
    return client.post("/templates", headers=h, json={"name": title, "exerciseIds": ids}).json()["data"]

def test_create_session_normalizes_records():
    h = headers()
    tpl = make_template(h, "Bench Press", "Running", "Swimming", "Yoga")
    bench, running, swimming, yoga = tpl["exerciseIds"]
    r = client.post("/sessions", headers=h, json={
        "templateId": tpl["id"],
        "date": "2026-10-14T18:30:00Z",
        "exercises": [
            {"exerciseId": bench, "type": "strength",
             "strength": {"sets": [{"weight": 80, "reps": 5}, {"weight": None, "reps": None}, {"reps": 8}]}},
            {"exerciseId": running, "type": "cardio", "cardio": {"time": 30}},
            {"exerciseId": swimming, "type": "endurance", "endurance": {"time": 30, "distance": 0}},
            {"exerciseId": yoga, "type": "stretch", "stretch": {"completed": False}},
        ],
    })
    assert r.status_code == 201
    sess = r.json()["data"]
    assert sess["templateName"] == "Mixed"
    assert sess["version"] == 1
    assert sess["date"].startswith("2026-10-14T18:30:00")
    # the uncompleted stretch is gone, the rest keeps its order
    assert [e["type"] for e in sess["exercises"]] == ["strength", "cardio", "endurance"]
    strength, cardio, endurance = sess["exercises"]
    assert strength["exerciseName"] == "Bench Press"
    assert strength["strength"]["sets"] == [{"weight": 80, "reps": 5}, {"weight": 0, "reps": 8}]
    assert cardio["cardio"] == {"time": 30, "level": 1, "distance": 0}
    assert endurance["endurance"] == {"time": 30, "distance": 0, "pace": 0}

    got = client.get(f"/sessions/{sess['id']}", headers=h).json()["data"]
    assert got["exercises"] == sess["exercises"]

def test_template_name_is_a_snapshot():
    h = headers()
    tpl = make_template(h, "Squat", title="Leg day")
    squat = tpl["exerciseIds"][0]
    sess = client.post("/sessions", headers=h, json={
        "templateId": tpl["id"], "date": "2026-10-01T08:00:00Z",
        "exercises": [{"exerciseId": squat, "type": "strength", "strength": {"sets": [{"weight": 100, "reps": 5}]}}],
    }).json()["data"]
    client.put(f"/templates/{tpl['id']}", headers=h, json={"name": "Renamed", "exerciseIds": [squat]})
    assert client.get(f"/sessions/{sess['id']}", headers=h).json()["data"]["templateName"] == "Leg day"
    # and lastUsedAt follows the newest session
    listed = client.get("/templates", headers=h).json()["data"]
    assert listed[0]["lastUsedAt"].startswith("2026-10-01T08:00:00")

def test_list_sessions_newest_first_with_total():
    h = headers()
    tpl = make_template(h, "Yoga")
    yoga = tpl["exerciseIds"][0]
    for day in ("2026-10-01", "2026-10-03", "2026-10-02"):
        client.post("/sessions", headers=h, json={
            "templateId": tpl["id"], "date": f"{day}T07:00:00Z",
            "exercises": [{"exerciseId": yoga, "type": "stretch", "stretch": {"completed": True}}],
        })
    r = client.get("/sessions", headers=h, params={"limit": 2})
    assert r.status_code == 200
    assert r.headers["X-Total-Count"] == "3"
    assert [s["date"][:10] for s in r.json()["data"]] == ["2026-10-03", "2026-10-02"]
    other = make_template(h, "Yoga", title="Other")
    r = client.get("/sessions", headers=h, params={"templateId": other["id"]})
    assert r.json()["data"] == []

def test_edit_session_replaces_records():
    h = headers()
    tpl = make_template(h, "Squat", "Deadlift")
    squat, deadlift = tpl["exerciseIds"]
    sess = client.post("/sessions", headers=h, json={
        "templateId": tpl["id"], "date": "2026-10-05T07:00:00Z",
        "exercises": [{"exerciseId": squat, "type": "strength", "strength": {"sets": [{"weight": 100, "reps": 5}]}}],
    }).json()["data"]
    r = client.put(f"/sessions/{sess['id']}", headers=h, json={
        "version": 1,
        "exercises": [
            {"exerciseId": deadlift, "type": "strength", "strength": {"sets": [{"weight": 140, "reps": 3}]}},
            {"exerciseId": squat, "type": "strength", "strength": {"sets": [{"weight": 105, "reps": 5}]}},
        ],
    })
    assert r.status_code == 200
    edited = r.json()["data"]
    assert edited["version"] == 2
    assert [e["exerciseName"] for e in edited["exercises"]] == ["Deadlift", "Squat"]
    assert edited["exercises"][1]["strength"]["sets"] == [{"weight": 105, "reps": 5}]
    assert edited["date"] == sess["date"]

def test_recorded_exercise_stays_editable_after_template_change():
    h = headers()
    tpl = make_template(h, "Squat")
    squat = tpl["exerciseIds"][0]
    sess = client.post("/sessions", headers=h, json={
        "templateId": tpl["id"], "date": "2026-10-05T07:00:00Z",
        "exercises": [{"exerciseId": squat, "type": "strength", "strength": {"sets": [{"weight": 100, "reps": 5}]}}],
    }).json()["data"]
    client.put(f"/templates/{tpl['id']}", headers=h, json={"name": "Now deadlifts", "exerciseIds": [default_id(h, "Deadlift")]})
    client.delete(f"/templates/{tpl['id']}", headers=h)
    r = client.put(f"/sessions/{sess['id']}", headers=h, json={
        "exercises": [{"exerciseId": squat, "type": "strength", "strength": {"sets": [{"weight": 110, "reps": 5}]}}],
    })
    assert r.status_code == 200

def test_delete_session():
    h = headers()
    tpl = make_template(h, "Yoga")
    sess = client.post("/sessions", headers=h, json={
        "templateId": tpl["id"], "date": "2026-10-05T07:00:00Z",
        "exercises": [{"exerciseId": tpl["exerciseIds"][0], "type": "stretch", "stretch": {"completed": True}}],
    }).json()["data"]
    assert client.delete(f"/sessions/{sess['id']}", headers=h).status_code == 200
    assert client.get(f"/sessions/{sess['id']}", headers=h).status_code == 404
    assert client.delete(f"/sessions/{sess['id']}", headers=h).status_code == 404
