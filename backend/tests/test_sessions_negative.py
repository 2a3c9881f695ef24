from fastapi.testclient import TestClient
from fitflex.main import app
from fitflex.normalize import EMPTY_SESSION_ERROR
import uuid

client = TestClient(app)
def email(): return f"{uuid.uuid4().hex[:10]}@ex.com"
PWD = "StrongPassw0rd!"

def headers(e=None):
    e = e or email()
    client.post("/auth/register", json={"email": e, "name": "U", "password": PWD})
    tok = client.post("/auth/login", json={"email": e, "password": PWD}).json()["data"]["accessToken"]
    return {"Authorization": f"Bearer {tok}"}

def yoga_template(h):
    yoga = client.get("/exercises", headers=h, params={"search": "Yoga"}).json()["data"][0]["id"]
    return client.post("/templates", headers=h, json={"name": "Stretch", "exerciseIds": [yoga]}).json()["data"]

def done(tpl):
    return [{"exerciseId": tpl["exerciseIds"][0], "type": "stretch", "stretch": {"completed": True}}]

def test_all_empty_session_rejected_and_nothing_stored():
    h = headers()
    tpl = yoga_template(h)
    r = client.post("/sessions", headers=h, json={
        "templateId": tpl["id"], "date": "2026-10-05T07:00:00Z",
        "exercises": [{"exerciseId": tpl["exerciseIds"][0], "type": "stretch", "stretch": {"completed": False}}],
    })
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": EMPTY_SESSION_ERROR}
    assert client.get("/sessions", headers=h).headers["X-Total-Count"] == "0"

def test_empty_edit_leaves_session_untouched():
    h = headers()
    tpl = yoga_template(h)
    sess = client.post("/sessions", headers=h, json={
        "templateId": tpl["id"], "date": "2026-10-05T07:00:00Z", "exercises": done(tpl),
    }).json()["data"]
    r = client.put(f"/sessions/{sess['id']}", headers=h, json={"exercises": []})
    assert r.status_code == 400
    after = client.get(f"/sessions/{sess['id']}", headers=h).json()["data"]
    assert after["exercises"] == sess["exercises"]
    assert after["version"] == 1

def test_stale_version_conflict():
    h = headers()
    tpl = yoga_template(h)
    sess = client.post("/sessions", headers=h, json={
        "templateId": tpl["id"], "date": "2026-10-05T07:00:00Z", "exercises": done(tpl),
    }).json()["data"]
    assert client.put(f"/sessions/{sess['id']}", headers=h, json={"version": 1, "exercises": done(tpl)}).status_code == 200
    r = client.put(f"/sessions/{sess['id']}", headers=h, json={"version": 1, "exercises": done(tpl)})
    assert r.status_code == 409
    assert r.json()["success"] is False

def test_exercise_outside_template_rejected():
    h = headers()
    tpl = yoga_template(h)
    squat = client.get("/exercises", headers=h, params={"search": "Squat"}).json()["data"][0]["id"]
    r = client.post("/sessions", headers=h, json={
        "templateId": tpl["id"], "date": "2026-10-05T07:00:00Z",
        "exercises": [{"exerciseId": squat, "type": "strength", "strength": {"sets": [{"weight": 1, "reps": 1}]}}],
    })
    assert r.status_code == 400

def test_unknown_or_archived_template():
    h = headers()
    tpl = yoga_template(h)
    r = client.post("/sessions", headers=h, json={
        "templateId": str(uuid.uuid4()), "date": "2026-10-05T07:00:00Z", "exercises": done(tpl),
    })
    assert r.status_code == 404
    client.delete(f"/templates/{tpl['id']}", headers=h)
    r = client.post("/sessions", headers=h, json={
        "templateId": tpl["id"], "date": "2026-10-05T07:00:00Z", "exercises": done(tpl),
    })
    assert r.status_code == 404

def test_bad_record_type_rejected():
    h = headers()
    tpl = yoga_template(h)
    r = client.post("/sessions", headers=h, json={
        "templateId": tpl["id"], "date": "2026-10-05T07:00:00Z",
        "exercises": [{"exerciseId": tpl["exerciseIds"][0], "type": "dance"}],
    })
    assert r.status_code == 400

def test_other_users_session_is_hidden():
    h1, h2 = headers(), headers()
    tpl = yoga_template(h1)
    sess = client.post("/sessions", headers=h1, json={
        "templateId": tpl["id"], "date": "2026-10-05T07:00:00Z", "exercises": done(tpl),
    }).json()["data"]
    assert client.get(f"/sessions/{sess['id']}", headers=h2).status_code == 404
    assert client.put(f"/sessions/{sess['id']}", headers=h2, json={"exercises": done(tpl)}).status_code == 404
    assert client.delete(f"/sessions/{sess['id']}", headers=h2).status_code == 404

def test_record_type_must_match_exercise_kind():
    h = headers()
    ex = client.post("/exercises", headers=h,
                     json={"name": "Pushups", "type": "counter", "goal": 100, "goalDueDate": "2026-12-31"}).json()["data"]
    tpl = client.post("/templates", headers=h, json={"name": "Daily", "exerciseIds": [ex["id"]]}).json()["data"]
    r = client.post("/sessions", headers=h, json={
        "templateId": tpl["id"], "date": "2026-10-05T07:00:00Z",
        "exercises": [{"exerciseId": ex["id"], "exerciseName": "Fake Deadlift", "type": "strength",
                       "strength": {"sets": [{"weight": 500, "reps": 1}]}}],
    })
    assert r.status_code == 400
    assert client.get("/sessions/prs", headers=h).json()["data"] == []
    assert client.get("/sessions/stats", headers=h).json()["data"]["totalWeightKg"] == 0

def test_client_exercise_name_is_ignored():
    h = headers()
    tpl = yoga_template(h)
    r = client.post("/sessions", headers=h, json={
        "templateId": tpl["id"], "date": "2026-10-05T07:00:00Z",
        "exercises": [{"exerciseId": tpl["exerciseIds"][0], "exerciseName": "Hot Yoga", "type": "stretch",
                       "stretch": {"completed": True}}],
    })
    assert r.status_code == 201
    assert r.json()["data"]["exercises"][0]["exerciseName"] == "Yoga"
    sess_id = r.json()["data"]["id"]
    r = client.put(f"/sessions/{sess_id}", headers=h, json={
        "exercises": [{"exerciseId": tpl["exerciseIds"][0], "type": "counter", "counter": {"value": 3}}],
    })
    assert r.status_code == 400
    assert client.get(f"/sessions/{sess_id}", headers=h).json()["data"]["version"] == 1
