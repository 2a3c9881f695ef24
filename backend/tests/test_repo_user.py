from fitflex.db import SessionLocal
from fitflex.errors import Conflict
from fitflex.repositories.user_repo import UserRepository
from fitflex.security import hash_password, verify_password
import uuid, pytest

def test_user_repo_create_and_get():
    db = SessionLocal()
    repo = UserRepository(db)
    email = f"{uuid.uuid4().hex[:8]}@ex.com"
    u = repo.create(email=email, name="Repo", password_hash=hash_password("StrongPassw0rd!"))
    assert u.id and u.email == email
    assert repo.get(u.id).email == email
    assert repo.get_by_email(email.upper()).id == u.id
    assert u.settings is not None
    assert verify_password("StrongPassw0rd!", u.password_hash)
    db.close()

def test_user_repo_unique_email_violation():
    db = SessionLocal()
    repo = UserRepository(db)
    email = f"{uuid.uuid4().hex[:8]}@ex.com"
    repo.create(email=email, name="A", password_hash=hash_password("StrongPassw0rd!"))
    with pytest.raises(Conflict):
        repo.create(email=email, name="B", password_hash=hash_password("StrongPassw0rd!"))
    db.close()

def test_verify_password_empty_hash():
    assert verify_password("anything", "") is False
