"""
Point the app at a throwaway SQLite file before anything imports
fitflex.db, then build the schema and the shared default exercises once.
"""
import os
import pathlib

TEST_DB = pathlib.Path(__file__).with_name("test_fitflex.db")
os.environ["DB_URL"] = f"sqlite:///{TEST_DB}"
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def database():
    from fitflex.db import Base, SessionLocal, engine
    from fitflex import models  # noqa: F401
    from fitflex.seed import seed_default_exercises

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    with SessionLocal() as db:
        seed_default_exercises(db)
    yield
    engine.dispose()
    TEST_DB.unlink(missing_ok=True)
