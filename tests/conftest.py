import os
import tempfile
import sys
from pathlib import Path

import pytest
from sqlmodel import SQLModel

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

tmp_dir = tempfile.mkdtemp()
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(tmp_dir, 'test.db')}"
os.environ["ENV"] = "dev"
os.environ.pop("PORT", None)

from fastapi.testclient import TestClient  # noqa: E402

from app.main import app  # noqa: E402
from app.db.session import create_all_tables, engine, session_scope  # noqa: E402
from app.models.task import Task  # noqa: E402
from app.models.user import User  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_db():
    SQLModel.metadata.drop_all(engine)
    create_all_tables()
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_tasks():
    def _make(n):
        with session_scope() as db:
            user = User(email="owner@test.local", password="pw", name="Owner")
            db.add(user)
            for i in range(n):
                db.add(Task(user=user, title=f"task {i}", description=None if i % 2 else f"desc {i}"))
            db.commit()
            return user.id

    return _make
