# app/db/session.py
import os
import logging
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlmodel import SQLModel, create_engine
from contextlib import contextmanager

import app.core.config  # noqa: F401  (.env loading)

log = logging.getLogger(__name__)


def _build_db_url() -> str:
    url = os.getenv("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set")

    try:
        parsed = make_url(url)
    except Exception as e:
        raise RuntimeError(f"Invalid DATABASE_URL ({e})")

    log.info("Using database: %s", parsed.render_as_string(hide_password=True))
    return url


def _connect_args(url: str) -> dict:
    # sync handlers run in the threadpool
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


DATABASE_URL = _build_db_url()
engine = create_engine(DATABASE_URL, connect_args=_connect_args(DATABASE_URL))

if engine.dialect.name == "sqlite":
    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_conn, _record):
        # task.user_id -> user.id is not checked by SQLite otherwise
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_session():
    """FastAPI Depends(get_session) generator."""
    from sqlmodel import Session
    with Session(engine) as s:
        yield s


def create_all_tables():
    # registers the table classes on SQLModel.metadata
    from app.models import task, user  # noqa: F401
    SQLModel.metadata.create_all(engine)


@contextmanager
def session_scope():
    """
    Session context for code outside a request (seed command, scripts, tests).
    """
    from sqlmodel import Session
    s = Session(engine)
    try:
        yield s
    finally:
        s.close()
