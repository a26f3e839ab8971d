# app/scripts/seed.py
"""
Insert a demo user with a few tasks.

There is no endpoint for creating rows yet, so local databases are populated
with this command:

    python -m app.scripts.seed
"""
import logging
import os

from sqlmodel import select

from app.db.session import create_all_tables, session_scope
from app.models.task import Task
from app.models.user import User

logger = logging.getLogger(__name__)

DEMO_EMAIL = os.getenv("SEED_USER_EMAIL", "demo@taskmanager.local")

DEMO_TASKS = [
    ("Set up the database", "Run the alembic migrations", True),
    ("Add authentication", None, False),
    ("Build task creation", "POST /tasks", False),
]


def seed() -> User:
    with session_scope() as db:
        user = db.exec(select(User).where(User.email == DEMO_EMAIL)).first()
        if user is not None:
            logger.info("demo user %s already exists, skipping", DEMO_EMAIL)
            return user

        user = User(email=DEMO_EMAIL, password="changeme", name="Demo User")
        db.add(user)
        for title, description, completed in DEMO_TASKS:
            db.add(Task(user=user, title=title, description=description, completed=completed))
        db.commit()
        db.refresh(user)
        logger.info("seeded %s with %d tasks", DEMO_EMAIL, len(DEMO_TASKS))
        return user


def main():
    logging.basicConfig(level=logging.INFO)
    if os.getenv("ENV", "dev") == "dev":
        create_all_tables()
    seed()


if __name__ == "__main__":
    main()
