import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlmodel import Session, select

from app.models.task import Task
from app.db.session import get_session
from app.schemas.task import TaskRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["Tasks"])

FETCH_FAILED = {"error": "Failed to fetch tasks"}


@router.get("", response_model=list[TaskRead])
def get_all_tasks(db: Session = Depends(get_session)):
    try:
        return db.exec(select(Task)).all()
    except Exception:
        logger.exception("fetching tasks failed")
        return JSONResponse(status_code=500, content=FETCH_FAILED)
