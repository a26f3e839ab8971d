from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Health"])

RUNNING_MESSAGE = "Smart Task Manager API is running"


@router.get("/", response_class=PlainTextResponse)
def root():
    return RUNNING_MESSAGE
