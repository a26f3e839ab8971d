# app/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import get_cors_origins, get_env, get_host, get_log_level, get_port
from app.db.session import create_all_tables
from app.models import task as task_model, user as user_model  # noqa: F401
from app.routers import health
from app.routers import task

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(title="Smart Task Manager API", version="0.1.0")

origins = get_cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=origins != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(task.router)

if get_env() == "dev":
    create_all_tables()


def run():
    import uvicorn

    port = get_port()
    logger.info("Server is running on port %s", port)
    uvicorn.run(app, host=get_host(), port=port)


if __name__ == "__main__":
    run()
