# app/core/config.py
from dotenv import load_dotenv
import os

load_dotenv()

DEFAULT_PORT = 5000


def get_port() -> int:
    return int(os.getenv("PORT") or DEFAULT_PORT)


def get_host() -> str:
    return os.getenv("HOST", "0.0.0.0")


def get_env() -> str:
    return os.getenv("ENV", "dev")


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [o.strip() for o in raw.split(",") if o.strip()] or ["*"]
