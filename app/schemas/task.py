# app/schemas/task.py
from pydantic import BaseModel, ConfigDict
from uuid import UUID
from typing import Optional
from datetime import datetime


# ── task list response ─────────────────────────────────────────
class TaskRead(BaseModel):
    id: UUID
    title: str
    description: Optional[str]
    completed: bool
    user_id: UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
