# backend/app/schemas/project.py
from typing import Optional
from pydantic import Field
from .base import BaseSchema, UpdatedTimestampMixin

class ProjectBase(BaseSchema):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    directory_handle: Optional[str] = None

class ProjectCreate(ProjectBase):
    pass

class ProjectUpdate(BaseSchema):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    directory_handle: Optional[str] = None

class Project(ProjectBase, UpdatedTimestampMixin):
    id: int

class ProjectDetail(Project):
    file_count: int = 0
    chat_message_count: int = 0
