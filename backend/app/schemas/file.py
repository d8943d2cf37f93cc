# backend/app/schemas/file.py
from typing import List, Optional
from pydantic import Field
from .base import BaseSchema, UpdatedTimestampMixin

class FileBase(BaseSchema):
    path: str = Field(..., min_length=1, max_length=1024)
    content: Optional[str] = None
    language: Optional[str] = None
    is_modified: Optional[bool] = None

class FileCreate(FileBase):
    project_id: int

class FileUpdate(BaseSchema):
    path: Optional[str] = Field(None, min_length=1, max_length=1024)
    content: Optional[str] = None
    language: Optional[str] = None
    is_modified: Optional[bool] = None

class File(FileBase, UpdatedTimestampMixin):
    id: int
    project_id: int

class FileImportEntry(BaseSchema):
    path: str = Field(..., min_length=1, max_length=1024)
    content: Optional[str] = None

class FileImportRequest(BaseSchema):
    files: List[FileImportEntry]

class FileImportResult(BaseSchema):
    created: int = 0
    updated: int = 0
    files: List[File] = []
