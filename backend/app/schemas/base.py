# backend/app/schemas/base.py
from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict

class BaseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

class TimestampMixin(BaseModel):
    created_at: datetime

class UpdatedTimestampMixin(TimestampMixin):
    updated_at: Optional[datetime] = None

class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint"""
    error: str
    detail: Optional[Any] = None
