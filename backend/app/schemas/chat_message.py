# backend/app/schemas/chat_message.py
from typing import Any, Dict, Optional
from pydantic import AliasChoices, Field
from .base import BaseSchema, TimestampMixin
from ..models.chat_message import MessageRole

class ChatMessageBase(BaseSchema):
    role: MessageRole
    content: str

class ChatMessageCreate(ChatMessageBase):
    metadata: Optional[Dict[str, Any]] = None

class ChatMessage(ChatMessageBase, TimestampMixin):
    id: int
    project_id: int
    # ORM attribute is message_metadata, plain dicts use metadata
    metadata: Optional[Dict[str, Any]] = Field(
        None, validation_alias=AliasChoices("message_metadata", "metadata")
    )
