# backend/app/models/__init__.py
from ..database import Base
from .project import Project
from .file import File
from .chat_message import ChatMessage, MessageRole

__all__ = [
    "Base",
    "Project",
    "File",
    "ChatMessage",
    "MessageRole"
]
