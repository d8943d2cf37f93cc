# backend/app/api/__init__.py
from .projects import router as projects_router
from .files import router as files_router
from .chat import router as chat_router
from .ai import router as ai_router

__all__ = ["projects_router", "files_router", "chat_router", "ai_router"]
