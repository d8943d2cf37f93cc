# backend/app/services/__init__.py
from .ai import ai_service, get_ai_service, AIService, AIServiceError
from .seed import seed_service

__all__ = ["ai_service", "get_ai_service", "AIService", "AIServiceError", "seed_service"]
