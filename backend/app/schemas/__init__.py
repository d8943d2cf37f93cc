# backend/app/schemas/__init__.py
from .base import ErrorResponse
from .project import Project, ProjectCreate, ProjectUpdate, ProjectDetail
from .file import File, FileCreate, FileUpdate, FileImportEntry, FileImportRequest, FileImportResult
from .chat_message import ChatMessage, ChatMessageCreate
from .tree import FileTreeNode
from .ai import (
    ChatContext, AIChatRequest, AIChatResponse, CodeChange,
    CodeEditRequest, CodeEditResponse, GenerateCodeRequest, GenerateCodeResponse
)

__all__ = [
    "ErrorResponse",
    "Project", "ProjectCreate", "ProjectUpdate", "ProjectDetail",
    "File", "FileCreate", "FileUpdate", "FileImportEntry", "FileImportRequest", "FileImportResult",
    "ChatMessage", "ChatMessageCreate",
    "FileTreeNode",
    "ChatContext", "AIChatRequest", "AIChatResponse", "CodeChange",
    "CodeEditRequest", "CodeEditResponse", "GenerateCodeRequest", "GenerateCodeResponse"
]
