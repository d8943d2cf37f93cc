# backend/app/schemas/ai.py
from typing import List, Optional
from pydantic import BaseModel, Field


class ChatContext(BaseModel):
    """What the editor currently shows"""
    current_file: Optional[str] = Field(None, description="Path of the file open in the editor")
    current_code: Optional[str] = Field(None, description="Contents of the open file")
    project_files: List[str] = Field(default_factory=list, description="Paths of all project files")


class AIChatRequest(BaseModel):
    message: str = Field(..., min_length=1, description="User question")
    context: Optional[ChatContext] = None


class CodeChange(BaseModel):
    filename: str
    content: str
    explanation: str


class AIChatResponse(BaseModel):
    response: str = Field(..., description="Full assistant reply")
    code_changes: Optional[List[CodeChange]] = Field(None, description="At most one proposed replacement")


class CodeEditRequest(BaseModel):
    instruction: str = Field(..., min_length=1, description="What to change")
    current_code: str = Field(..., min_length=1, description="Current file contents")
    filename: Optional[str] = None
    language: Optional[str] = None


class CodeEditResponse(BaseModel):
    success: bool
    modified_code: Optional[str] = None
    explanation: Optional[str] = None
    error: Optional[str] = None


class GenerateCodeRequest(BaseModel):
    prompt: str = Field(..., min_length=1)
    language: str = "javascript"


class GenerateCodeResponse(BaseModel):
    code: str
