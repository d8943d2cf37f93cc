# backend/app/schemas/tree.py
from typing import List, Literal, Optional
from .base import BaseSchema
from .file import File

class FileTreeNode(BaseSchema):
    name: str
    path: str
    type: Literal["file", "folder"]
    children: Optional[List["FileTreeNode"]] = None
    file: Optional[File] = None

FileTreeNode.model_rebuild()
