# backend/app/utils/languages.py
from pathlib import PurePosixPath

DEFAULT_LANGUAGE = "plaintext"

EXTENSION_LANGUAGES = {
    "js": "javascript",
    "jsx": "javascript",
    "mjs": "javascript",
    "ts": "typescript",
    "tsx": "typescript",
    "py": "python",
    "java": "java",
    "c": "c",
    "h": "c",
    "cpp": "cpp",
    "cc": "cpp",
    "cxx": "cpp",
    "hpp": "cpp",
    "cs": "csharp",
    "php": "php",
    "rb": "ruby",
    "go": "go",
    "rs": "rust",
    "kt": "kotlin",
    "swift": "swift",
    "html": "html",
    "htm": "html",
    "css": "css",
    "scss": "scss",
    "sass": "sass",
    "less": "less",
    "json": "json",
    "xml": "xml",
    "yaml": "yaml",
    "yml": "yaml",
    "md": "markdown",
    "txt": "plaintext",
    "sql": "sql",
    "sh": "shell",
    "bash": "shell",
    "zsh": "shell",
    "fish": "shell",
}


def get_file_extension(path: str) -> str:
    """Lower-cased extension without the dot, '' when there is none"""
    return PurePosixPath(path or "").suffix.lstrip(".").lower()


def detect_language(path: str) -> str:
    """Editor language tag for a file path"""
    return EXTENSION_LANGUAGES.get(get_file_extension(path), DEFAULT_LANGUAGE)
