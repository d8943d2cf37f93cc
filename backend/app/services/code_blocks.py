# backend/app/services/code_blocks.py
import re
from typing import List, Optional

# ```lang\n<body>\n```  (language tag optional, body matched lazily)
CODE_BLOCK_PATTERN = re.compile(r"```(?:\w+)?\n([\s\S]*?)\n```")


def find_code_blocks(text: str) -> List[str]:
    """Return the inner text of every fenced code block, in order"""
    if not text:
        return []
    return CODE_BLOCK_PATTERN.findall(text)


def extract_code_block(text: str) -> Optional[str]:
    """Return the inner text of the first fenced code block, or None"""
    if not text:
        return None
    match = CODE_BLOCK_PATTERN.search(text)
    return match.group(1) if match else None


def strip_code_blocks(text: str) -> str:
    """Remove all fenced code blocks and trim what is left"""
    if not text:
        return ""
    return CODE_BLOCK_PATTERN.sub("", text).strip()
