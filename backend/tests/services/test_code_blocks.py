# tests/services/test_code_blocks.py
import pytest
from app.services.code_blocks import extract_code_block, find_code_blocks, strip_code_blocks


@pytest.mark.parametrize("body", [
    "x = 1",
    "  indented\n\ttabbed\n",
    "\n\nleading blank lines",
    "trailing spaces   ",
    "line one\n\n\nline four",
])
def test_single_block_round_trips_verbatim(body):
    reply = f"Some prose.\n```python\n{body}\n```\nMore prose."
    assert extract_code_block(reply) == body


def test_block_without_language_tag():
    assert extract_code_block("```\nplain\n```") == "plain"


def test_first_block_wins():
    reply = "```js\nfirst()\n```\nand\n```js\nsecond()\n```"
    assert extract_code_block(reply) == "first()"
    assert find_code_blocks(reply) == ["first()", "second()"]


def test_no_block():
    assert extract_code_block("Just words, no code.") is None
    assert extract_code_block("") is None
    assert find_code_blocks("") == []


def test_unterminated_block_is_ignored():
    assert extract_code_block("```python\nprint('x')") is None


def test_strip_code_blocks_keeps_prose():
    reply = "Before.\n```python\nx = 1\n```\nAfter."
    assert strip_code_blocks(reply) == "Before.\n\nAfter."


def test_strip_code_blocks_only_code():
    assert strip_code_blocks("```\nx\n```") == ""
