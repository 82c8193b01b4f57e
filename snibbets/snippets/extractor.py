# snibbets/snippets/extractor.py
"""
Code Block Extraction

Turns the text found under a header into clean code. Two authoring styles
are understood:
- fenced blocks delimited by lines of three or more backticks
- classic Markdown indented blocks (4+ spaces or a tab)

Everything outside the code (prose, comments between blocks) is dropped.
"""

import re
from typing import Optional

FENCE_PATTERN = re.compile(r"^\s*(`{3,})([^`]*)$")
INDENT_PATTERN = re.compile(r"^( {4,}|\t+)")
BLANK_PATTERN = re.compile(r"^\s*$")


def _fence_of(line: str) -> Optional[str]:
    """Return the backtick run if the line is a fence line."""
    match = FENCE_PATTERN.match(line)
    return match.group(1) if match else None


def count_fences(body: str) -> int:
    """Count the fence lines in a block of text."""
    return sum(1 for line in body.split("\n") if _fence_of(line))


def is_fenced(body: str) -> bool:
    """
    Check whether a block holds fenced code.

    A block counts as fenced when it has an even number (at least two)
    of fence lines. An unbalanced fence falls back to indented parsing.
    """
    count = count_fences(body)
    return count > 1 and count % 2 == 0


def extract_fenced(body: str) -> str:
    """
    Extract the contents of every fenced block, in order.

    A block opens on a fence line (the info string after the backticks is
    ignored) and closes on the next bare fence line at least as long as
    the opening one. Each block is trimmed; blocks are separated by a
    blank line.
    """
    blocks: list[str] = []
    current: list[str] = []
    opener: Optional[str] = None

    for line in body.split("\n"):
        fence = _fence_of(line)
        if opener is None:
            if fence:
                opener = fence
                current = []
            continue

        if fence and len(fence) >= len(opener) and not line.strip()[len(fence):]:
            blocks.append("\n".join(current).strip())
            opener = None
        else:
            current.append(line)

    return "\n\n".join(block for block in blocks if block)


def extract_indented(body: str) -> str:
    """
    Extract indented code and outdent it.

    The first indented line sets the indent prefix for the whole body;
    that exact prefix is removed from following lines. Blank lines are
    kept while inside a block, non-indented lines end it.
    """
    indent: Optional[str] = None
    in_block = False
    code: list[str] = []

    for line in body.split("\n"):
        if in_block and BLANK_PATTERN.match(line):
            code.append(line)
            continue

        match = INDENT_PATTERN.match(line)
        if match:
            in_block = True
            if indent is None:
                indent = match.group(1)
            code.append(line[len(indent):] if line.startswith(indent) else line)
        else:
            in_block = False

    return "\n".join(code)


def extract(body: str) -> str:
    """
    Extract the code from the text between two headers.

    Args:
        body: Raw text following a header line

    Returns:
        The cleaned code, not yet trimmed (may be empty)
    """
    if is_fenced(body):
        return extract_fenced(body)
    return extract_indented(body)
