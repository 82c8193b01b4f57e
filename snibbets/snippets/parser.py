# snibbets/snippets/parser.py
"""
Snippet Parser

Splits a snippet file into titled snippets. Every ATX header starts a new
section: the header text becomes the title and the code under it (fenced
or indented) becomes the snippet. Text before the first header and
sections without code are ignored.
"""

import re

from snibbets.core.models import Snippet
from snibbets.snippets.extractor import extract

HEADER_PATTERN = re.compile(r"^#+", re.MULTILINE)
TITLE_PUNCTUATION = re.compile(r"[.:]$")


def clean_title(line: str) -> str:
    """Strip a header line's text and drop one trailing '.' or ':'."""
    return TITLE_PUNCTUATION.sub("", line.strip(), count=1)


def split_sections(text: str) -> list[tuple[str, str]]:
    """
    Split text on ATX header lines.

    Returns:
        (title, body) pairs in document order; content before the first
        header is discarded
    """
    text = text.replace("\r\n", "\n")
    sections = []
    for part in HEADER_PATTERN.split(text)[1:]:
        header, _, body = part.partition("\n")
        sections.append((clean_title(header), body))
    return sections


def has_multiple_snippets(text: str) -> bool:
    """Check whether the text has more than one header."""
    return len(HEADER_PATTERN.findall(text)) > 1


def parse(text: str) -> list[Snippet]:
    """
    Parse a snippet file into snippets.

    Args:
        text: Full text of the file

    Returns:
        One Snippet per header with non-blank code, in document order
    """
    snippets = []
    for title, body in split_sections(text):
        code = extract(body).strip()
        if code:
            snippets.append(Snippet(title=title, code=code))
    return snippets
