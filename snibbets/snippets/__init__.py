"""Snippet parsing: header splitting and code block extraction."""

from snibbets.snippets.extractor import extract, is_fenced
from snibbets.snippets.parser import has_multiple_snippets, parse

__all__ = ["extract", "is_fenced", "has_multiple_snippets", "parse"]
