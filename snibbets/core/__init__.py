"""Core module for Snibbets."""

from snibbets.core.constants import (
    NO_MATCHES_TITLE,
    OutputFormat,
    SearchBackendType,
    SearchPhase,
)
from snibbets.core.exceptions import (
    SnibbetsException,
    QueryException,
    EmptyQueryError,
    SearchException,
    SearchToolError,
    SnippetFileException,
    SnippetFileReadError,
)
from snibbets.core.models import Snippet, SnippetFile, SearchResult

__all__ = [
    "NO_MATCHES_TITLE",
    "OutputFormat",
    "SearchBackendType",
    "SearchPhase",
    "SnibbetsException",
    "QueryException",
    "EmptyQueryError",
    "SearchException",
    "SearchToolError",
    "SnippetFileException",
    "SnippetFileReadError",
    "Snippet",
    "SnippetFile",
    "SearchResult",
]
