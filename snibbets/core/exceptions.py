# snibbets/core/exceptions.py
"""
Exception Hierarchy for Snibbets

Defines all custom exceptions used throughout the application.
"No results" situations are never exceptions; they are empty values.
"""

from pathlib import Path
from typing import Any, Optional, Union


class SnibbetsException(Exception):
    """
    Base exception for all Snibbets errors.

    Attributes:
        message: Human-readable error message
        code: Error code for programmatic handling
        context: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        code: str = "SNIBBETS_ERROR",
        context: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error": self.code,
            "message": self.message,
            "context": self.context,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# ============================================
# Query Exceptions
# ============================================
class QueryException(SnibbetsException):
    """Base exception for invalid search queries."""

    def __init__(self, message: str, code: str = "QUERY_ERROR", **kwargs: Any):
        super().__init__(message, code=code, **kwargs)


class EmptyQueryError(QueryException):
    """Raised when a search is attempted without a query."""

    def __init__(self, message: str = "No search query", **kwargs: Any):
        super().__init__(message, code="EMPTY_QUERY", **kwargs)


# ============================================
# Search Exceptions
# ============================================
class SearchException(SnibbetsException):
    """Base exception for file search errors."""

    def __init__(
        self,
        message: str,
        code: str = "SEARCH_ERROR",
        backend: Optional[str] = None,
        **kwargs: Any,
    ):
        context = kwargs.pop("context", {})
        if backend:
            context["backend"] = backend
        super().__init__(message, code=code, context=context, **kwargs)
        self.backend = backend


class SearchToolError(SearchException):
    """Raised when the search tool fails or the folder cannot be scanned."""

    def __init__(self, message: str = "Search tool failed", **kwargs: Any):
        super().__init__(message, code="SEARCH_TOOL_ERROR", **kwargs)


# ============================================
# Snippet File Exceptions
# ============================================
class SnippetFileException(SnibbetsException):
    """Base exception for snippet file errors."""

    def __init__(
        self,
        message: str,
        code: str = "SNIPPET_FILE_ERROR",
        path: Optional[Union[str, Path]] = None,
        **kwargs: Any,
    ):
        context = kwargs.pop("context", {})
        if path:
            context["path"] = str(path)
        super().__init__(message, code=code, context=context, **kwargs)
        self.path = path


class SnippetFileReadError(SnippetFileException):
    """Raised when a located snippet file cannot be read."""

    def __init__(self, path: Union[str, Path], reason: str = "", **kwargs: Any):
        message = f"Failed to read snippet file '{path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message, code="SNIPPET_FILE_READ_ERROR", path=path, **kwargs)
