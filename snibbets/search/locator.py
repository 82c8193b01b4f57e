# snibbets/search/locator.py
"""
File Locator

Finds snippet files for a query in two phases: file names first, and only
when no name matches, file contents.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from snibbets.core.constants import SearchBackendType, SearchPhase
from snibbets.core.exceptions import EmptyQueryError, SearchToolError
from snibbets.core.models import SearchResult, SnippetFile
from snibbets.search.backends import FilesystemBackend, SearchBackend, create_backend
from snibbets.utils.logger import logger


def _resolve(folder: Path | str) -> Path:
    return Path(folder).expanduser().absolute()


class FileLocator:
    """Two-phase snippet file search over a pluggable backend."""

    def __init__(self, backend: Optional[SearchBackend] = None):
        self.backend = backend or FilesystemBackend()

    @classmethod
    def for_backend(cls, backend_type: SearchBackendType | str) -> "FileLocator":
        return cls(create_backend(backend_type))

    def locate(self, query: str, folder: Path | str) -> List[SnippetFile]:
        """
        Locate snippet files matching a query.

        Args:
            query: Non-empty, already decoded query
            folder: Snippets folder; a missing folder simply yields nothing

        Returns:
            Matching files in backend order, empty when nothing matched

        Raises:
            EmptyQueryError: If the query is blank
            SearchToolError: If the backend fails
        """
        if not query or not query.strip():
            raise EmptyQueryError()

        folder = _resolve(folder)
        for phase in SearchPhase:
            paths = self.backend.search(query, folder, phase)
            logger.debug(
                f"[SEARCH] {self.backend.backend_type.value} | {phase.value} | "
                f"'{query}' in {folder} | {len(paths)} match(es)"
            )
            if paths:
                return [SnippetFile.from_path(p) for p in paths]

        return []

    def search(self, query: str, folder: Path | str) -> List[SearchResult]:
        """Locate files and wrap them as lazily parsed results."""
        return [SearchResult(file=f) for f in self.locate(query, folder)]


def locate(query: str, folder: Path | str, backend: Optional[SearchBackend] = None) -> List[SnippetFile]:
    """Locate snippet files with a one-off locator."""
    return FileLocator(backend).locate(query, folder)


def list_snippet_files(folder: Path | str) -> List[SnippetFile]:
    """
    List every snippet file in a folder, sorted by name.

    Hidden files and subdirectories are skipped; a missing folder gives
    an empty list.
    """
    folder = _resolve(folder)
    if not folder.is_dir():
        return []
    try:
        paths = [p for p in folder.iterdir() if p.is_file() and not p.name.startswith(".")]
    except OSError as e:
        raise SearchToolError(f"Cannot list {folder}: {e}") from e
    return [SnippetFile.from_path(p) for p in sorted(paths, key=lambda p: p.name)]
