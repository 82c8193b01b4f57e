# snibbets/search/backends.py
"""
Search Backends

A backend answers one question: which files in a folder match a query,
either by name or by content. The fallback between the two lives in the
locator, not here.
"""

from __future__ import annotations

import re
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from snibbets.core.constants import SearchBackendType, SearchPhase
from snibbets.core.exceptions import SearchToolError
from snibbets.utils.logger import logger


def loose_pattern(query: str) -> re.Pattern:
    """
    Build the case-insensitive pattern used to match a query.

    Whitespace runs in the query match any characters, and the match may
    start and end anywhere, so "todo list" matches "my-todo-list.md".
    """
    words = [re.escape(word) for word in query.split()]
    return re.compile(".*" + ".*".join(words) + ".*", re.IGNORECASE)


def _is_candidate(path: Path) -> bool:
    return path.is_file() and not path.name.startswith(".")


class SearchBackend(ABC):
    """Base class for file search backends."""

    backend_type: SearchBackendType

    @abstractmethod
    def search(self, query: str, folder: Path, phase: SearchPhase) -> List[Path]:
        """
        Search the direct children of a folder.

        Args:
            query: Non-empty search query
            folder: Absolute folder to search
            phase: Whether to match file names or file contents

        Returns:
            Matching paths in the backend's own order
        """


class FilesystemBackend(SearchBackend):
    """
    Scan the folder directly.

    Names are matched in directory listing order; contents are matched in
    name order, one line at a time.
    """

    backend_type = SearchBackendType.FIND

    def search(self, query: str, folder: Path, phase: SearchPhase) -> List[Path]:
        if not folder.is_dir():
            logger.debug(f"Snippets folder {folder} does not exist")
            return []

        pattern = loose_pattern(query)
        try:
            children = [p for p in folder.iterdir() if _is_candidate(p)]
        except OSError as e:
            raise SearchToolError(f"Cannot list {folder}: {e}", backend=self.backend_type.value) from e

        if phase is SearchPhase.NAME:
            return [p for p in children if pattern.fullmatch(p.name)]

        matches = []
        for path in sorted(children, key=lambda p: p.name):
            try:
                text = path.read_text(encoding="utf-8", errors="ignore")
            except OSError as e:
                raise SearchToolError(f"Cannot read {path}: {e}", backend=self.backend_type.value) from e
            # '.' stops at newlines, so a match never spans lines
            if pattern.search(text):
                matches.append(path)
        return matches


class SpotlightBackend(SearchBackend):
    """Query the macOS Spotlight index through mdfind."""

    backend_type = SearchBackendType.SPOTLIGHT

    def __init__(self, executable: str = "mdfind"):
        self.executable = executable

    def build_command(self, query: str, folder: Path, phase: SearchPhase) -> List[str]:
        cmd = [self.executable, "-onlyin", str(folder)]
        if phase is SearchPhase.NAME:
            cmd.append("-name")
        cmd.append(query)
        return cmd

    def search(self, query: str, folder: Path, phase: SearchPhase) -> List[Path]:
        if not folder.is_dir():
            logger.debug(f"Snippets folder {folder} does not exist")
            return []

        cmd = self.build_command(query, folder, phase)
        try:
            proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
        except OSError as e:
            raise SearchToolError(f"Cannot run {self.executable}: {e}", backend=self.backend_type.value) from e

        if proc.returncode != 0:
            raise SearchToolError(
                f"{self.executable} exited with status {proc.returncode}: {proc.stderr.strip()}",
                backend=self.backend_type.value,
            )

        # mdfind -onlyin recurses; keep direct children like the find backend
        root = folder.resolve()
        paths = [Path(line) for line in proc.stdout.splitlines() if line.strip()]
        return [path for path in paths if path.parent.resolve() == root]


def create_backend(backend_type: SearchBackendType | str) -> SearchBackend:
    """Instantiate the backend for a configured backend type."""
    backend_type = SearchBackendType(backend_type)
    if backend_type is SearchBackendType.SPOTLIGHT:
        return SpotlightBackend()
    return FilesystemBackend()
