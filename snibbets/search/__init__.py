"""Snippet file search."""

from snibbets.search.backends import FilesystemBackend, SearchBackend, SpotlightBackend, create_backend, loose_pattern
from snibbets.search.locator import FileLocator, list_snippet_files, locate

__all__ = [
    "FilesystemBackend",
    "SearchBackend",
    "SpotlightBackend",
    "create_backend",
    "loose_pattern",
    "FileLocator",
    "list_snippet_files",
    "locate",
]
