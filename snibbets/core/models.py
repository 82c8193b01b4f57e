# snibbets/core/models.py
"""Search and snippet models."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from snibbets.core.exceptions import SnippetFileReadError


@dataclass(frozen=True)
class Snippet:
    """A titled block of code taken from a snippet file."""

    title: str
    code: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"title": self.title, "code": self.code}


@dataclass(frozen=True)
class SnippetFile:
    """A located snippet file."""

    path: Path
    title: str

    @classmethod
    def from_path(cls, path: Path | str) -> "SnippetFile":
        """Create from a path, titling it by basename without extension."""
        path = Path(path)
        return cls(path=path, title=path.stem)

    @property
    def uri(self) -> str:
        """file:// location of the snippet file."""
        return f"file://{self.path}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"title": self.title, "path": str(self.path)}


@dataclass
class SearchResult:
    """
    A located file and, once requested, the snippets parsed from it.

    The file is only read the first time ``snippets`` is accessed.
    """

    file: SnippetFile
    _snippets: Optional[list[Snippet]] = field(default=None, init=False, repr=False)

    @property
    def title(self) -> str:
        return self.file.title

    @property
    def path(self) -> Path:
        return self.file.path

    def read(self) -> str:
        """
        Read the file's text.

        Raises:
            SnippetFileReadError: If the file cannot be read or decoded
        """
        try:
            return self.file.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SnippetFileReadError(self.file.path, reason=str(e)) from e

    @property
    def snippets(self) -> list[Snippet]:
        if self._snippets is None:
            from snibbets.snippets.parser import parse

            self._snippets = parse(self.read())
        return self._snippets
