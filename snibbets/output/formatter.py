# snibbets/output/formatter.py
"""
Result Formatting

Renders search results for the two consumers:
- LaunchBar, which expects a JSON list of items with pasteable children
- the terminal, which gets raw code or a JSON list of snippets
"""

import json
from typing import Any, Iterable, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from snibbets.core.constants import NO_MATCHES_TITLE, PASTE_ACTION, PASTE_LABEL, OutputFormat
from snibbets.core.models import SearchResult, Snippet, SnippetFile


class LaunchBarItem(BaseModel):
    """A LaunchBar result item."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., description="Item title")
    quick_look_url: Optional[str] = Field(None, alias="quickLookURL", description="Preview location")
    action: Optional[str] = Field(None, description="Action script function to run")
    action_argument: Optional[str] = Field(None, alias="actionArgument", description="Argument for the action")
    label: Optional[str] = Field(None, description="Action label")
    children: Optional[list["LaunchBarItem"]] = Field(None, description="Nested items")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


def no_matches() -> dict[str, Any]:
    """The item shown when nothing matched."""
    return LaunchBarItem(title=NO_MATCHES_TITLE).to_dict()


def snippet_item(snippet: Snippet, file: SnippetFile) -> LaunchBarItem:
    return LaunchBarItem(
        title=snippet.title,
        quick_look_url=file.uri,
        action=PASTE_ACTION,
        action_argument=snippet.code,
        label=PASTE_LABEL,
    )


def format_launchbar(results: Sequence[SearchResult]) -> Union[list[dict[str, Any]], dict[str, Any]]:
    """
    Build LaunchBar output for located files.

    Files without snippets are left out. When no file was located at all,
    a single "no matches" item is returned instead of a list.

    Args:
        results: Located files, parsed on demand

    Returns:
        A list of file items, or the no-matches item
    """
    if not results:
        return no_matches()

    items = []
    for result in results:
        snippets = result.snippets
        if not snippets:
            continue
        item = LaunchBarItem(
            title=result.title,
            quick_look_url=result.file.uri,
            children=[snippet_item(s, result.file) for s in snippets],
        )
        items.append(item.to_dict())
    return items


def format_file_list(files: Iterable[SnippetFile]) -> list[dict[str, Any]]:
    """LaunchBar items for browsing the snippets folder."""
    return [LaunchBarItem(title=f.title, quick_look_url=f.uri).to_dict() for f in files]


def format_plain(snippets: Sequence[Snippet], output_format: OutputFormat = OutputFormat.RAW) -> str:
    """
    Render snippets for the terminal.

    Args:
        snippets: Snippets to print
        output_format: RAW prints each snippet's code, JSON a list of
            {title, code} objects

    Returns:
        Text ready to write to stdout
    """
    if output_format is OutputFormat.JSON:
        return to_json([s.to_dict() for s in snippets])
    if output_format is OutputFormat.RAW:
        return "\n".join(s.code for s in snippets)
    raise ValueError(f"Unsupported terminal output format: {output_format.value}")


def to_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)
