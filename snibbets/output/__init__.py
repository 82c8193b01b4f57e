"""Output formatting for LaunchBar and the terminal."""

from snibbets.output.formatter import (
    LaunchBarItem,
    format_file_list,
    format_launchbar,
    format_plain,
    no_matches,
    to_json,
)

__all__ = [
    "LaunchBarItem",
    "format_file_list",
    "format_launchbar",
    "format_plain",
    "no_matches",
    "to_json",
]
