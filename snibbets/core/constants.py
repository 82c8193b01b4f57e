# snibbets/core/constants.py
"""
Constants and Enums for Snibbets

Defines all constant values used throughout the application.
"""

from enum import Enum
from typing import Final, Optional

# ============================================
# Launcher Output
# ============================================
NO_MATCHES_TITLE: Final[str] = "No matching snippets found"
PASTE_ACTION: Final[str] = "pasteIt"
PASTE_LABEL: Final[str] = "Paste"


# ============================================
# Search
# ============================================
class SearchBackendType(str, Enum):
    """Available file search backends."""

    FIND = "find"
    SPOTLIGHT = "spotlight"


class SearchPhase(str, Enum):
    """Phases of a search, tried in declaration order."""

    NAME = "name"
    CONTENT = "content"


# ============================================
# Output Formats
# ============================================
class OutputFormat(str, Enum):
    """How results are written to stdout."""

    RAW = "raw"
    JSON = "json"
    LAUNCHBAR = "launchbar"

    @classmethod
    def parse(cls, value: str) -> Optional["OutputFormat"]:
        """
        Resolve a user supplied format name.

        Anything mentioning ``launchbar`` or ``lb`` selects launcher output.

        Returns:
            The matching format, or None when the value is not recognised
        """
        value = value.strip().lower()
        if "launchbar" in value or "lb" in value:
            return cls.LAUNCHBAR
        for member in cls:
            if member.value == value:
                return member
        return None
