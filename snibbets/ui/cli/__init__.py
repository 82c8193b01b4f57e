"""Terminal user interface."""

from snibbets.ui.cli.menu import MenuCancelled, select_from_menu

__all__ = ["MenuCancelled", "select_from_menu"]
