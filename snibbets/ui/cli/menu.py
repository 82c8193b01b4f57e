# snibbets/ui/cli/menu.py
"""
Numbered Selection Menus

Menus are drawn on stderr so that stdout only ever carries snippet output
and can be piped or captured.
"""

import re
from typing import Optional, Sequence, TypeVar

from rich.console import Console

T = TypeVar("T")

err_console = Console(stderr=True)


class MenuCancelled(Exception):
    """Raised when the user leaves a menu without choosing."""


def render_menu(items: Sequence[T]) -> str:
    """Numbered lines for the items' titles."""
    return "\n".join(f"{number:2d}) {getattr(item, 'title')}" for number, item in enumerate(items, 1))


def prompt_text(title: str) -> str:
    """'Select a file' -> 'Select a file: '"""
    return re.sub(r":?$", ": ", title, count=1)


def select_from_menu(
    items: Sequence[T],
    title: str = "Select one",
    console: Optional[Console] = None,
) -> T:
    """
    Ask the user to pick one item by number.

    Anything that does not start with a digit cancels, as do Ctrl-C and
    end of input. Numbers out of range show the menu again.

    Args:
        items: Items with a ``title`` attribute
        title: Prompt shown under the menu
        console: Console to draw on, stderr by default

    Returns:
        The selected item

    Raises:
        MenuCancelled: If the user quits the menu
    """
    console = console or err_console

    while True:
        console.print("\n" + render_menu(items) + "\n", markup=False, highlight=False)
        try:
            answer = console.input(prompt_text(title)).strip()
        except (EOFError, KeyboardInterrupt) as e:
            raise MenuCancelled() from e

        match = re.match(r"\d+", answer)
        if not match:
            raise MenuCancelled()

        number = int(match.group())
        if 0 < number <= len(items):
            return items[number - 1]

        console.print("Out of range", style="yellow")
