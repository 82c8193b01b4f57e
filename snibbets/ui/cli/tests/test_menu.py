import io

import pytest
from rich.console import Console

from snibbets.core.models import Snippet
from snibbets.ui.cli.menu import MenuCancelled, prompt_text, render_menu, select_from_menu

ITEMS = [Snippet("First", "1"), Snippet("Second", "2")]


def make_console(monkeypatch, answers):
    console = Console(file=io.StringIO(), width=80)
    replies = iter(answers)

    def fake_input(prompt="", **kwargs):
        console.print(prompt, end="")
        reply = next(replies)
        if isinstance(reply, BaseException):
            raise reply
        return reply

    monkeypatch.setattr(console, "input", fake_input)
    return console


def test_render_menu():
    assert render_menu(ITEMS) == " 1) First\n 2) Second"


def test_prompt_text():
    assert prompt_text("Select a file") == "Select a file: "
    assert prompt_text("Select one:") == "Select one: "


def test_select_by_number(monkeypatch):
    console = make_console(monkeypatch, ["2"])
    assert select_from_menu(ITEMS, "Select snippet", console=console) is ITEMS[1]
    assert "Select snippet: " in console.file.getvalue()


def test_out_of_range_asks_again(monkeypatch):
    console = make_console(monkeypatch, ["5", "0", "1"])
    assert select_from_menu(ITEMS, console=console) is ITEMS[0]
    assert console.file.getvalue().count("Out of range") == 2


@pytest.mark.parametrize("answer", ["q", "", EOFError(), KeyboardInterrupt()])
def test_cancel(monkeypatch, answer):
    console = make_console(monkeypatch, [answer])
    with pytest.raises(MenuCancelled):
        select_from_menu(ITEMS, console=console)
