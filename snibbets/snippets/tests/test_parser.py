from snibbets.core.models import Snippet
from snibbets.snippets.parser import clean_title, has_multiple_snippets, parse, split_sections


def test_title_trailing_punctuation_is_trimmed():
    assert clean_title(" Example:") == "Example"
    assert clean_title(" Foo.  ") == "Foo"
    assert clean_title(" Plain title ") == "Plain title"
    assert clean_title(" Ellipsis..") == "Ellipsis."


def test_one_snippet_per_header_with_code():
    text = (
        "# Shell\n"
        "    ls -la\n"
        "## Python:\n"
        "```python\n"
        "print('hi')\n"
        "```\n"
        "### Empty header\n"
        "Just prose, no code.\n"
    )
    assert parse(text) == [
        Snippet(title="Shell", code="ls -la"),
        Snippet(title="Python", code="print('hi')"),
    ]


def test_intro_header_without_code_is_dropped():
    text = (
        "# First\n"
        "Some intro text\n"
        "## Alpha.\n"
        "    x = 1\n"
        "    y = 2\n"
    )
    assert parse(text) == [Snippet(title="Alpha", code="x = 1\ny = 2")]


def test_text_before_first_header_is_ignored():
    text = "    preamble = True\n# Real\n    real = True\n"
    assert parse(text) == [Snippet(title="Real", code="real = True")]


def test_no_headers_means_no_snippets():
    assert parse("    code = 1\n") == []
    assert parse("") == []


def test_whitespace_only_code_is_dropped():
    assert parse("# Blank\n    \n") == []


def test_crlf_line_endings():
    text = "# Windows\r\n    dir /b\r\n"
    assert parse(text) == [Snippet(title="Windows", code="dir /b")]


def test_split_sections_keeps_document_order():
    sections = split_sections("intro\n# A\nbody a\n## B\nbody b")
    assert [title for title, _ in sections] == ["A", "B"]
    assert sections[0][1] == "body a\n"


def test_has_multiple_snippets():
    assert has_multiple_snippets("# one\n# two")
    assert not has_multiple_snippets("# one\n    code")


def test_fences_with_info_strings_keep_their_snippets():
    text = '# Plot\n```python title="plot.py"\nplot()\n```\n# R\n```{r}\nx <- 1\n```\n'
    assert parse(text) == [
        Snippet(title="Plot", code="plot()"),
        Snippet(title="R", code="x <- 1"),
    ]
