import pytest

from snibbets.core.exceptions import (
    EmptyQueryError,
    QueryException,
    SearchToolError,
    SnibbetsException,
    SnippetFileReadError,
)
from snibbets.core.models import SearchResult, SnippetFile
from snibbets.utils.logger import log_exception, logger, setup_logger


def test_empty_query_error():
    error = EmptyQueryError()
    assert isinstance(error, QueryException)
    assert str(error) == "[EMPTY_QUERY] No search query"


def test_search_tool_error_carries_backend():
    error = SearchToolError("mdfind failed", backend="spotlight")
    assert isinstance(error, SnibbetsException)
    assert error.to_dict() == {
        "error": "SEARCH_TOOL_ERROR",
        "message": "mdfind failed",
        "context": {"backend": "spotlight"},
    }


def test_unreadable_snippet_file_raises(tmp_path):
    result = SearchResult(file=SnippetFile.from_path(tmp_path / "gone.md"))
    with pytest.raises(SnippetFileReadError) as exc_info:
        result.snippets
    assert exc_info.value.context["path"] == str(tmp_path / "gone.md")


def test_snippets_are_parsed_once(tmp_path):
    path = tmp_path / "once.md"
    path.write_text("# Once\n    echo once\n")
    result = SearchResult(file=SnippetFile.from_path(path))

    first = result.snippets
    path.unlink()
    assert result.snippets is first


def test_setup_logger_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "snibbets.log"
    setup_logger(level="DEBUG", log_file=str(log_file))
    logger.debug("phase name matched 0 files")
    logger.remove()

    assert "phase name matched 0 files" in log_file.read_text()


def test_log_exception_reaches_default_level(tmp_path):
    log_file = tmp_path / "snibbets.log"
    setup_logger(level="WARNING", log_file=str(log_file))
    error = SearchToolError("mdfind exited with status 1", backend="spotlight")
    log_exception(error, error.context)
    logger.remove()

    written = log_file.read_text()
    assert "SearchToolError" in written
    assert "mdfind exited with status 1" in written
