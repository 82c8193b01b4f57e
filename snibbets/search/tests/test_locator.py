import pytest

from snibbets.core.constants import SearchBackendType, SearchPhase
from snibbets.core.exceptions import EmptyQueryError
from snibbets.search.backends import FilesystemBackend
from snibbets.search.locator import FileLocator, list_snippet_files, locate


class RecordingBackend(FilesystemBackend):
    def __init__(self):
        self.phases = []

    def search(self, query, folder, phase):
        self.phases.append(phase)
        return super().search(query, folder, phase)


@pytest.fixture
def snippets_dir(tmp_path):
    (tmp_path / "todo-list.md").write_text("# Todo\n    - [ ] item\n")
    (tmp_path / "other.md").write_text("# Other\nThis mentions a todo list.\n    echo other\n")
    return tmp_path


def test_name_match_skips_content_phase(snippets_dir):
    backend = RecordingBackend()
    files = FileLocator(backend).locate("todo list", snippets_dir)

    assert [f.title for f in files] == ["todo-list"]
    assert files[0].path == snippets_dir / "todo-list.md"
    assert backend.phases == [SearchPhase.NAME]


def test_content_fallback_when_no_name_matches(snippets_dir):
    backend = RecordingBackend()
    files = FileLocator(backend).locate("mentions", snippets_dir)

    assert [f.title for f in files] == ["other"]
    assert backend.phases == [SearchPhase.NAME, SearchPhase.CONTENT]


def test_no_match_in_either_phase_is_empty(snippets_dir):
    backend = RecordingBackend()
    assert FileLocator(backend).locate("kubernetes", snippets_dir) == []
    assert backend.phases == [SearchPhase.NAME, SearchPhase.CONTENT]


def test_missing_folder_yields_nothing(tmp_path):
    assert locate("anything", tmp_path / "does-not-exist") == []


def test_blank_query_is_rejected(snippets_dir):
    with pytest.raises(EmptyQueryError):
        locate("   ", snippets_dir)


def test_result_paths_are_absolute(snippets_dir, monkeypatch):
    monkeypatch.chdir(snippets_dir.parent)
    files = locate("todo", snippets_dir.name)
    assert files[0].path.is_absolute()


def test_search_wraps_files_as_results(snippets_dir):
    results = FileLocator.for_backend(SearchBackendType.FIND).search("todo", snippets_dir)
    assert len(results) == 1
    assert results[0].title == "todo-list"
    assert results[0].snippets[0].code == "- [ ] item"


def test_list_snippet_files_sorted_without_hidden_or_dirs(snippets_dir):
    (snippets_dir / ".DS_Store").write_text("")
    (snippets_dir / "archive").mkdir()
    (snippets_dir / "bash.md").write_text("# Bash\n    ls\n")

    assert [f.title for f in list_snippet_files(snippets_dir)] == ["bash", "other", "todo-list"]


def test_list_snippet_files_missing_folder(tmp_path):
    assert list_snippet_files(tmp_path / "nope") == []
