"""Unit tests for file discovery."""

import pytest

from ui5uploader.pipeline.discovery import FileDiscoveryError, find_files, normalize_base


@pytest.fixture
def project(tmp_path):
    """Base dir with a.txt, sub/b.txt, sub/deeper/c.js and a hidden file."""
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b.txt").write_text("b")
    (tmp_path / "sub" / "deeper").mkdir()
    (tmp_path / "sub" / "deeper" / "c.js").write_text("c")
    (tmp_path / "empty").mkdir()
    (tmp_path / ".hidden").write_text("h")
    return tmp_path


class TestNormalizeBase:
    """Tests for normalize_base()."""

    def test_strips_trailing_slash(self):
        assert normalize_base("/proj/") == "/proj"

    def test_strips_trailing_backslash(self):
        assert normalize_base("C:\\proj\\") == "C:\\proj"

    def test_strips_only_one_separator(self):
        assert normalize_base("/proj//") == "/proj/"

    def test_leaves_other_paths_alone(self):
        assert normalize_base("/proj") == "/proj"


class TestFindFiles:
    """Tests for find_files()."""

    def test_double_star_matches_all_files(self, project):
        """** returns files at every depth and no directories."""
        result = find_files(str(project), "**")
        assert result == ["a.txt", "sub/b.txt", "sub/deeper/c.js"]

    def test_hidden_files_are_skipped(self, project):
        """Dotfiles are not matched by wildcards."""
        assert ".hidden" not in find_files(str(project), "**")

    def test_single_star_is_not_recursive(self, project):
        """* only matches in the base dir itself."""
        assert find_files(str(project), "*") == ["a.txt"]

    def test_extension_pattern(self, project):
        """**/*.txt matches txt files at any depth, including the top."""
        assert find_files(str(project), "**/*.txt") == ["a.txt", "sub/b.txt"]

    def test_subdirectory_pattern(self, project):
        """Patterns may start with a directory."""
        assert find_files(str(project), "sub/**/*.js") == ["sub/deeper/c.js"]

    def test_trailing_separator_on_base(self, project):
        """A trailing slash on the base dir makes no difference."""
        assert find_files(f"{project}/", "**") == find_files(str(project), "**")

    def test_no_match_returns_empty_list(self, project):
        """No match is not an error."""
        assert find_files(str(project), "*.abap") == []

    def test_missing_base_raises(self, tmp_path):
        """A base dir that does not exist cannot be searched."""
        with pytest.raises(FileDiscoveryError, match="not found"):
            find_files(str(tmp_path / "missing"), "**")

    def test_file_as_base_raises(self, project):
        """The base must be a directory."""
        with pytest.raises(FileDiscoveryError, match="not a directory"):
            find_files(str(project / "a.txt"), "**")

    def test_unreadable_base_raises(self, project, monkeypatch):
        """A base dir without read permission cannot be searched."""
        monkeypatch.setattr("ui5uploader.pipeline.discovery.os.access", lambda path, mode: False)
        with pytest.raises(FileDiscoveryError, match="not readable"):
            find_files(str(project), "**")

    def test_glob_failure_raises(self, project, monkeypatch):
        """An OS error while expanding the pattern is a discovery error."""

        def failing_glob(*args, **kwargs):
            raise OSError("Too many levels of symbolic links")

        monkeypatch.setattr("ui5uploader.pipeline.discovery.glob.glob", failing_glob)
        with pytest.raises(FileDiscoveryError, match="Cannot expand pattern"):
            find_files(str(project), "**")
