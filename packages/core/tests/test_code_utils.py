"""Tests for file filtering utilities."""

from prcritic_core.config import DEFAULT_CONFIG
from prcritic_core.models import ChangedFile
from prcritic_core.utils.code import is_code_file, is_excluded, skip_reason, truncate

EXTENSIONS = DEFAULT_CONFIG["code_extensions"]


class TestIsCodeFile:
    def test_python_file_is_code(self):
        assert is_code_file("app/services/user.py", EXTENSIONS) is True

    def test_tsx_file_is_code(self):
        assert is_code_file("src/components/Button.tsx", EXTENSIONS) is True

    def test_markdown_is_not_code(self):
        assert is_code_file("README.md", EXTENSIONS) is False

    def test_image_is_not_code(self):
        assert is_code_file("assets/logo.png", EXTENSIONS) is False

    def test_lock_file_is_not_code(self):
        assert is_code_file("poetry.lock", EXTENSIONS) is False

    def test_extension_match_is_suffix_only(self):
        assert is_code_file("src/py", EXTENSIONS) is False

    def test_custom_allow_list(self):
        assert is_code_file("main.rs", [".rs"]) is True
        assert is_code_file("main.py", [".rs"]) is False


class TestIsExcluded:
    def test_full_path_glob(self):
        assert is_excluded("src/generated/models.py", ["src/generated/*.py"]) is True

    def test_basename_glob(self):
        assert is_excluded("static/js/app.min.js", ["*.min.js"]) is True

    def test_directory_prefix(self):
        assert is_excluded("migrations/0001_initial.py", ["migrations/"]) is True

    def test_nested_directory(self):
        assert is_excluded("app/migrations/0001_initial.py", ["migrations"]) is True

    def test_no_patterns(self):
        assert is_excluded("src/app.py", []) is False

    def test_partial_directory_name_not_excluded(self):
        assert is_excluded("src/mymigrations_helper.py", ["migrations"]) is False


class TestSkipReason:
    def test_reviewable_file(self):
        assert skip_reason(ChangedFile("src/app.ts", "modified", "@@"), EXTENSIONS, []) is None

    def test_removed_file(self):
        assert skip_reason(ChangedFile("src/app.ts", "removed"), EXTENSIONS, []) == "deleted"

    def test_deleted_status_tolerated(self):
        assert skip_reason(ChangedFile("src/app.ts", "deleted"), EXTENSIONS, []) == "deleted"

    def test_empty_filename(self):
        assert skip_reason(ChangedFile("", "added"), EXTENSIONS, []) == "no filename"

    def test_non_source_file(self):
        assert skip_reason(ChangedFile("docs/guide.md", "added"), EXTENSIONS, []) == "not a source file"

    def test_excluded_file(self):
        assert skip_reason(ChangedFile("vendor/lib.js", "added"), EXTENSIONS, ["vendor/"]) == "excluded"


class TestTruncate:
    def test_short_text_unchanged(self):
        assert truncate("abc", 10, "diff") == "abc"

    def test_long_text_truncated_with_marker(self):
        result = truncate("x" * 30, 10, "diff")
        assert result.startswith("x" * 10)
        assert result.endswith("... [diff truncated]")
