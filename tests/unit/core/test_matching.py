"""Unit tests for matching paths against assembled queries."""

from pathlib import Path

from searchscope.core.query.matching import expression_matches, path_included_in_query
from searchscope.domain.entities import FolderQuery, SearchQuery
from searchscope.domain.expressions import PatternExpression
from tests.conftest import APP_ROOT, LIB_ROOT


def _expr(*patterns: str) -> PatternExpression:
    expression = PatternExpression.from_patterns(patterns)
    assert expression is not None
    return expression


class TestExpressionMatches:
    """Tests for glob matching of a single path."""

    def test_globstar_matches_any_depth(self):
        assert expression_matches(_expr("**/*.ts"), "/tmp/deep/nested/a.ts")

    def test_folder_form_matches_contents(self):
        assert expression_matches(_expr("**/node_modules/**"), "/tmp/node_modules/pkg/index.js")

    def test_no_match(self):
        assert not expression_matches(_expr("**/*.ts"), "/tmp/a.py")

    def test_dotfiles_match(self):
        assert expression_matches(_expr("**/*.env"), "/tmp/.config/.local.env")

    def test_brace_expansion(self):
        expression = _expr("**/*.{ts,js}")
        assert expression_matches(expression, "src/a.js")
        assert not expression_matches(expression, "src/a.py")

    def test_any_pattern_is_enough(self):
        assert expression_matches(_expr("**/*.py", "**/*.ts"), Path("x/y.ts"))


class TestPathIncludedInQuery:
    """Tests for deciding whether an extra file passes a query."""

    def test_no_patterns(self):
        assert path_included_in_query(SearchQuery(), Path("/tmp/anything.txt"))

    def test_exclude_wins_over_include(self):
        query = SearchQuery(include_pattern=_expr("**/*.ts"), exclude_pattern=_expr("**/gen/**"))
        assert not path_included_in_query(query, Path("/tmp/gen/a.ts"))
        assert path_included_in_query(query, Path("/tmp/src/a.ts"))

    def test_search_paths_require_containing_folder(self):
        query = SearchQuery(
            folder_queries=[FolderQuery(APP_ROOT / "src"), FolderQuery(LIB_ROOT)],
            using_search_paths=True,
        )
        assert path_included_in_query(query, APP_ROOT / "src" / "a.ts")
        assert path_included_in_query(query, LIB_ROOT / "b.py")
        assert not path_included_in_query(query, APP_ROOT / "test" / "a.ts")

    def test_folder_include_matched_relative_to_folder(self):
        query = SearchQuery(
            folder_queries=[FolderQuery(APP_ROOT, include_pattern=_expr("src/*.ts"))],
            using_search_paths=True,
        )
        assert path_included_in_query(query, APP_ROOT / "src" / "a.ts")
        assert not path_included_in_query(query, APP_ROOT / "lib" / "a.ts")

    def test_any_folder_is_enough(self):
        query = SearchQuery(
            folder_queries=[
                FolderQuery(APP_ROOT, include_pattern=_expr("*.py")),
                FolderQuery(APP_ROOT, include_pattern=_expr("*.ts")),
            ],
            using_search_paths=True,
        )
        assert path_included_in_query(query, APP_ROOT / "a.ts")

    def test_folders_ignored_without_search_paths(self):
        query = SearchQuery(folder_queries=[FolderQuery(APP_ROOT)])
        assert path_included_in_query(query, Path("/elsewhere/a.ts"))
