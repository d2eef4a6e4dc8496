"""Unit tests for segment classification and glob normalization."""

import pytest

from searchscope.core.patterns.globs import (
    expand_global_glob,
    is_search_path,
    normalize_glob_segment,
    partition_segments,
    split_glob_from_path,
)


class TestIsSearchPath:
    """Tests for anchor detection."""

    @pytest.mark.parametrize("segment", ["/abs/dir", "./src", "../other", ".\\src", "..\\other", "./"])
    def test_anchors(self, segment):
        assert is_search_path(segment)

    @pytest.mark.parametrize("segment", ["*.ts", "src/**/test", ".js", "foo", ".", "..foo"])
    def test_globs(self, segment):
        assert not is_search_path(segment)


class TestPartitionSegments:
    """Tests for partition_segments."""

    def test_keeps_order_within_groups(self):
        paths, globs = partition_segments(["a", "./x", "b", "/y", "c"])
        assert paths == ["./x", "/y"]
        assert globs == ["a", "b", "c"]

    def test_empty(self):
        assert partition_segments([]) == ([], [])


class TestNormalizeGlobSegment:
    """Tests for extension shorthand."""

    def test_leading_dot_becomes_star_dot(self):
        assert normalize_glob_segment(".ts") == "*.ts"

    def test_other_segments_unchanged(self):
        assert normalize_glob_segment("src/*.ts") == "src/*.ts"


class TestExpandGlobalGlob:
    """Tests for expand_global_glob."""

    def test_plain_name(self):
        assert expand_global_glob("foo") == ["**/foo/**", "**/foo"]

    def test_leading_globstar_collapses(self):
        assert expand_global_glob("**/bar") == ["**/bar/**", "**/bar"]

    def test_trailing_globstar_collapses(self):
        assert expand_global_glob("bar/**") == ["**/bar/**", "**/bar/**"]

    @pytest.mark.parametrize("pattern", ["**", "**/**", "a/**/**/b", "**/x/**"])
    def test_never_contains_nested_globstar(self, pattern):
        for expanded in expand_global_glob(pattern):
            assert "**/**" not in expanded

    def test_extension_shorthand_then_expand(self):
        assert expand_global_glob(normalize_glob_segment(".ts")) == ["**/*.ts/**", "**/*.ts"]


class TestSplitGlobFromPath:
    """Tests for splitting an anchor into path and glob tail."""

    def test_no_glob(self):
        assert split_glob_from_path("./src/app") == ("./src/app", None)

    def test_tail_starts_after_last_separator_before_glob(self):
        assert split_glob_from_path("./app/src/**/test") == ("./app/src", "**/test")

    def test_glob_in_last_component(self):
        assert split_glob_from_path("/abs/dir/*.ts") == ("/abs/dir", "*.ts")

    def test_root_only_gets_separator(self):
        assert split_glob_from_path("./**/*.ts") == ("./", "**/*.ts")

    def test_absolute_root_gets_separator(self):
        assert split_glob_from_path("/*.ts") == ("/", "*.ts")

    def test_drive_letter_gets_separator(self):
        assert split_glob_from_path("C:\\*.ts") == ("C:/", "*.ts")

    def test_backslash_separator(self):
        assert split_glob_from_path(".\\src\\*.ts") == (".\\src", "*.ts")

    @pytest.mark.parametrize("char", ["{", "}", "(", ")", "[", "]", "?"])
    def test_every_glob_character_triggers_split(self, char):
        path, tail = split_glob_from_path(f"./src/a{char}b")
        assert path == "./src"
        assert tail == f"a{char}b"

    def test_glob_without_preceding_separator_is_not_split(self):
        assert split_glob_from_path("*.ts") == ("*.ts", None)
