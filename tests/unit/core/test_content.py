"""Unit tests for smart case and multiline detection."""

import pytest

from searchscope.core.query.content import (
    contains_uppercase_character,
    is_multiline_regex_source,
    resolve_case_sensitive,
    resolve_multiline,
)


class TestContainsUppercaseCharacter:
    @pytest.mark.parametrize(
        ("target", "expected"),
        [
            ("", False),
            ("foo", False),
            ("Foo", True),
            ("123_!", False),
            ("ß", False),
            ("É", True),
        ],
    )
    def test_plain(self, target, expected):
        assert contains_uppercase_character(target) is expected

    def test_escapes_count_by_default(self):
        assert contains_uppercase_character(r"foo\W")

    def test_escapes_ignored(self):
        assert not contains_uppercase_character(r"foo\W\S\B", ignore_escaped_chars=True)

    def test_unescaped_uppercase_still_counts(self):
        assert contains_uppercase_character(r"\WFoo", ignore_escaped_chars=True)


class TestIsMultilineRegexSource:
    @pytest.mark.parametrize("source", [r"a\nb", r"a\rb", r"a\Wb"])
    def test_line_spanning_escapes(self, source):
        assert is_multiline_regex_source(source)

    @pytest.mark.parametrize("source", ["anb", r"a\\nb", r"a\sb", "trailing\\"])
    def test_not_multiline(self, source):
        assert not is_multiline_regex_source(source)


class TestResolve:
    def test_case_sensitive_kept_without_smart_case(self):
        assert resolve_case_sensitive("Foo", False, False, False) is False
        assert resolve_case_sensitive("foo", True, False, False) is True

    def test_smart_case_lowercase_keeps_flag(self):
        assert resolve_case_sensitive("foo", False, True, False) is False

    def test_smart_case_regex_escape_only(self):
        assert resolve_case_sensitive(r"\Sfoo", False, True, True) is False

    def test_smart_case_literal_escape_counts(self):
        assert resolve_case_sensitive(r"\Sfoo", False, True, False) is True

    def test_multiline_flag_wins(self):
        assert resolve_multiline("plain", True, False) is True

    def test_literal_newline_escape_not_multiline(self):
        assert resolve_multiline(r"a\nb", False, False) is False

    def test_regex_newline_escape_multiline(self):
        assert resolve_multiline(r"a\nb", False, True) is True
