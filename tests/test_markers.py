"""Tests for markers module: marker literals, tag location, indentation."""

import pytest

from text_inserts.errors import NoCommentMarkerError, TagNotFoundError
from text_inserts.markers import (
    TagSpan,
    begin_marker,
    end_marker,
    find_tag,
    indent_content,
    indentation_of,
    join_lines,
    locate_tag,
    split_lines,
)

# =============================================================================
# Marker literals and line splitting
# =============================================================================


class TestMarkerLiterals:
    def test_begin_marker(self):
        assert begin_marker("greet") == "// greet:"

    def test_end_marker_extends_begin(self):
        assert end_marker("greet") == "// greet:end"
        assert end_marker("greet").startswith(begin_marker("greet"))


class TestSplitLines:
    """Trailing newline handling for both shapes."""

    def test_trailing_newline_keeps_empty_element(self):
        assert split_lines("a\nb\n") == ["a", "b", ""]

    def test_no_trailing_newline(self):
        assert split_lines("a\nb") == ["a", "b"]

    @pytest.mark.parametrize("text", ["a\nb\n", "a\nb", "", "\n\n", "x\r\ny"])
    def test_join_restores_text(self, text):
        assert join_lines(split_lines(text)) == text


# =============================================================================
# find_tag / locate_tag
# =============================================================================


class TestFindTag:
    """Tests for find_tag(lines, tag)."""

    def test_finds_both_markers(self):
        lines = ["x", "// greet: hi", "body", "// greet:end"]
        span = find_tag(lines, "greet")
        assert span == TagSpan(begin=1, end=3)
        assert span.found
        assert span.distance == 2

    def test_marker_matched_by_containment(self):
        """Marker lines may carry indentation and trailing text."""
        lines = ["    // greet: with a comment", "    // greet:end -- done"]
        span = find_tag(lines, "greet")
        assert span == TagSpan(begin=0, end=1)

    def test_missing_begin(self):
        span = find_tag(["nothing here"], "greet")
        assert span.begin is None
        assert not span.found

    def test_only_end_marker_resolves_to_same_line(self):
        """The begin literal is a prefix of the end literal."""
        span = find_tag(["a", "// greet:end"], "greet")
        assert span == TagSpan(begin=1, end=1)
        assert span.found
        assert not span.is_paired

    def test_first_occurrence_wins(self):
        lines = [
            "// greet:",
            "// greet:end",
            "// greet:",
            "// greet:end",
        ]
        assert find_tag(lines, "greet") == TagSpan(begin=0, end=1)

    def test_similar_tag_names_do_not_match(self):
        lines = ["// greeting:", "// greeting:end"]
        assert not find_tag(lines, "greet").found

    def test_distance_undefined_when_missing(self):
        with pytest.raises(ValueError):
            TagSpan(begin=None, end=3).distance


class TestLocateTag:
    def test_returns_span(self):
        span = locate_tag(["// t:", "// t:end"], "t")
        assert span == TagSpan(begin=0, end=1)

    def test_missing_end_raises(self):
        with pytest.raises(TagNotFoundError) as excinfo:
            locate_tag(["// t: only"], "t", "a/b.swift")
        assert excinfo.value.tag == "t"
        assert "a/b.swift" in str(excinfo.value)
        assert "// t:end" in str(excinfo.value)


# =============================================================================
# Indentation
# =============================================================================


class TestIndentation:
    def test_counts_characters_before_slash(self):
        assert indentation_of("        // greet:") == 8

    def test_prefix_counts_as_indentation(self):
        assert indentation_of("# // sect:") == 2

    def test_no_slash_raises(self):
        with pytest.raises(NoCommentMarkerError):
            indentation_of("no comment here", "greet")

    def test_indents_non_empty_lines_only(self):
        assert indent_content("a\n\nb", 4) == ["    a", "", "    b"]

    def test_zero_width(self):
        assert indent_content("a\nb", 0) == ["a", "b"]

    def test_empty_content_is_one_empty_line(self):
        assert indent_content("", 3) == [""]
