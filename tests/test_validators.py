"""Tests for input validation functions."""

import pytest

from text_inserts.validators import (
    format_validation_error,
    validate_file_name,
    validate_tag_name,
)


class TestFormatValidationError:
    def test_format(self):
        assert format_validation_error("Tag", "cannot be empty") == (
            "Tag cannot be empty"
        )


class TestValidateTagName:
    @pytest.mark.parametrize("tag", ["greet", "imports", "my-tag", "a b"])
    def test_valid(self, tag):
        assert validate_tag_name(tag) == (True, "")

    @pytest.mark.parametrize("tag", ["", "   "])
    def test_empty(self, tag):
        valid, reason = validate_tag_name(tag)
        assert not valid
        assert reason == "Tag cannot be empty"

    def test_line_break(self):
        valid, reason = validate_tag_name("a\nb")
        assert not valid
        assert "line breaks" in reason

    def test_colon(self):
        valid, reason = validate_tag_name("greet:end")
        assert not valid
        assert "':'" in reason


class TestValidateFileName:
    def test_valid(self):
        assert validate_file_name("App.swift") == (True, "")

    @pytest.mark.parametrize("name", ["", " ", ".", ".."])
    def test_rejected(self, name):
        valid, _ = validate_file_name(name)
        assert not valid

    @pytest.mark.parametrize("name", ["a/b.txt", "a\\b.txt"])
    def test_path_separators(self, name):
        valid, reason = validate_file_name(name)
        assert not valid
        assert "path separators" in reason
