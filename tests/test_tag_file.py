"""Tests for TagFile: tag editing on files with whole-file read/write."""

from unittest.mock import patch

import pytest

from text_inserts.errors import (
    EncodingFailureError,
    MalformedTagPairError,
    ReadFailureError,
    TagNotFoundError,
)
from text_inserts.tag_file import TagFile


class TestInsert:
    """Tests for TagFile.insert(substitute, tag)."""

    def test_greet_scenario(self, tagged_file):
        path = tagged_file()
        changed = TagFile(path).insert("new line1\nnew line2", "greet")
        assert changed is True
        assert path.read_text(encoding="utf-8") == (
            "prefix\n"
            "// greet: say hello\n"
            "new line1\n"
            "new line2\n"
            "// greet:end\n"
            "suffix\n"
        )

    def test_unchanged_content_is_not_written(self, tagged_file):
        path = tagged_file()
        with patch("text_inserts.tag_file.write_file") as mock_write:
            changed = TagFile(path).insert("old text", "greet")
        assert changed is False
        mock_write.assert_not_called()

    def test_missing_tag_leaves_file_untouched(self, tagged_file):
        path = tagged_file("no markers\n")
        with pytest.raises(TagNotFoundError):
            TagFile(path).insert("x", "greet")
        assert path.read_text(encoding="utf-8") == "no markers\n"

    def test_malformed_pair(self, tagged_file):
        path = tagged_file("// greet:end\n")
        with pytest.raises(MalformedTagPairError):
            TagFile(path).insert("x", "greet")

    def test_error_message_uses_relative_path(
        self, tagged_file, tmp_path, monkeypatch
    ):
        monkeypatch.chdir(tmp_path)
        path = tagged_file("nothing\n", name="File.swift")
        with pytest.raises(TagNotFoundError) as excinfo:
            TagFile(path).insert("x", "greet")
        assert excinfo.value.file_path == "File.swift"

    def test_unreadable_file(self, tmp_path):
        with pytest.raises(ReadFailureError):
            TagFile(tmp_path / "missing.swift").insert("x", "greet")


class TestEncoding:
    """Files keep their encoding; unencodable content is rejected."""

    def test_explicit_encoding_round_trip(self, tmp_path):
        path = tmp_path / "latin.txt"
        path.write_bytes("// t: caf\u00e9\nold\n// t:end\n".encode("latin-1"))

        TagFile(path, encoding="latin-1").insert("na\u00efve", "t")

        assert path.read_bytes() == (
            "// t: caf\u00e9\nna\u00efve\n// t:end\n".encode("latin-1")
        )

    def test_unencodable_content_raises(self, tmp_path):
        path = tmp_path / "ascii.txt"
        original = b"// t:\nold\n// t:end\n"
        path.write_bytes(original)

        with pytest.raises(EncodingFailureError) as excinfo:
            TagFile(path, encoding="ascii").insert("\u65e5\u672c", "t")

        assert excinfo.value.encoding == "ascii"
        assert path.read_bytes() == original

    def test_undecodable_file_raises_read_failure(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_bytes(b"// t:\n\xff\xfe\n// t:end\n")
        with pytest.raises(ReadFailureError):
            TagFile(path, encoding="utf-8").content("t")


class TestInsertOrAddTags:
    """Tests for TagFile.insert_or_add_tags(substitute, tag, tag_prefix)."""

    def test_appends_prefixed_markers_when_absent(self, tagged_file):
        path = tagged_file("line one\n", name="Makefile")
        TagFile(path).insert_or_add_tags("body", "sect", tag_prefix="# ")
        assert path.read_text(encoding="utf-8") == (
            "line one\n"
            "\n"
            "\n"
            "# // sect:\n"
            "  body\n"
            "# // sect:end\n"
        )

    def test_appends_without_prefix(self, tagged_file):
        path = tagged_file("x")
        TagFile(path).insert_or_add_tags("y", "t")
        assert path.read_text(encoding="utf-8") == "x\n\n// t:\ny\n// t:end\n"

    def test_existing_tag_is_replaced(self, tagged_file):
        path = tagged_file()
        TagFile(path).insert_or_add_tags("fresh", "greet")
        text = path.read_text(encoding="utf-8")
        assert "fresh" in text
        assert "old text" not in text
        assert text.count("// greet:end") == 1

    def test_second_call_does_not_append_again(self, tagged_file):
        path = tagged_file("start\n")
        tag_file = TagFile(path)
        tag_file.insert_or_add_tags("one", "t")
        first = path.read_text(encoding="utf-8")
        tag_file.insert_or_add_tags("two", "t")
        second = path.read_text(encoding="utf-8")
        assert second == first.replace("one", "two")
        assert second.count("// t:end") == 1

    def test_empty_region_counts_as_absent(self, tagged_file):
        """Lookup failure is not inspected: an empty region gets new markers."""
        path = tagged_file("// t:\n// t:end\n")
        TagFile(path).insert_or_add_tags("x", "t")
        assert path.read_text(encoding="utf-8") == (
            "// t:\nx\n// t:end\n\n\n// t:\n// t:end\n"
        )

    def test_lone_end_marker_still_fails(self, tagged_file):
        path = tagged_file("// t:end\n")
        with pytest.raises(MalformedTagPairError):
            TagFile(path).insert_or_add_tags("x", "t")


class TestRemoveAll:
    def test_removes_region(self, tagged_file):
        path = tagged_file()
        assert TagFile(path).remove_all("greet") is True
        assert path.read_text(encoding="utf-8") == (
            "prefix\n// greet: say hello\n// greet:end\nsuffix\n"
        )

    def test_second_remove_is_noop(self, tagged_file):
        path = tagged_file()
        tag_file = TagFile(path)
        tag_file.remove_all("greet")
        assert tag_file.remove_all("greet") is False

    def test_missing_tag(self, tagged_file):
        with pytest.raises(TagNotFoundError):
            TagFile(tagged_file("plain\n")).remove_all("greet")


class TestQueries:
    def test_content(self, tagged_file):
        assert TagFile(tagged_file()).content("greet") == "old text"

    def test_is_clean_lifecycle(self, tagged_file):
        tag_file = TagFile(tagged_file())
        tag_file.remove_all("greet")
        assert tag_file.is_clean(["greet"])
        tag_file.insert("a\nb\nc", "greet")
        assert not tag_file.is_clean(["greet"])
