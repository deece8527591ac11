"""Tests for the exception hierarchy and error messages."""

import pytest

from text_inserts.errors import (
    CopyFailedError,
    EncodingFailureError,
    InvalidNameError,
    MalformedTagPairError,
    NoCommentMarkerError,
    NoParentError,
    ReadFailureError,
    TagNotFoundError,
    TextInsertsError,
    WriteFailureError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            TagNotFoundError("t"),
            MalformedTagPairError("t"),
            NoCommentMarkerError("t"),
            NoParentError("/"),
            InvalidNameError("x", "bad"),
            EncodingFailureError("f", "ascii"),
            ReadFailureError("f", "gone"),
            WriteFailureError("f", "full"),
            CopyFailedError("f", OSError("x")),
        ],
    )
    def test_all_derive_from_base(self, error):
        assert isinstance(error, TextInsertsError)


class TestTagMessages:
    def test_not_found_message(self):
        message = str(TagNotFoundError("greet", "Sources/App.swift"))
        assert message == (
            "Could not locate\n"
            "`\n// greet: <add any comment>\n// greet:end\n`\n\n"
            "in file path: Sources/App.swift"
        )

    def test_malformed_message(self):
        message = str(MalformedTagPairError("greet", "a.swift"))
        assert message.startswith("Should have a start and an end tag")
        assert "// greet:end" in message
        assert message.endswith("This is missing from file path: a.swift")

    def test_attributes(self):
        error = TagNotFoundError("greet", "a.swift")
        assert error.tag == "greet"
        assert error.file_path == "a.swift"


class TestCopyFailedError:
    def test_from_exception_records_raising_frame(self):
        def _explode():
            raise ReadFailureError("src.txt", "denied")

        try:
            _explode()
        except ReadFailureError as exc:
            error = CopyFailedError.from_exception("src.txt", exc)

        assert error.file == "test_errors.py"
        assert error.function == "_explode"
        assert error.line > 0
        assert error.cause.reason == "denied"
        assert str(error).startswith(f"test_errors.py _explode {error.line}\n")
        assert str(error).endswith(
            "Failed to copy src.txt: Failed to read src.txt: denied"
        )

    def test_from_exception_without_traceback(self):
        error = CopyFailedError.from_exception("src.txt", OSError("x"))
        assert error.file == ""
        assert error.line == 0
