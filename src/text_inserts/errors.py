"""Exception hierarchy for text-inserts.

Every error raised by the package derives from ``TextInsertsError`` so
callers (the CLI, batch sync runs) can catch a single base class.  Tag
errors render a multi-line message with an example of the marker format
the file is expected to contain.
"""

from __future__ import annotations

import traceback
from pathlib import Path


def _marker_example(tag: str) -> str:
    return f"`\n// {tag}: <add any comment>\n// {tag}:end\n`"


class TextInsertsError(Exception):
    """Base class for all text-inserts errors."""


# ---------------------------------------------------------------------------
# Tag errors
# ---------------------------------------------------------------------------


class TagNotFoundError(TextInsertsError):
    """Raised when a tag's begin or end marker cannot be located.

    Also raised by content extraction when the region between the
    markers holds no lines.
    """

    def __init__(self, tag: str, file_path: str = "") -> None:
        self.tag = tag
        self.file_path = file_path
        super().__init__(
            f"Could not locate\n{_marker_example(tag)}\n\n"
            f"in file path: {file_path}"
        )


class MalformedTagPairError(TextInsertsError):
    """Raised when begin and end markers resolve to the same line."""

    def __init__(self, tag: str, file_path: str = "") -> None:
        self.tag = tag
        self.file_path = file_path
        super().__init__(
            "Should have a start and an end tag of format:\n"
            f"{_marker_example(tag)}\n\n"
            f"This is missing from file path: {file_path}"
        )


class NoCommentMarkerError(TextInsertsError):
    """Raised when a begin marker line contains no ``/`` character."""

    def __init__(self, tag: str = "", file_path: str = "") -> None:
        self.tag = tag
        self.file_path = file_path
        super().__init__(
            f"Begin marker line for tag '{tag}' has no comment marker "
            f"in file path: {file_path}"
        )


# ---------------------------------------------------------------------------
# Path errors
# ---------------------------------------------------------------------------


class NoParentError(TextInsertsError):
    """Raised when a relative path is needed but no parent folder exists."""

    def __init__(self, path: Path | str) -> None:
        self.path = str(path)
        super().__init__(
            f"Cannot compute a relative path for {self.path}: "
            "it has no parent folder and none was supplied"
        )


class InvalidNameError(TextInsertsError):
    """Raised when a computed path has no usable final component."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid name '{name}': {reason}")


# ---------------------------------------------------------------------------
# I/O errors
# ---------------------------------------------------------------------------


class EncodingFailureError(TextInsertsError):
    """Raised when text cannot round-trip through the file's encoding."""

    def __init__(self, path: Path | str, encoding: str) -> None:
        self.path = str(path)
        self.encoding = encoding
        super().__init__(
            f"Content for {self.path} cannot be encoded as {encoding}"
        )


class ReadFailureError(TextInsertsError):
    """Raised when a file cannot be read or decoded as text."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to read {self.path}: {reason}")


class WriteFailureError(TextInsertsError):
    """Raised when a file cannot be written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to write {self.path}: {reason}")


class CopyFailedError(TextInsertsError):
    """Single failure kind for a content-aware copy.

    Wraps whatever went wrong underneath (read, copy, folder creation,
    name resolution) and records where it was raised.

    Attributes:
        source: The file that was being copied.
        cause: The original exception (also chained as ``__cause__``).
        file: Source file of the frame that raised ``cause``.
        function: Function name of that frame.
        line: Line number of that frame.
    """

    def __init__(
        self,
        source: Path | str,
        cause: BaseException,
        file: str = "",
        function: str = "",
        line: int = 0,
    ) -> None:
        self.source = str(source)
        self.cause = cause
        self.file = file
        self.function = function
        self.line = line
        super().__init__(
            f"{self.file} {self.function} {self.line}\n"
            f"Failed to copy {self.source}: {cause}"
        )

    @classmethod
    def from_exception(
        cls, source: Path | str, cause: BaseException
    ) -> CopyFailedError:
        """Build a ``CopyFailedError`` with provenance taken from *cause*."""
        frames = traceback.extract_tb(cause.__traceback__)
        if not frames:
            return cls(source, cause)
        origin = frames[-1]
        return cls(
            source,
            cause,
            file=Path(origin.filename).name,
            function=origin.name,
            line=origin.lineno or 0,
        )
