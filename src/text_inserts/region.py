"""Tag-delimited region editing on whole-text strings.

All functions are pure: they take the full text of a file and return a
new string.  Reading and writing files is ``tag_file``'s job.
"""

from __future__ import annotations

from collections.abc import Iterable

from .errors import MalformedTagPairError, TagNotFoundError
from .markers import (
    TagSpan,
    find_tag,
    indent_content,
    indentation_of,
    join_lines,
    locate_tag,
    split_lines,
)


def _locate_pair(lines: list[str], tag: str, file_path: str) -> TagSpan:
    span = locate_tag(lines, tag, file_path)
    if not span.is_paired:
        raise MalformedTagPairError(tag, file_path)
    return span


def insert_between(
    text: str, substitute: str, tag: str, file_path: str = ""
) -> str:
    """Replace the lines between *tag*'s markers with *substitute*.

    Each non-empty line of *substitute* is indented to match the begin
    marker.  Both marker lines are kept verbatim.

    Args:
        text: Full file content.
        substitute: Text to place between the markers.
        tag: Tag name (``// tag:`` ... ``// tag:end``).
        file_path: Used in error messages only.

    Returns:
        The edited text.

    Raises:
        TagNotFoundError: If either marker is missing.
        MalformedTagPairError: If both markers resolve to the same line,
            or the end marker comes first.
    """
    lines = split_lines(text)
    span = _locate_pair(lines, tag, file_path)
    begin_line = lines[span.begin]
    end_line = lines[span.end]
    width = indentation_of(begin_line, tag, file_path)

    lines[span.begin : span.end + 1] = [
        begin_line,
        *indent_content(substitute, width),
        end_line,
    ]
    return join_lines(lines)


def remove_between(text: str, tag: str, file_path: str = "") -> str:
    """Drop every line between *tag*'s markers, keeping the markers.

    Applying it to an already-empty region returns the text unchanged.

    Raises:
        TagNotFoundError: If either marker is missing.
        MalformedTagPairError: If both markers resolve to the same line.
    """
    lines = split_lines(text)
    span = _locate_pair(lines, tag, file_path)
    lines[span.begin : span.end + 1] = [lines[span.begin], lines[span.end]]
    return join_lines(lines)


def content_between(text: str, tag: str, file_path: str = "") -> str:
    """Return the text strictly between *tag*'s markers.

    A region without any lines is reported as ``TagNotFoundError`` too,
    the same as missing markers.
    """
    lines = split_lines(text)
    span = locate_tag(lines, tag, file_path)
    if span.distance <= 1:
        raise TagNotFoundError(tag, file_path)
    return join_lines(lines[span.begin + 1 : span.end])


def is_clean(text: str, tags: Iterable[str]) -> bool:
    """True when every tag exists and holds at most one line."""
    lines = split_lines(text)
    for tag in tags:
        span = find_tag(lines, tag)
        if not span.found or span.distance > 2:
            return False
    return True


def has_tag(text: str, tag: str) -> bool:
    """True when both of *tag*'s markers appear on distinct lines."""
    return find_tag(split_lines(text), tag).is_paired
