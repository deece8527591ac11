"""Marker literals, tag location, and indentation helpers.

A tag ``greet`` is delimited by two comment lines::

    // greet: any trailing comment
    ...region...
    // greet:end

Matching is substring containment, not line equality, so marker lines
may carry extra text.  Because the begin literal is a prefix of the end
literal, a file holding only an end marker resolves both searches to the
same line; editors treat that as a malformed pair.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .errors import NoCommentMarkerError, TagNotFoundError

logger = logging.getLogger(__name__)

LINE_SEPARATOR = "\n"


def begin_marker(tag: str) -> str:
    """Return the begin marker literal for *tag*."""
    return f"// {tag}:"


def end_marker(tag: str) -> str:
    """Return the end marker literal for *tag*."""
    return begin_marker(tag) + "end"


def split_lines(text: str) -> list[str]:
    """Split text on ``\\n``, keeping a trailing empty element.

    ``"a\\nb\\n"`` becomes ``["a", "b", ""]`` so joining restores the
    trailing newline exactly.
    """
    return text.split(LINE_SEPARATOR)


def join_lines(lines: Sequence[str]) -> str:
    return LINE_SEPARATOR.join(lines)


# =============================================================================
# Tag location
# =============================================================================


@dataclass(frozen=True)
class TagSpan:
    """Line indices of a tag's begin and end markers.

    Either index is ``None`` when the marker is absent.
    """

    begin: int | None
    end: int | None

    @property
    def found(self) -> bool:
        return self.begin is not None and self.end is not None

    @property
    def distance(self) -> int:
        """``end - begin``; only meaningful when ``found``."""
        if self.begin is None or self.end is None:
            raise ValueError("distance is undefined for a missing marker")
        return self.end - self.begin

    @property
    def is_paired(self) -> bool:
        """True when both markers exist on distinct lines, begin first."""
        return self.found and self.distance > 0


def _first_index_containing(
    lines: Sequence[str], needle: str
) -> int | None:
    for index, line in enumerate(lines):
        if needle in line:
            return index
    return None


def find_tag(lines: Sequence[str], tag: str) -> TagSpan:
    """Find the first begin and first end marker lines for *tag*.

    Both searches scan from the start independently.
    """
    span = TagSpan(
        begin=_first_index_containing(lines, begin_marker(tag)),
        end=_first_index_containing(lines, end_marker(tag)),
    )
    logger.debug("Tag %r located at %s", tag, span)
    return span


def locate_tag(
    lines: Sequence[str], tag: str, file_path: str = ""
) -> TagSpan:
    """Like ``find_tag`` but raise when either marker is missing.

    Raises:
        TagNotFoundError: If the begin or end marker is absent.
    """
    span = find_tag(lines, tag)
    if not span.found:
        raise TagNotFoundError(tag, file_path)
    return span


# =============================================================================
# Indentation
# =============================================================================


def indentation_of(line: str, tag: str = "", file_path: str = "") -> int:
    """Return the number of characters before the first ``/`` in *line*.

    Raises:
        NoCommentMarkerError: If *line* contains no ``/``.
    """
    index = line.find("/")
    if index < 0:
        raise NoCommentMarkerError(tag, file_path)
    return index


def indent_content(content: str, width: int) -> list[str]:
    """Split *content* into lines and indent every non-empty one.

    Empty lines stay empty so no trailing whitespace is introduced.
    """
    spaces = " " * width
    return [
        spaces + line if line else line for line in split_lines(content)
    ]
