"""Tag editing applied to files on disk.

``TagFile`` reads the whole file, hands the text to ``region`` and writes
the result back when it changed.  This is a whole-content read/modify/write
and is not meant for very large files.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from . import region
from .errors import TagNotFoundError
from .file_handler import read_file_with_encoding, write_file
from .markers import begin_marker, end_marker

logger = logging.getLogger(__name__)


class TagFile:
    """A text file containing ``// tag:`` / ``// tag:end`` regions.

    Args:
        path: Path to the file.
        encoding: Encoding used to read and write.  ``None`` detects it on
            every read and writes back with whatever was detected.
    """

    def __init__(self, path: Path | str, encoding: str | None = None) -> None:
        self.path = Path(path)
        self.encoding = encoding

    @property
    def display_path(self) -> str:
        """Path relative to the working directory when possible."""
        try:
            return str(self.path.resolve().relative_to(Path.cwd()))
        except ValueError:
            return str(self.path)

    # ------------------------------------------------------------------
    # Read / write
    # ------------------------------------------------------------------

    def _read(self) -> tuple[str, str]:
        return read_file_with_encoding(self.path, self.encoding)

    def _write_if_changed(
        self, original: str, altered: str, encoding: str
    ) -> bool:
        if altered == original:
            logger.debug("No change for %s", self.display_path)
            return False
        count = write_file(self.path, altered, encoding)
        logger.info("Wrote %d bytes to %s", count, self.display_path)
        return True

    def read(self) -> str:
        """Return the file's full text."""
        return self._read()[0]

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def insert(self, substitute: str, tag: str) -> bool:
        """Replace the region between *tag*'s markers with *substitute*.

        Returns:
            True if the file was rewritten.

        Raises:
            TagNotFoundError: If either marker is missing.
            MalformedTagPairError: If the markers resolve to one line.
            EncodingFailureError: If the result cannot be encoded in the
                file's encoding.
        """
        content, encoding = self._read()
        altered = region.insert_between(
            content, substitute, tag, self.display_path
        )
        return self._write_if_changed(content, altered, encoding)

    def insert_or_add_tags(
        self, substitute: str, tag: str, tag_prefix: str = ""
    ) -> bool:
        """Like ``insert`` but append the marker pair when it is absent.

        Any lookup failure counts as "absent"; the reason is not checked.
        The new markers are appended after two blank lines, each prefixed
        with *tag_prefix* (e.g. ``"# "`` for files whose comments are not
        ``//``).
        """
        content, encoding = self._read()
        text = content
        try:
            region.content_between(text, tag, self.display_path)
        except TagNotFoundError:
            logger.info("Adding tag %r to %s", tag, self.display_path)
            text += (
                f"\n\n{tag_prefix}{begin_marker(tag)}"
                f"\n{tag_prefix}{end_marker(tag)}\n"
            )
        altered = region.insert_between(
            text, substitute, tag, self.display_path
        )
        return self._write_if_changed(content, altered, encoding)

    def remove_all(self, tag: str) -> bool:
        """Empty the region between *tag*'s markers.

        Returns:
            True if the file was rewritten.
        """
        content, encoding = self._read()
        altered = region.remove_between(content, tag, self.display_path)
        return self._write_if_changed(content, altered, encoding)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def content(self, tag: str) -> str:
        """Return the text between *tag*'s markers."""
        return region.content_between(self.read(), tag, self.display_path)

    def is_clean(self, tags: Iterable[str]) -> bool:
        """True when every tag exists and holds at most one line."""
        return region.is_clean(self.read(), tags)
