"""Edit tag-delimited regions in text files and copy files by content.

Quick start::

    from pathlib import Path

    from text_inserts import TagFile, copy_if_different

    TagFile("Sources/App.swift").insert('print("hi")', "greet")
    copy_if_different(Path("gen/App.swift"), Path("Sources"))
"""

__version__ = "1.0.0"

from .errors import (
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
from .markers import begin_marker, end_marker, find_tag, locate_tag
from .region import content_between, insert_between, is_clean, remove_between
from .sync import (
    SyncAction,
    SyncEngine,
    copy_if_different,
    copy_or_write,
    copy_or_write_preserving_sub_path,
)
from .tag_file import TagFile

__all__ = [
    "CopyFailedError",
    "EncodingFailureError",
    "InvalidNameError",
    "MalformedTagPairError",
    "NoCommentMarkerError",
    "NoParentError",
    "ReadFailureError",
    "SyncAction",
    "SyncEngine",
    "TagFile",
    "TagNotFoundError",
    "TextInsertsError",
    "WriteFailureError",
    "__version__",
    "begin_marker",
    "content_between",
    "copy_if_different",
    "copy_or_write",
    "copy_or_write_preserving_sub_path",
    "end_marker",
    "find_tag",
    "insert_between",
    "is_clean",
    "locate_tag",
    "remove_between",
]
