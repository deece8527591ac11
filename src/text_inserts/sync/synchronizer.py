"""Copy files into a destination only when their bytes differ.

Three entry points:

- ``copy_or_write`` -- copy, or overwrite unconditionally.
- ``copy_or_write_preserving_sub_path`` -- same, recreating the source's
  sub-folder under the destination.
- ``copy_if_different`` -- compare bytes first and skip identical files.

The source file is never modified.  Decisions are made from file
content, never from timestamps or sizes alone.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from ..errors import (
    CopyFailedError,
    InvalidNameError,
    NoParentError,
    TextInsertsError,
    WriteFailureError,
)
from ..file_handler import (
    contents_equal,
    copy_file,
    ensure_subfolder,
    file_exists,
    parent_folder,
    read_bytes,
    relative_path,
    write_bytes,
)
from ..validators import validate_file_name
from .models import SyncAction

logger = logging.getLogger(__name__)


def _reject_folder(target: Path) -> None:
    if target.exists() and not target.is_file():
        raise WriteFailureError(target, "a folder is in the way of the file")


# ------------------------------------------------------------------
# Unconditional copy
# ------------------------------------------------------------------


def copy_or_write(source: Path, destination_folder: Path) -> Path:
    """Copy *source* into *destination_folder*, overwriting any same-named file.

    Returns:
        Path of the destination file.

    Raises:
        WriteFailureError: If a folder occupies the destination file path.
    """
    target = destination_folder / source.name
    _reject_folder(target)
    if not file_exists(destination_folder, source.name):
        return copy_file(source, destination_folder)

    write_bytes(target, read_bytes(source))
    logger.info("Overwrote %s with %s", target, source)
    return target


def copy_or_write_preserving_sub_path(
    source: Path, root: Path, destination_folder: Path
) -> Path:
    """Like ``copy_or_write`` but keep *source*'s folder relative to *root*.

    ``root/a/b/file.txt`` lands in ``destination_folder/a/b/file.txt``.
    A source without a parent goes straight into *destination_folder*.
    """
    parent = parent_folder(source)
    if parent is None:
        folder = destination_folder
    else:
        folder = ensure_subfolder(
            destination_folder, relative_path(parent, root)
        )
    return copy_or_write(source, folder)


# ------------------------------------------------------------------
# Content-aware copy
# ------------------------------------------------------------------


def _target_relative_path(
    source: Path, rename_to: str | None, relative_to: Path | None
) -> PurePosixPath:
    base = relative_to or parent_folder(source)
    if base is None:
        raise NoParentError(source)

    relative = PurePosixPath(relative_path(source, base))
    if rename_to is not None:
        valid, reason = validate_file_name(rename_to)
        if not valid:
            raise InvalidNameError(rename_to, reason)
        relative = relative.with_name(rename_to)
    if not relative.name or relative.name in (".", ".."):
        raise InvalidNameError(str(relative), "has no file name")
    return relative


def plan_copy(
    source: Path,
    destination: Path,
    rename_to: str | None = None,
    relative_to: Path | None = None,
) -> tuple[SyncAction, Path]:
    """Decide what ``copy_if_different`` would do, without writing.

    Args:
        source: File to copy.
        destination: Destination root folder.
        rename_to: Optional replacement for the file name.
        relative_to: Folder the source's relative path is computed from;
            defaults to the source's own parent.

    Returns:
        Tuple of (action, destination file path).

    Raises:
        NoParentError: If no relative parent is available.
        InvalidNameError: If the resulting path has no usable file name.
        WriteFailureError: If a folder occupies the destination file path.
    """
    relative = _target_relative_path(source, rename_to, relative_to)
    target = destination / relative
    _reject_folder(target)

    if not file_exists(destination, relative):
        action = SyncAction.CREATE
    elif contents_equal(source, target):
        action = SyncAction.SKIP
    else:
        action = SyncAction.OVERWRITE
    logger.debug("Plan for %s -> %s: %s", source, target, action.value)
    return action, target


def copy_if_different(
    source: Path,
    destination: Path,
    rename_to: str | None = None,
    relative_to: Path | None = None,
) -> Path:
    """Copy *source* under *destination* unless an identical file is there.

    * No file at the target path: copy it there (under ``rename_to`` when
      given), creating sub-folders as needed.
    * Identical bytes: nothing is written.
    * Different bytes: the target's content is overwritten.

    Returns:
        Path of the destination file.

    Raises:
        CopyFailedError: Wrapping any failure, with provenance of the
            frame that raised it.
    """
    try:
        action, target = plan_copy(
            source, destination, rename_to, relative_to
        )
        if action is SyncAction.CREATE:
            folder = ensure_subfolder(
                destination, target.parent.relative_to(destination)
            )
            return copy_file(source, folder, target.name)
        if action is SyncAction.SKIP:
            logger.debug("Unchanged, skipping %s", target)
            return target
        write_bytes(target, read_bytes(source))
        logger.info("Overwrote %s with %s", target, source)
        return target
    except (TextInsertsError, OSError) as exc:
        raise CopyFailedError.from_exception(source, exc) from exc
