"""File handler module: path validation, encoding-aware read/write, folder primitives.

Provides the file/folder layer consumed by the tag editor and the
synchronizer.  Low-level ``OSError``/``UnicodeError`` are translated into
the package's own error types here so callers deal with one taxonomy.
"""

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path

from charset_normalizer import from_bytes

from .errors import (
    EncodingFailureError,
    InvalidNameError,
    ReadFailureError,
    WriteFailureError,
)
from .validators import validate_file_name

logger = logging.getLogger(__name__)

# =============================================================================
# Path Validation
# =============================================================================


def validate_file_path(path_str: str) -> Path:
    """Validate and resolve an input file path.

    Args:
        path_str: Path string to an existing file.

    Returns:
        Resolved Path object pointing to the real file.

    Raises:
        ValueError: If path doesn't exist or is not a file.
    """
    resolved = Path(path_str).expanduser().resolve()
    if not resolved.exists():
        raise ValueError(f"File not found: {path_str}")
    if not resolved.is_file():
        raise ValueError(f"Path is not a file: {path_str}")
    return resolved


def validate_folder_path(path_str: str, create: bool = False) -> Path:
    """Validate and resolve a folder path.

    Args:
        path_str: Path string to a folder.
        create: Create the folder (and parents) when it is missing.

    Raises:
        ValueError: If the folder is missing (and ``create`` is False) or
            the path names an existing file.
    """
    resolved = Path(path_str).expanduser().resolve()
    if resolved.exists() and not resolved.is_dir():
        raise ValueError(f"Path is not a folder: {path_str}")
    if not resolved.exists():
        if not create:
            raise ValueError(f"Folder not found: {path_str}")
        resolved.mkdir(parents=True, exist_ok=True)
    return resolved


# =============================================================================
# File Read/Write
# =============================================================================


def read_bytes(path: Path) -> bytes:
    """Read raw bytes, raising ``ReadFailureError`` on OS errors."""
    try:
        return path.read_bytes()
    except OSError as exc:
        raise ReadFailureError(path, exc.strerror or str(exc)) from exc


def read_file_with_encoding(
    path: Path, encoding: str | None = None
) -> tuple[str, str]:
    """Read a file as text.

    When *encoding* is ``None`` the encoding is detected with
    charset-normalizer.  Defaults to UTF-8 for empty files.

    Args:
        path: Path to the file to read.
        encoding: Explicit encoding, skipping detection.

    Returns:
        Tuple of (content_string, encoding).

    Raises:
        ReadFailureError: If the file cannot be read or is not valid text.
    """
    raw = read_bytes(path)

    if encoding is not None:
        try:
            return (raw.decode(encoding), encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise ReadFailureError(path, str(exc)) from exc

    if not raw:
        return ("", "utf-8")

    result = from_bytes(raw).best()
    if result is None:
        raise ReadFailureError(path, "content is not valid text")

    detected = result.encoding
    # Normalize ascii to utf-8 (ascii is a strict subset of utf-8)
    if detected == "ascii":
        detected = "utf-8"
    logger.debug("Detected encoding %s for %s", detected, path)
    return (str(result), detected)


def write_bytes(path: Path, data: bytes) -> int:
    """Write raw bytes, raising ``WriteFailureError`` on OS errors.

    Returns:
        Number of bytes written.
    """
    try:
        path.write_bytes(data)
    except OSError as exc:
        raise WriteFailureError(path, exc.strerror or str(exc)) from exc
    return len(data)


def write_file(path: Path, content: str, encoding: str = "utf-8") -> int:
    """Write content to a file, creating parent directories as needed.

    The content is encoded before the file is opened, so an encoding
    failure leaves the existing file untouched.

    Args:
        path: Path to the output file.
        content: String content to write.
        encoding: Encoding to use (default: utf-8).

    Returns:
        Number of bytes written.

    Raises:
        EncodingFailureError: If *content* cannot be encoded.
        WriteFailureError: If the file cannot be written.
    """
    try:
        encoded = content.encode(encoding)
    except (UnicodeEncodeError, LookupError) as exc:
        raise EncodingFailureError(path, encoding) from exc
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteFailureError(path, exc.strerror or str(exc)) from exc
    return write_bytes(path, encoded)


# =============================================================================
# Folder Primitives
# =============================================================================


def file_exists(folder: Path, relative: str | Path) -> bool:
    """True when *relative* names an existing file under *folder*."""
    return (folder / relative).is_file()


def copy_file(source: Path, folder: Path, name: str | None = None) -> Path:
    """Copy *source* into *folder*, optionally under a different name.

    The copy goes to exactly ``folder / name``; a folder already sitting
    at that path is an error, not a place to copy into.

    Returns:
        Path of the copy.
    """
    target_name = name or source.name
    valid, reason = validate_file_name(target_name)
    if not valid:
        raise InvalidNameError(target_name, reason)
    target = folder / target_name
    try:
        shutil.copyfile(source, target)
        shutil.copystat(source, target)
    except OSError as exc:
        raise WriteFailureError(target, exc.strerror or str(exc)) from exc
    logger.info("Copied %s -> %s", source, target)
    return target


def ensure_subfolder(folder: Path, relative: str | Path) -> Path:
    """Create ``folder / relative`` if needed and return it."""
    target = folder / relative
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteFailureError(target, exc.strerror or str(exc)) from exc
    return target


def parent_folder(entry: Path) -> Path | None:
    """Return the parent folder of *entry*, or ``None`` at a root."""
    parent = entry.parent
    if parent == entry:
        return None
    return parent


def relative_path(entry: Path, base: Path) -> str:
    """Return *entry* relative to *base* in POSIX form.

    Raises:
        InvalidNameError: If *entry* is not located under *base*.
    """
    try:
        return entry.relative_to(base).as_posix()
    except ValueError:
        raise InvalidNameError(
            str(entry), f"not located under {base}"
        ) from None


def _file_size(path: Path) -> int:
    try:
        return path.stat().st_size
    except OSError as exc:
        raise ReadFailureError(path, exc.strerror or str(exc)) from exc


def contents_equal(first: Path, second: Path) -> bool:
    """Compare two files byte for byte.

    Sizes are checked first; timestamps are never consulted.
    """
    if _file_size(first) != _file_size(second):
        return False
    return read_bytes(first) == read_bytes(second)


def collect_files(root: Path, patterns: Iterable[str]) -> list[Path]:
    """Return sorted regular files under *root* matching any glob pattern."""
    found: set[Path] = set()
    for pattern in patterns:
        found.update(p for p in root.glob(pattern) if p.is_file())
    return sorted(found)
