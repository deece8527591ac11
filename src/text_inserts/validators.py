"""
Input validation functions for text-inserts.

Provides validation for tag names and file names so bad input is
rejected before any file is read or written.
"""


# ---------------------------------------------------------------------------
# Error message formatting helpers
# ---------------------------------------------------------------------------


def format_validation_error(field_name: str, reason: str) -> str:
    """
    Generate consistent error message for validation failures.

    Args:
        field_name: Human-readable field name (e.g., "Tag")
        reason: Description of validation failure (e.g., "cannot be empty")

    Returns:
        Formatted error message string
    """
    return f"{field_name} {reason}"


def validate_tag_name(tag: str) -> tuple[bool, str]:
    """
    Validate a tag name.

    Args:
        tag: The tag to validate

    Returns:
        Tuple of (is_valid, error_message).
        Returns (True, "") if valid, (False, reason) if invalid.

    Validation rules:
        - Cannot be empty or whitespace-only
        - Cannot contain line breaks (markers are single lines)
        - Cannot contain ':' (it terminates the marker literal)
    """
    if not tag or not tag.strip():
        return (False, format_validation_error("Tag", "cannot be empty"))

    if "\n" in tag or "\r" in tag:
        return (
            False,
            format_validation_error("Tag", "cannot contain line breaks"),
        )

    if ":" in tag:
        return (False, format_validation_error("Tag", "cannot contain ':'"))

    return (True, "")


def validate_file_name(name: str) -> tuple[bool, str]:
    """
    Validate a bare file name (no directory components).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if not name or not name.strip():
        return (
            False,
            format_validation_error("File name", "cannot be empty"),
        )

    if name in (".", ".."):
        return (
            False,
            format_validation_error("File name", f"cannot be '{name}'"),
        )

    if "/" in name or "\\" in name:
        return (
            False,
            format_validation_error(
                "File name", "cannot contain path separators"
            ),
        )

    return (True, "")
