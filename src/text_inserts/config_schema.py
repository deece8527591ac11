"""Unified configuration schema for text_inserts.

Defines Pydantic models for the config file structure with dedicated
sections for tag editing, sync runs, and logging.

Usage:
    from text_inserts.config_loader import load_config_files
    from text_inserts.config_schema import build_config

    raw = load_config_files()
    unified = build_config(raw)
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Section models
# ---------------------------------------------------------------------------


class TagsConfig(BaseModel):
    """Tag editing settings."""

    prefix: str = Field(
        default="",
        description="Prefix written before markers created by insert-or-add",
    )
    encoding: str | None = Field(
        default=None,
        description="File encoding; null detects it per file",
    )

    model_config = {"frozen": True}


class SyncConfig(BaseModel):
    """Defaults for the ``sync`` command.

    Attributes:
        destination: Destination folder.
        root: Folder relative sub-paths are computed from.
        include: Glob patterns used when a source is a folder.
        preserve_sub_path: Recreate sub-folders below ``root``.
        mode: ``if-different`` compares bytes; ``always`` overwrites.
    """

    destination: str | None = Field(
        default=None, description="Destination folder"
    )
    root: str | None = Field(
        default=None, description="Root for relative sub-paths"
    )
    include: list[str] = Field(
        default_factory=lambda: ["**/*"],
        description="Glob patterns for folder sources",
    )
    preserve_sub_path: bool = Field(
        default=True, description="Recreate sub-folders below root"
    )
    mode: Literal["if-different", "always"] = Field(
        default="if-different", description="Copy policy"
    )

    model_config = {"frozen": True}


class LoggingConfig(BaseModel):
    """Logging configuration.

    Attributes:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        file: Optional log file path.
        format: ``text`` or ``json``.
    """

    level: str = Field(default="INFO", description="Log level")
    file: str | None = Field(default=None, description="Log file path")
    format: Literal["text", "json"] = Field(
        default="text", description="Log record format"
    )

    model_config = {"frozen": True}


# ---------------------------------------------------------------------------
# Top-level unified config
# ---------------------------------------------------------------------------


class UnifiedConfig(BaseModel):
    """Top-level unified configuration.

    Every section has sensible defaults, so ``UnifiedConfig()``
    (zero-config) is always valid.
    """

    tags: TagsConfig = Field(default_factory=TagsConfig)
    sync: SyncConfig = Field(default_factory=SyncConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}


# ---------------------------------------------------------------------------
# Factory function
# ---------------------------------------------------------------------------


def build_config(raw_data: dict) -> UnifiedConfig:
    """Construct a ``UnifiedConfig`` from the raw dict returned by
    ``load_config_files()``.

    Handles missing sections gracefully; anything absent gets defaults.

    Args:
        raw_data: Merged configuration dictionary.

    Returns:
        Validated ``UnifiedConfig`` instance.
    """
    if not raw_data:
        return UnifiedConfig()

    return UnifiedConfig(**raw_data)
