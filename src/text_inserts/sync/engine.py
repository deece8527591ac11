"""Sync engine that copies a batch of files into one destination.

The ``SyncEngine`` runs every source through the synchronizer and
collects a ``SyncReport``:

1. Resolve each source's destination path.
2. Decide the action (create / overwrite / skip).
3. Execute it unless this is a dry run.
4. Record a ``SyncResult`` per file.

Error handling is per file: a single failure does not abort the run.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path
from typing import Literal

from ..errors import TextInsertsError
from ..file_handler import file_exists, parent_folder, relative_path
from .models import SyncAction, SyncReport, SyncResult
from .synchronizer import (
    copy_if_different,
    copy_or_write,
    copy_or_write_preserving_sub_path,
    plan_copy,
)

logger = logging.getLogger(__name__)

SyncMode = Literal["if-different", "always"]


class SyncEngine:
    """Copy a set of files into a destination folder.

    Args:
        destination: Destination root folder.
        root: Folder that relative sub-paths are computed from.  When
            ``None`` each file is placed directly in *destination*.
        mode: ``"if-different"`` compares bytes and skips identical files;
            ``"always"`` overwrites unconditionally.
        preserve_sub_path: Recreate the source's folder structure below
            *root* under *destination*.  Ignored without a *root*.
        rename_to: Optional new file name; only sensible for one source
            and only used in ``"if-different"`` mode.
    """

    def __init__(
        self,
        destination: Path,
        root: Path | None = None,
        mode: SyncMode = "if-different",
        preserve_sub_path: bool = True,
        rename_to: str | None = None,
    ) -> None:
        self.destination = destination
        self.root = root
        self.mode = mode
        self.preserve_sub_path = preserve_sub_path and root is not None
        self.rename_to = rename_to

    # ------------------------------------------------------------------
    # Main entry point
    # ------------------------------------------------------------------

    def run(
        self, sources: Iterable[Path], dry_run: bool = False
    ) -> SyncReport:
        """Sync every file in *sources*.

        Args:
            sources: Files to copy.
            dry_run: If ``True``, compute actions but do not execute them.

        Returns:
            A ``SyncReport`` summarising what was (or would be) done.
        """
        started_at = datetime.now(timezone.utc).isoformat()
        results: list[SyncResult] = []

        for source in sources:
            try:
                results.append(self._sync_file(source, dry_run))
            except TextInsertsError as exc:
                logger.error("Error syncing %s: %s", source, exc)
                results.append(
                    SyncResult(
                        source=str(source),
                        action=SyncAction.SKIP,
                        success=False,
                        error=str(exc),
                    )
                )

        return SyncReport(
            destination=str(self.destination),
            dry_run=dry_run,
            results=results,
            started_at=started_at,
            completed_at=datetime.now(timezone.utc).isoformat(),
        )

    # ------------------------------------------------------------------
    # Per-file sync
    # ------------------------------------------------------------------

    def _relative_to(self, source: Path) -> Path | None:
        if self.preserve_sub_path:
            return self.root
        return parent_folder(source)

    def _sync_file(self, source: Path, dry_run: bool) -> SyncResult:
        if self.mode == "always":
            return self._write_always(source, dry_run)

        relative_to = self._relative_to(source)
        action, target = plan_copy(
            source, self.destination, self.rename_to, relative_to
        )
        if not dry_run:
            target = copy_if_different(
                source, self.destination, self.rename_to, relative_to
            )
        return SyncResult(
            source=str(source), destination=str(target), action=action
        )

    def _write_always(self, source: Path, dry_run: bool) -> SyncResult:
        root = self.root if self.preserve_sub_path else None
        parent = parent_folder(source)
        folder = self.destination
        if root is not None and parent is not None:
            folder = self.destination / relative_path(parent, root)

        action = (
            SyncAction.OVERWRITE
            if file_exists(folder, source.name)
            else SyncAction.CREATE
        )
        target = folder / source.name
        if not dry_run:
            if root is not None:
                target = copy_or_write_preserving_sub_path(
                    source, root, self.destination
                )
            else:
                target = copy_or_write(source, self.destination)
        return SyncResult(
            source=str(source), destination=str(target), action=action
        )
