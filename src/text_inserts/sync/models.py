"""Pydantic models for content-aware file synchronisation.

Defines the data contracts shared by the synchronizer, engine and
reporter:

- ``SyncAction``: What a copy decided to do.
- ``SyncResult``: Outcome of syncing one source file.
- ``SyncReport``: Aggregate results for a full sync run.

All models are frozen (immutable).
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class SyncAction(str, Enum):
    """Possible outcomes of copying one file into a destination."""

    SKIP = "skip"
    OVERWRITE = "overwrite"
    CREATE = "create"


class SyncResult(BaseModel):
    """Result of syncing one source file.

    Attributes:
        source: Path of the source file.
        destination: Path of the destination file (may be empty when the
            destination could not be resolved).
        action: Action that was performed, or would be on a dry run.
        success: Whether the operation succeeded.
        error: Error message if the operation failed.
    """

    source: str
    destination: str = ""
    action: SyncAction
    success: bool = True
    error: str | None = None

    model_config = {"frozen": True}


class SyncReport(BaseModel):
    """Aggregate report for a full sync run.

    Attributes:
        destination: Destination folder of the run.
        dry_run: Whether this was a dry-run (no changes applied).
        results: List of individual sync results.
        started_at: ISO 8601 timestamp when sync started.
        completed_at: ISO 8601 timestamp when sync completed.
    """

    destination: str
    dry_run: bool = False
    results: list[SyncResult] = []
    started_at: str
    completed_at: str | None = None

    model_config = {"frozen": True}

    def _successful(self, action: SyncAction) -> list[SyncResult]:
        return [
            r for r in self.results if r.success and r.action == action
        ]

    @property
    def created(self) -> list[SyncResult]:
        """Successful results where action is CREATE."""
        return self._successful(SyncAction.CREATE)

    @property
    def overwritten(self) -> list[SyncResult]:
        """Successful results where action is OVERWRITE."""
        return self._successful(SyncAction.OVERWRITE)

    @property
    def skipped(self) -> list[SyncResult]:
        """Successful results where action is SKIP."""
        return self._successful(SyncAction.SKIP)

    @property
    def errors(self) -> list[SyncResult]:
        """Results where success is False."""
        return [r for r in self.results if not r.success]

    def summary(self) -> str:
        """Format a human-readable summary of the sync run.

        Returns:
            Multi-line summary string with counts by action.
        """
        lines = [
            f"Sync report for '{self.destination}'"
            + (" (dry run)" if self.dry_run else ""),
            f"  Created:     {len(self.created)}",
            f"  Overwritten: {len(self.overwritten)}",
            f"  Skipped:     {len(self.skipped)}",
            f"  Errors:      {len(self.errors)}",
            f"  Total:       {len(self.results)}",
        ]
        return "\n".join(lines)
