"""Sync report formatting functions.

Provides human-readable and machine-readable output for sync runs:

- ``format_sync_report`` -- full post-sync summary.
- ``format_dry_run_preview`` -- dry-run preview grouped by action.
- ``report_to_json`` -- structured dict for ``--json`` output.
"""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import SyncReport

from .models import SyncAction

# ------------------------------------------------------------------
# Human-readable report
# ------------------------------------------------------------------


def format_sync_report(report: SyncReport) -> str:
    """Format a complete sync report as human-readable text.

    Sections are only included when they contain at least one result.
    Skipped files are summarised by count only to avoid excessive output.

    Args:
        report: The completed sync report.

    Returns:
        Multi-line formatted string.
    """
    lines: list[str] = []

    header = f"Sync report for '{report.destination}'"
    if report.dry_run:
        header += " (DRY RUN)"
    lines.append(header)
    lines.append(f"Started: {report.started_at}")
    if report.completed_at:
        lines.append(f"Completed: {report.completed_at}")
    lines.append("")

    lines.append(
        f"Synced {len(report.results)} files: "
        f"{len(report.created)} created, "
        f"{len(report.overwritten)} overwritten, "
        f"{len(report.skipped)} unchanged, "
        f"{len(report.errors)} errors"
    )
    lines.append("")

    if report.created:
        lines.append("Created:")
        for r in report.created:
            lines.append(f"  {r.source} -> {r.destination}")
        lines.append("")

    if report.overwritten:
        lines.append("Overwritten:")
        for r in report.overwritten:
            lines.append(f"  {r.source} -> {r.destination}")
        lines.append("")

    if report.errors:
        lines.append("Errors:")
        for r in report.errors:
            # Copy errors put provenance on the first line
            message = (r.error or "").splitlines()
            lines.append(f"  {r.source}: {message[-1] if message else ''}")
        lines.append("")

    if report.skipped:
        lines.append(f"Unchanged: {len(report.skipped)} files")
        lines.append("")

    return "\n".join(lines).rstrip()


# ------------------------------------------------------------------
# Dry-run preview
# ------------------------------------------------------------------


def format_dry_run_preview(report: SyncReport) -> str:
    """Format a dry-run preview grouped by action type.

    Each proposed action is shown as ``source -> destination`` under an
    ``[ACTION]`` heading.

    Args:
        report: A dry-run sync report (``dry_run=True``).

    Returns:
        Multi-line formatted string.
    """
    lines: list[str] = []
    lines.append("DRY RUN -- No changes will be made")
    lines.append(f"Destination: {report.destination}")
    lines.append("")

    groups: dict[SyncAction, list[tuple[str, str]]] = defaultdict(list)
    for r in report.results:
        if r.success:
            groups[r.action].append((r.source, r.destination))

    for action in (SyncAction.CREATE, SyncAction.OVERWRITE):
        if action not in groups:
            continue
        lines.append(f"[{action.value.upper()}]")
        for source, destination in groups[action]:
            lines.append(f"  {source} -> {destination}")
        lines.append("")

    skip_count = len(groups.get(SyncAction.SKIP, []))
    if skip_count > 0:
        lines.append(f"Skipped: {skip_count} files (unchanged)")
        lines.append("")

    if report.errors:
        lines.append(f"Errors: {len(report.errors)} files")
        lines.append("")

    if not any(a != SyncAction.SKIP for a in groups):
        lines.append("No changes needed.")
        lines.append("")

    return "\n".join(lines).rstrip()


# ------------------------------------------------------------------
# JSON output
# ------------------------------------------------------------------


def report_to_json(report: SyncReport) -> dict:
    """Convert a sync report to a structured dict for JSON serialisation.

    Args:
        report: The sync report.

    Returns:
        Dict with run info, counts, and per-result details.
    """
    results_list = []
    for r in report.results:
        entry: dict = {
            "source": r.source,
            "destination": r.destination,
            "action": r.action.value,
            "success": r.success,
        }
        if r.error:
            entry["error"] = r.error
        results_list.append(entry)

    return {
        "destination": report.destination,
        "dry_run": report.dry_run,
        "started_at": report.started_at,
        "completed_at": report.completed_at,
        "counts": {
            "total": len(report.results),
            "created": len(report.created),
            "overwritten": len(report.overwritten),
            "skipped": len(report.skipped),
            "errors": len(report.errors),
        },
        "results": results_list,
    }
