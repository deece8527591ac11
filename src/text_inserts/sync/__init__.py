"""Content-aware file synchronisation.

Copies files into a destination only when their bytes differ from what
is already there, optionally recreating each file's sub-path.

Modules:

- ``synchronizer`` -- ``copy_or_write``, ``copy_or_write_preserving_sub_path``,
  ``plan_copy``, ``copy_if_different``.
- ``engine``       -- ``SyncEngine``: runs a batch of files and reports.
- ``models``       -- ``SyncAction``, ``SyncResult``, ``SyncReport``.
- ``reporter``     -- Human-readable and JSON report formatting.

Usage example
-------------
::

    from pathlib import Path
    from text_inserts.sync import SyncEngine, format_sync_report

    engine = SyncEngine(destination=Path("dist"), root=Path("templates"))
    report = engine.run(Path("templates").rglob("*.swift"))
    print(format_sync_report(report))
"""

from .engine import SyncEngine
from .models import SyncAction, SyncReport, SyncResult
from .reporter import (
    format_dry_run_preview,
    format_sync_report,
    report_to_json,
)
from .synchronizer import (
    copy_if_different,
    copy_or_write,
    copy_or_write_preserving_sub_path,
    plan_copy,
)

__all__ = [
    "SyncAction",
    "SyncEngine",
    "SyncReport",
    "SyncResult",
    "copy_if_different",
    "copy_or_write",
    "copy_or_write_preserving_sub_path",
    "format_dry_run_preview",
    "format_sync_report",
    "plan_copy",
    "report_to_json",
]
