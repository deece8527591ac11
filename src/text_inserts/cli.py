"""Command line entry point for text-inserts.

Subcommands edit tagged regions in a file (``insert``, ``insert-or-add``,
``remove``, ``extract``, ``check``) or copy files into a destination only
when their content changed (``sync``).
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv

from . import __version__
from .config import Config, load_config
from .config_loader import ensure_config, load_config_files
from .config_schema import UnifiedConfig, build_config
from .errors import TextInsertsError
from .file_handler import (
    collect_files,
    read_file_with_encoding,
    validate_file_path,
    validate_folder_path,
)
from .logger import setup_logging
from .region import has_tag
from .sync import (
    SyncEngine,
    format_dry_run_preview,
    format_sync_report,
    report_to_json,
)
from .tag_file import TagFile
from .validators import validate_tag_name

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _require_tags(tags: list[str]) -> None:
    for tag in tags:
        valid, reason = validate_tag_name(tag)
        if not valid:
            raise ValueError(f"{reason}: {tag!r}")


def _read_substitute(args: argparse.Namespace) -> str:
    if args.content is not None:
        return args.content
    if args.content_file == "-":
        return sys.stdin.read()
    content, _ = read_file_with_encoding(validate_file_path(args.content_file))
    return content


def _tag_file(args: argparse.Namespace, config: Config) -> TagFile:
    return TagFile(validate_file_path(args.file), config.encoding)


def _report_change(changed: bool, path: str) -> None:
    if changed:
        logger.info("Updated %s", path)
    else:
        logger.info("%s already up to date", path)


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------


def cmd_insert(
    args: argparse.Namespace, config: Config, unified: UnifiedConfig
) -> int:
    _require_tags([args.tag])
    tag_file = _tag_file(args, config)
    changed = tag_file.insert(_read_substitute(args), args.tag)
    _report_change(changed, tag_file.display_path)
    return EXIT_OK


def cmd_insert_or_add(
    args: argparse.Namespace, config: Config, unified: UnifiedConfig
) -> int:
    _require_tags([args.tag])
    tag_file = _tag_file(args, config)
    changed = tag_file.insert_or_add_tags(
        _read_substitute(args), args.tag, config.tag_prefix
    )
    _report_change(changed, tag_file.display_path)
    return EXIT_OK


def cmd_remove(
    args: argparse.Namespace, config: Config, unified: UnifiedConfig
) -> int:
    _require_tags([args.tag])
    tag_file = _tag_file(args, config)
    changed = tag_file.remove_all(args.tag)
    _report_change(changed, tag_file.display_path)
    return EXIT_OK


def cmd_extract(
    args: argparse.Namespace, config: Config, unified: UnifiedConfig
) -> int:
    _require_tags([args.tag])
    print(_tag_file(args, config).content(args.tag))
    return EXIT_OK


def cmd_check(
    args: argparse.Namespace, config: Config, unified: UnifiedConfig
) -> int:
    _require_tags(args.tag)
    tag_file = _tag_file(args, config)
    if tag_file.is_clean(args.tag):
        print(f"{tag_file.display_path}: clean")
        return EXIT_OK

    text = tag_file.read()
    for tag in args.tag:
        if not has_tag(text, tag):
            print(f"{tag_file.display_path}: tag '{tag}' is missing")
        elif not tag_file.is_clean([tag]):
            print(f"{tag_file.display_path}: tag '{tag}' has content")
    return EXIT_FAILURE


def cmd_sync(
    args: argparse.Namespace, config: Config, unified: UnifiedConfig
) -> int:
    settings = unified.sync
    destination_str = args.destination or settings.destination
    if not destination_str:
        raise ValueError(
            "No destination given. Pass --destination or set "
            "'sync.destination' in the config file."
        )

    source_paths = [Path(s).expanduser().resolve() for s in args.sources]
    for path in source_paths:
        if not path.exists():
            raise ValueError(f"Source not found: {path}")
    if args.rename and (
        len(source_paths) != 1 or not source_paths[0].is_file()
    ):
        raise ValueError("--rename needs exactly one source file")

    root_str = args.root or settings.root
    root = Path(root_str).expanduser().resolve() if root_str else None
    if root is None and len(source_paths) == 1 and source_paths[0].is_dir():
        root = source_paths[0]

    patterns = args.include or settings.include
    files: list[Path] = []
    for path in source_paths:
        if path.is_dir():
            files.extend(collect_files(path, patterns))
        else:
            files.append(path)

    if args.dry_run:
        destination = Path(destination_str).expanduser().resolve()
    else:
        destination = validate_folder_path(destination_str, create=True)

    engine = SyncEngine(
        destination=destination,
        root=root,
        mode="always" if args.always else settings.mode,
        preserve_sub_path=settings.preserve_sub_path and not args.flat,
        rename_to=args.rename,
    )
    report = engine.run(files, dry_run=args.dry_run)

    if args.json:
        print(json.dumps(report_to_json(report), indent=2))
    elif report.dry_run:
        print(format_dry_run_preview(report))
    else:
        print(format_sync_report(report))
    return EXIT_FAILURE if report.errors else EXIT_OK


def cmd_init_config(
    args: argparse.Namespace, config: Config, unified: UnifiedConfig
) -> int:
    print(ensure_config())
    return EXIT_OK


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def _add_tag_target(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", help="File containing the tag markers")
    parser.add_argument("--tag", required=True, help="Tag name")


def _add_content_source(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--content", help="Text to insert between the markers")
    group.add_argument(
        "--content-file",
        help="Read the text to insert from this file ('-' for stdin)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="text-inserts",
        description="Edit tag-delimited regions in text files and sync files by content",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Markers look like this (trailing text after the colon is allowed):

  // greet: say hello
  ...replaced content...
  // greet:end

Examples:
  # Replace the greet region
  text-inserts insert Sources/App.swift --tag greet --content 'print("hi")'

  # Add the markers at the end of the file if they are missing
  text-inserts insert-or-add Makefile --tag deps --prefix '# ' --content-file deps.mk

  # Copy generated files, skipping the ones whose bytes did not change
  text-inserts sync build/gen --destination Sources/Generated --include '**/*.swift'
        """,
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging"
    )
    parser.add_argument("--log-file", help="Also append log records to this file")
    parser.add_argument(
        "--log-format",
        choices=["text", "json"],
        help="Log record format (default: text)",
    )
    parser.add_argument(
        "--encoding",
        help="Encoding of tagged files (default: detect per file)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"text-inserts version {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    insert = subparsers.add_parser(
        "insert", help="Replace the content between a tag's markers"
    )
    _add_tag_target(insert)
    _add_content_source(insert)
    insert.set_defaults(handler=cmd_insert)

    insert_or_add = subparsers.add_parser(
        "insert-or-add",
        help="Like insert, but append the markers when they are missing",
    )
    _add_tag_target(insert_or_add)
    _add_content_source(insert_or_add)
    insert_or_add.add_argument(
        "--prefix",
        help="Text written before newly created markers (e.g. '# ')",
    )
    insert_or_add.set_defaults(handler=cmd_insert_or_add)

    remove = subparsers.add_parser(
        "remove", help="Delete the content between a tag's markers"
    )
    _add_tag_target(remove)
    remove.set_defaults(handler=cmd_remove)

    extract = subparsers.add_parser(
        "extract", help="Print the content between a tag's markers"
    )
    _add_tag_target(extract)
    extract.set_defaults(handler=cmd_extract)

    check = subparsers.add_parser(
        "check",
        help="Exit 0 when every tag exists and holds at most one line",
    )
    check.add_argument("file", help="File containing the tag markers")
    check.add_argument(
        "--tag", required=True, action="append", help="Tag name (repeatable)"
    )
    check.set_defaults(handler=cmd_check)

    sync = subparsers.add_parser(
        "sync", help="Copy files into a destination when their bytes differ"
    )
    sync.add_argument("sources", nargs="+", help="Files or folders to copy")
    sync.add_argument("--destination", help="Destination folder")
    sync.add_argument(
        "--root", help="Folder that relative sub-paths are computed from"
    )
    sync.add_argument(
        "--include",
        action="append",
        help="Glob pattern for folder sources (repeatable, default: **/*)",
    )
    sync.add_argument("--rename", help="New file name for a single source")
    sync.add_argument(
        "--always",
        action="store_true",
        help="Overwrite even when the content is identical",
    )
    sync.add_argument(
        "--flat",
        action="store_true",
        help="Do not recreate sub-folders under the destination",
    )
    sync.add_argument(
        "--dry-run", action="store_true", help="Show what would be copied"
    )
    sync.add_argument(
        "--json", action="store_true", help="Print the report as JSON"
    )
    sync.set_defaults(handler=cmd_sync)

    init_config = subparsers.add_parser(
        "init-config", help="Create a starter config file if none exists"
    )
    init_config.set_defaults(handler=cmd_init_config)

    return parser


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, load configuration, and run one subcommand.

    Returns:
        Process exit code: 0 on success, 1 on a failed operation (or an
        unclean ``check``), 2 on bad input or configuration.
    """
    args = build_parser().parse_args(argv)

    load_dotenv()
    try:
        unified = build_config(load_config_files())
        config = load_config(
            tag_prefix=getattr(args, "prefix", None),
            encoding=args.encoding,
            debug=args.debug,
            log_file=args.log_file,
            log_format=args.log_format,
            unified=unified,
        )
    except (ValueError, OSError, yaml.YAMLError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    setup_logging(
        debug=config.debug,
        log_file=config.log_file,
        debug_format=config.log_format,
        level=config.log_level,
    )

    try:
        return args.handler(args, config, unified)
    except TextInsertsError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_USAGE


def run() -> None:
    """Console script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    run()
