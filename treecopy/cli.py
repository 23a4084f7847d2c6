"""
Copy files listed in a text file into a directory, keeping part of each
file's folder hierarchy.

Usage:
    treecopy -l list_of_files.txt [-d D:/work/out] [-r logs]

Example:
    A list line `C:/work/logs/errors/app.log` with `-r logs -d D:/out`
    is copied to `D:/out/errors/app.log`. Without `-r` it is copied to
    `D:/out/work/logs/errors/app.log`.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from treecopy.config import APP_NAME, APP_VERSION, HASH_ALGO_DEFAULT, LOG_FORMAT
from treecopy.core.copier import execute_copy
from treecopy.core.hashing import SUPPORTED_ALGOS
from treecopy.core.manifest import read_manifest
from treecopy.core.planner import build_copy_plan, validate_copy_inputs
from treecopy.core.report import build_report_dict, write_report_json
from treecopy.models import CopyPlanItem

logger = logging.getLogger(__name__)

_LEVELS = {"ERROR": logging.ERROR, "WARNING": logging.WARNING, "INFO": logging.INFO}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Copy files recursive.",
    )
    parser.add_argument(
        "-l", "--list",
        dest="list_path",
        required=True,
        metavar="LIST",
        help="File to get list from (e.g. list_of_files.txt).",
    )
    parser.add_argument(
        "-d", "--directory",
        default=None,
        help="Target directory (default: current directory).",
    )
    parser.add_argument(
        "-r", "--root",
        dest="root_folder_name",
        default=None,
        help="Take recursion starting from given folder name (e.g. logs).",
    )
    parser.add_argument(
        "--strict-root",
        action="store_true",
        help="Fail instead of warning when a path does not contain the root folder name.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print what would be copied without copying.",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Hash-check every copied file against its source.",
    )
    parser.add_argument(
        "--hash-algo",
        choices=SUPPORTED_ALGOS,
        default=HASH_ALGO_DEFAULT,
        help="Hash used by --verify (default: %(default)s).",
    )
    parser.add_argument(
        "--report",
        metavar="PATH",
        help="Write a JSON report of the run to PATH.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug output.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only warnings and errors.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return parser


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _log_progress(idx: int, total: int, item: CopyPlanItem) -> None:
    logger.info("%d/%d  %s -> %s", idx, total, item.src, item.dst)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose, args.quiet)

    errors = validate_copy_inputs(args.list_path, args.directory)
    if errors:
        parser.error(" ".join(e.message for e in errors))

    destination = args.directory if args.directory is not None else os.getcwd()

    lines = read_manifest(args.list_path)
    logger.info("Read %d line(s) from %s", len(lines), args.list_path)

    plan, issues = build_copy_plan(
        lines,
        destination=destination,
        root_folder_name=args.root_folder_name,
        strict_root=args.strict_root,
    )
    for issue in issues:
        logger.log(_LEVELS.get(issue.level.upper(), logging.INFO), "%s: %s (%s)", issue.code, issue.message, issue.relpath)

    hashes_by_src = {}
    if args.dry_run:
        for item in plan:
            logger.info("DRY RUN  %s -> %s", item.src, item.dst)
    else:
        summary, hashes_by_src = execute_copy(
            plan,
            progress_cb=_log_progress,
            verify_hash=args.verify,
            hash_algo=args.hash_algo,
        )
        logger.info("Copied %d file(s), %d bytes, into %s", summary.total, summary.total_bytes, destination)

    if args.report:
        report = build_report_dict(
            tool_name=APP_NAME,
            tool_version=APP_VERSION,
            manifest_path=args.list_path,
            destination=destination,
            root_folder_name=args.root_folder_name,
            validation_results=issues,
            plan=plan,
            hashes_by_src=hashes_by_src,
            hash_algo=args.hash_algo,
        )
        path = write_report_json(report, args.report)
        logger.info("Report written: %s", path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
