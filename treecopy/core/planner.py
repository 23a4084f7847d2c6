from __future__ import annotations

import logging
import os
from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from treecopy.config import MAX_REPORTED_OVERWRITES
from treecopy.core.hierarchy import relative_directory_for
from treecopy.models import CopyPlanItem, ValidationResult

logger = logging.getLogger(__name__)


def validate_copy_inputs(manifest_path: str, destination: Optional[str] = None) -> List[ValidationResult]:
    results: List[ValidationResult] = []

    if not manifest_path or not Path(manifest_path).is_file():
        results.append(
            ValidationResult(
                "ERROR",
                "MANIFEST_NOT_FOUND",
                "Given file with list of files does not exist.",
                manifest_path or None,
            )
        )

    # None means the current working directory
    if destination is not None and not Path(destination).is_dir():
        results.append(
            ValidationResult(
                "ERROR",
                "DESTINATION_NOT_FOUND",
                "Given directory does not exist.",
                destination,
            )
        )

    return results


def build_copy_plan(
    lines: List[str],
    destination: Optional[str] = None,
    root_folder_name: Optional[str] = None,
    strict_root: bool = False,
) -> Tuple[List[CopyPlanItem], List[ValidationResult]]:
    """
    Dry-run copy plan:
      - decides destination path for every manifest line, in order
      - flags lines without the root folder name
      - flags lines that overwrite an earlier line's destination
    """
    issues: List[ValidationResult] = []
    dest_root = destination if destination is not None else os.getcwd()
    plan: List[CopyPlanItem] = []

    for line_no, line in enumerate(lines, start=1):
        relative_dir, filename, found = relative_directory_for(line, root_folder_name, strict=strict_root)

        if not found:
            issues.append(
                ValidationResult(
                    "WARNING",
                    "ROOT_NOT_FOUND",
                    f"Root folder '{root_folder_name}' not in path; copying directly into destination root.",
                    line,
                )
            )

        new_dir = os.path.abspath(os.path.join(dest_root, relative_dir))
        plan.append(
            CopyPlanItem(
                line_no=line_no,
                src=line,
                relpath=relative_dir,
                dst=os.path.join(new_dir, filename),
            )
        )

    # Later lines overwrite earlier ones at the same destination
    dst_map: Dict[str, List[CopyPlanItem]] = defaultdict(list)
    for item in plan:
        key = os.path.normcase(os.path.normpath(item.dst))
        dst_map[key].append(item)

    overwrites = [items for items in dst_map.values() if len(items) > 1]
    for items in overwrites[:MAX_REPORTED_OVERWRITES]:
        last = items[-1]
        issues.append(
            ValidationResult(
                "WARNING",
                "DEST_OVERWRITE",
                f"{len(items)} lines map to the same destination; line {last.line_no} wins: {last.dst}",
                last.src,
            )
        )
    if len(overwrites) > MAX_REPORTED_OVERWRITES:
        issues.append(
            ValidationResult(
                "WARNING",
                "DEST_OVERWRITE_MORE",
                f"{len(overwrites) - MAX_REPORTED_OVERWRITES} more overwritten destinations not shown.",
                None,
            )
        )

    logger.debug("Planned %d item(s) under %s with %d issue(s)", len(plan), dest_root, len(issues))
    return plan, issues
