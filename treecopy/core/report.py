from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from treecopy.models import CopyPlanItem, ValidationResult


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def _safe_stat(path: str) -> Dict[str, Any]:
    try:
        st = os.stat(path)
        return {
            "size_bytes": int(st.st_size),
            "mtime": datetime.fromtimestamp(st.st_mtime, tz=timezone.utc).isoformat(timespec="seconds"),
        }
    except OSError:
        return {"size_bytes": None, "mtime": None}


def build_report_dict(
    tool_name: str,
    tool_version: str,
    manifest_path: str,
    destination: str,
    root_folder_name: Optional[str],
    validation_results: List[ValidationResult],
    plan: List[CopyPlanItem],
    hashes_by_src: Optional[Dict[str, str]] = None,
    hash_algo: Optional[str] = None,
    include_file_stats: bool = True,
) -> Dict[str, Any]:
    hashes_by_src = hashes_by_src or {}

    files_out: List[Dict[str, Any]] = []
    for item in plan:
        entry: Dict[str, Any] = {
            "line": item.line_no,
            "src": item.src,
            "dst": item.dst,
            "relpath": item.relpath,
        }
        if include_file_stats:
            entry.update(_safe_stat(item.dst))
        if item.src in hashes_by_src:
            entry["hash"] = hashes_by_src[item.src]
        files_out.append(entry)

    results_out = [
        {
            "level": r.level,
            "code": r.code,
            "message": r.message,
            "relpath": r.relpath,
        }
        for r in validation_results
    ]

    return {
        "tool": tool_name,
        "version": tool_version,
        "timestamp_utc": _utc_now_iso(),
        "manifest": manifest_path,
        "destination": destination,
        "root_folder_name": root_folder_name,
        "hash_algo": hash_algo if hashes_by_src else None,
        "results": results_out,
        "files": files_out,
    }


def write_report_json(report: Dict[str, Any], report_path: str) -> str:
    path = Path(report_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", encoding="utf-8") as f:
        json.dump(report, f, indent=2, ensure_ascii=False)

    return str(path)
