from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from treecopy.config import HASH_ALGO_DEFAULT
from treecopy.core.hashing import hash_file
from treecopy.models import CopyPlanItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CopySummary:
    total: int        # every planned file; a run that returns copied them all
    total_bytes: int


class HashMismatchError(OSError):
    """Destination content differs from the source after copying."""


def execute_copy(
    plan: List[CopyPlanItem],
    progress_cb: Optional[Callable[[int, int, CopyPlanItem], None]] = None,
    verify_hash: bool = False,
    hash_algo: str = HASH_ALGO_DEFAULT,
) -> Tuple[CopySummary, Dict[str, str]]:
    """
    Copies files according to plan, one at a time, overwriting existing files.

    progress_cb(idx, total, item) is called before each copy.
    The first failure aborts the run: it is logged with its manifest line and
    re-raised. Files copied before it stay in place.

    Returns:
      (summary, hashes_by_src)

    hashes_by_src maps manifest source path -> hash digest (only with verify_hash).
    """
    hashes_by_src: Dict[str, str] = {}
    total = len(plan)
    total_bytes = 0

    for idx, item in enumerate(plan, start=1):
        if progress_cb:
            progress_cb(idx, total, item)

        # Kept as str: Path("") would turn a blank manifest line into "."
        src = item.src
        dst = Path(item.dst)

        try:
            src_hash = None
            if verify_hash:
                src_hash = hash_file(src, algo=hash_algo)  # type: ignore[arg-type]
                hashes_by_src[src] = src_hash

            dst.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src, dst)

            if src_hash is not None:
                dst_hash = hash_file(str(dst), algo=hash_algo)  # type: ignore[arg-type]
                if dst_hash != src_hash:
                    raise HashMismatchError(f"Integrity check failed (src != dst) for: {dst}")

            total_bytes += dst.stat().st_size
        except OSError as e:
            logger.error("Line %d: copy failed: %s -> %s (%s)", item.line_no, src, dst, e)
            raise

        logger.debug("Line %d copied", item.line_no)

    return CopySummary(total=total, total_bytes=total_bytes), hashes_by_src
