from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ValidationResult:
    level: str  # INFO | WARNING | ERROR
    code: str   # stable short identifier (e.g. ROOT_NOT_FOUND)
    message: str
    relpath: Optional[str] = None  # manifest line the result concerns, when applicable


@dataclass(frozen=True)
class CopyPlanItem:
    line_no: int   # 1-based line in the manifest
    src: str       # manifest line as given
    relpath: str   # truncated directory recreated under the destination ("" = root)
    dst: str       # absolute destination file path
