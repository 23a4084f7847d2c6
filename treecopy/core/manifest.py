from __future__ import annotations

from pathlib import Path
from typing import List

from treecopy.config import MANIFEST_ENCODING


def read_manifest(manifest_path: str, encoding: str = MANIFEST_ENCODING) -> List[str]:
    """
    All lines of the manifest, in file order.

    Only \\n, \\r and \\r\\n end a line; other control characters stay part of
    the path. Lines are not stripped and blank lines are kept; a blank entry
    fails when it is copied.
    """
    # read_text translates \r and \r\n to \n
    lines = Path(manifest_path).read_text(encoding=encoding).split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines
