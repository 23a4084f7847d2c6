from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

FolderHierarchy = Tuple[str, ...]


class RootFolderNotFoundError(ValueError):
    """Raised in strict mode when the root folder name is not in a source path."""

    def __init__(self, root_folder_name: str, directory: str):
        super().__init__(f"Root folder '{root_folder_name}' not found in: {directory}")
        self.root_folder_name = root_folder_name
        self.directory = directory


def extract_hierarchy(directory: str) -> FolderHierarchy:
    """
    Folder names from the outermost named ancestor down to `directory` itself.

    Relative paths are made absolute against the current working directory.
    The filesystem root (or drive) segment is dropped.
    """
    current = Path(os.path.abspath(directory))

    names = []
    while True:
        names.append(current.name)
        parent = current.parent
        if parent == current:
            break
        current = parent

    names.reverse()
    return tuple(names[1:])


def truncate_hierarchy(hierarchy: Sequence[str], root_folder_name: Optional[str] = None) -> str:
    """
    Relative directory to recreate under the destination.

      - no root folder name: the whole hierarchy
      - otherwise: the segments strictly below its first (outermost) occurrence,
        or "" when it does not occur at all
    """
    if not root_folder_name:
        return _join(hierarchy)

    try:
        idx = list(hierarchy).index(root_folder_name)
    except ValueError:
        return ""

    return _join(hierarchy[idx + 1:])


def relative_directory_for(
    source_path: str,
    root_folder_name: Optional[str] = None,
    strict: bool = False,
) -> Tuple[str, str, bool]:
    """
    Split a manifest entry and compute where it lands.

    Returns:
      (relative_dir, filename, root_found)

    root_found is True when no root folder name was requested.
    """
    directory, filename = os.path.split(source_path)
    hierarchy = extract_hierarchy(directory)

    found = not root_folder_name or root_folder_name in hierarchy
    if not found and strict:
        raise RootFolderNotFoundError(root_folder_name, directory)

    relative_dir = truncate_hierarchy(hierarchy, root_folder_name)
    logger.debug("%s: hierarchy=%s -> %r", source_path, "/".join(hierarchy), relative_dir)
    return relative_dir, filename, found


def _join(segments: Sequence[str]) -> str:
    if not segments:
        return ""
    return os.path.join(*segments)
