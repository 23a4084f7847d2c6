from __future__ import annotations

import hashlib
from typing import Literal, Tuple

Algo = Literal["sha1", "md5"]

SUPPORTED_ALGOS: Tuple[str, ...] = ("sha1", "md5")


def hash_file(path: str, algo: Algo = "sha1", chunk_size: int = 1024 * 1024) -> str:
    """Hex digest of a file, read in chunks."""
    if algo not in SUPPORTED_ALGOS:
        raise ValueError(f"Unsupported hash algo: {algo}")

    digest = hashlib.new(algo)
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            digest.update(chunk)
    return digest.hexdigest()
