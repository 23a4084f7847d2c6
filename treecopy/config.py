from __future__ import annotations

APP_NAME = "treecopy"
APP_VERSION = "0.3.0"

HASH_ALGO_DEFAULT = "sha1"
MANIFEST_ENCODING = "utf-8-sig"  # tolerates a BOM

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Overwrite warnings beyond this are summarised in a single result
MAX_REPORTED_OVERWRITES = 25
