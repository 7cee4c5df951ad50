"""Atomic JSON file writes (write to temp, then rename)."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Any


def write_json_atomic(path: Path, data: Any) -> None:
    """Serialize *data* to *path*, replacing the file in one step.

    The temp file lives in the destination directory so the final rename
    never crosses filesystems. On failure the temp file is removed and the
    previous file is left untouched. NaN and infinities raise ``ValueError``
    so the file always stays standard JSON.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_fd, tmp_path = tempfile.mkstemp(
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
    )
    try:
        with open(tmp_fd, "w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=2, ensure_ascii=False, allow_nan=False)
        Path(tmp_path).replace(path)
    except BaseException:
        Path(tmp_path).unlink(missing_ok=True)
        raise
