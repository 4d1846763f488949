"""
JSON file persistence helpers.

Rules:
- Atomic writes: temp file in the same directory -> fsync -> rename
- fsync failure logs a warning and the write continues
- Missing file -> caller-provided fallback; corrupt JSON -> StoreError
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from src.domain.errors import ErrorCodes, StoreError

logger = logging.getLogger(__name__)


def _fsync_dir(dir_path: Path) -> None:
    """
    fsync a directory so the rename entry is durable (where supported).

    Args:
        dir_path: directory to fsync
    """
    try:
        dir_fd = os.open(str(dir_path), os.O_RDONLY | os.O_DIRECTORY)
        try:
            os.fsync(dir_fd)
        finally:
            os.close(dir_fd)
    except (OSError, AttributeError) as e:
        # no O_DIRECTORY on this platform, permissions, ...
        logger.debug(f"Directory fsync skipped for {dir_path}: {e}")


def atomic_write_json(path: Path, data: Any) -> None:
    """
    Atomic JSON write.

    - no partial state: temp -> rename
    - on failure the temp file is removed and the previous file kept

    Args:
        path: target file
        data: JSON-serializable data
    """
    dir_path = path.parent
    dir_path.mkdir(parents=True, exist_ok=True)

    temp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=dir_path,
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as f:
            temp_path = Path(f.name)
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.flush()
            try:
                os.fsync(f.fileno())
            except OSError as e:
                logger.warning(
                    f"File fsync failed for {path}: {e}. "
                    f"Data may not be durable on power loss."
                )

        os.replace(temp_path, path)
        _fsync_dir(dir_path)

    except Exception:
        if temp_path and temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                pass
        raise


def read_json_file(path: Path, fallback: Any) -> Any:
    """
    Read a JSON file.

    Args:
        path: file to read
        fallback: returned when the file does not exist

    Returns:
        Parsed JSON or fallback

    Raises:
        StoreError: DOCUMENT_CORRUPT
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return fallback

    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise StoreError(
            ErrorCodes.DOCUMENT_CORRUPT,
            f"Invalid JSON in {path.name}",
            path=str(path),
            error=str(e),
        ) from e
