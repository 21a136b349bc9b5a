"""JSONL audit log utilities for the filtering pipeline."""

import os
from typing import Iterable, List, Optional

import orjson

from ..errors import PathError


def ensure_logdir(path: Optional[str] = None):
    """Ensure the log directory exists.

    Args:
        path: Directory path to create

    Raises:
        PathError: If the directory cannot be created
    """
    if not path:
        return
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as exc:
        raise PathError(f"Failed to create log directory '{path}': {exc}") from exc


def write_jsonl(path: str, recs: Iterable[dict]):
    """Append records to a JSONL file, one orjson document per line.

    Raises:
        PathError: If the log file cannot be written
    """
    ensure_logdir(os.path.dirname(path) or ".")
    try:
        with open(path, "ab") as f:
            f.writelines(orjson.dumps(r) + b"\n" for r in recs)
    except OSError as exc:
        raise PathError(f"Failed to write audit log '{path}': {exc}") from exc


def reset_log(log_dir: Optional[str], filename: str) -> Optional[str]:
    """Create the log directory and delete a previous run's log file.

    Args:
        log_dir: Directory holding the log, or None when logging is disabled
        filename: Name of the log file to reset

    Returns:
        Full path to the log file, or None if log_dir is not set

    Raises:
        PathError: If the directory or the old log cannot be prepared
    """
    if not log_dir:
        return None
    ensure_logdir(log_dir)
    path = os.path.join(log_dir, filename)
    try:
        if os.path.lexists(path):
            os.remove(path)
    except OSError as exc:
        raise PathError(f"Failed to reset audit log '{path}': {exc}") from exc
    return path


def read_jsonl(path: str) -> List[dict]:
    """Load the records of a JSONL audit log; a missing file has none."""
    if not os.path.exists(path):
        return []
    with open(path, "rb") as f:
        return [orjson.loads(line) for line in f if line.strip()]
