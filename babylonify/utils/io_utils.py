"""I/O utility functions for Parquet tables."""

import os
from typing import List

import pyarrow as pa
import pyarrow.parquet as pq

from ..config import PARQUET_COMPRESSION, PARQUET_EXTENSION
from ..errors import PathError, TableIOError


def ensure_output_dir(path: str):
    """Ensure an output directory exists.

    Args:
        path: Directory path to create

    Raises:
        PathError: If the path exists but is not a directory
    """
    if os.path.exists(path) and not os.path.isdir(path):
        raise PathError(f"Output path '{path}' must be a directory when --input-dir is used")
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as exc:
        raise PathError(f"Failed to create output directory at '{path}': {exc}") from exc


def list_table_files(input_dir: str, extension: str = PARQUET_EXTENSION) -> List[str]:
    """List regular files in a directory whose extension matches, sorted by path.

    The scan is not recursive and the extension match ignores case.

    Args:
        input_dir: Directory to scan
        extension: File extension including the leading dot

    Returns:
        Sorted list of file paths

    Raises:
        PathError: If the directory cannot be read
    """
    try:
        entries = list(os.scandir(input_dir))
    except OSError as exc:
        raise PathError(f"Failed to read input directory '{input_dir}': {exc}") from exc

    files = [
        entry.path for entry in entries
        if entry.is_file() and os.path.splitext(entry.name)[1].lower() == extension.lower()
    ]
    return sorted(files)


def read_table(path: str) -> pa.Table:
    """Read a Parquet file as an Arrow table, keeping its schema as stored.

    Args:
        path: Parquet file path

    Returns:
        Arrow table including any pandas index columns and schema metadata

    Raises:
        TableIOError: If the file cannot be read or decoded
    """
    try:
        return pq.read_table(path)
    except (OSError, pa.ArrowException) as exc:
        raise TableIOError(f"Failed to read '{path}': {exc}") from exc


def write_table(table: pa.Table, path: str):
    """Write an Arrow table to Parquet with zstd compression.

    Nested list fields keep the child names they were read with.

    Args:
        table: Table to write
        path: Output file path

    Raises:
        TableIOError: If the file cannot be created or written
    """
    try:
        pq.write_table(table, path, compression=PARQUET_COMPRESSION, use_compliant_nested_type=False)
    except (OSError, pa.ArrowException) as exc:
        raise TableIOError(f"Cannot create '{path}': {exc}") from exc
