"""Utility functions for logging, I/O, and data manipulation."""

from .logging import write_jsonl, reset_log, read_jsonl, ensure_logdir
from .io_utils import ensure_output_dir, list_table_files, read_table, write_table
from .data_utils import batched

__all__ = [
    "write_jsonl",
    "reset_log",
    "read_jsonl",
    "ensure_logdir",
    "ensure_output_dir",
    "list_table_files",
    "read_table",
    "write_table",
    "batched"
]
