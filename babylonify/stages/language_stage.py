"""Language filter stage - keep rows whose text is in the target language."""

import os
from typing import Any, Dict, List, Optional, Sequence

from ..config import AUDIT_LOG_FILENAME, AUDIT_SAMPLE_SIZE, DEFAULT_TEXT_COLUMN
from ..errors import PathError
from ..models.language import Language, LanguageClassifier
from ..text_processing import clean_text
from ..utils.io_utils import read_table, write_table
from ..utils.logging import write_jsonl
from .base import FilterStats
from .dataset_filter import apply_mask, text_cells, validate_text_column
from .masking import build_mask, decision_reason, detect_languages


def _audit_records(
    input_path: str,
    cells: Sequence[Optional[str]],
    detections: Sequence[Optional[str]],
    mask: Sequence[bool],
    target_code: str,
) -> List[Dict[str, Any]]:
    """Sample kept and dropped rows for the audit log."""
    kept: List[Dict[str, Any]] = []
    dropped: List[Dict[str, Any]] = []
    for row, (cell, detection, keep) in enumerate(zip(cells, detections, mask)):
        bucket = kept if keep else dropped
        if len(bucket) >= AUDIT_SAMPLE_SIZE:
            if len(kept) >= AUDIT_SAMPLE_SIZE and len(dropped) >= AUDIT_SAMPLE_SIZE:
                break
            continue
        bucket.append({
            "stage": "language_filter",
            "file": input_path,
            "row": row,
            "text": cell,
            "detected": detection,
            "keep": bool(keep),
            "reason": decision_reason(cell, detection, target_code),
        })
    return kept + dropped


def process_file(
    input_path: str,
    output_path: str,
    args,
    language: Language,
    classifier: LanguageClassifier,
) -> FilterStats:
    """Filter one Parquet file by detected language.

    Args:
        input_path: Parquet file to read
        output_path: Parquet file to write
        args: Argument namespace with processing configuration
        language: Resolved target language
        classifier: Shared language classifier

    Returns:
        Row counts and settings for reporting

    Raises:
        PathError: If output_path is an existing directory
        ColumnError: If the text column is missing or not a string column
        TableIOError: If reading or writing fails
    """
    if os.path.isdir(output_path):
        raise PathError(
            f"Output path '{output_path}' points to a directory. Provide a file path instead."
        )

    column = getattr(args, "column", DEFAULT_TEXT_COLUMN)
    clean = getattr(args, "clean", False)
    keep_empty = getattr(args, "keep_empty", False)

    table = read_table(input_path)
    validate_text_column(table, column)

    cells = text_cells(table, column)
    if clean:
        cells = [None if cell is None else clean_text(cell) for cell in cells]

    detections = detect_languages(cells, classifier, getattr(args, "threads", None))
    mask = build_mask(cells, detections, language.code, keep_empty)

    filtered = apply_mask(table, mask, column, normalized_texts=cells if clean else None)
    write_table(filtered, output_path)

    log_dir = getattr(args, "log_dir", None)
    if log_dir:
        records = _audit_records(input_path, cells, detections, mask, language.code)
        if records:
            write_jsonl(os.path.join(log_dir, AUDIT_LOG_FILENAME), records)

    print(
        f"[filter] ✅ Filtered {len(mask):,} rows -> {filtered.num_rows:,} rows kept "
        f"(lang = {language.name}, cleaned = {clean}) [{input_path} -> {output_path}]"
    )
    return FilterStats(input_path, output_path, len(mask), filtered.num_rows, language, clean)
