"""Row masking - parallel language detection and keep/drop decisions."""

import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional, Sequence, Tuple

from ..config import CLASSIFY_CHUNK_SIZE
from ..models.language import LanguageClassifier
from ..utils.data_utils import batched


def resolve_workers(threads: Optional[int] = None) -> int:
    """Get the worker pool size, defaulting to the host CPU count."""
    if threads is not None:
        if threads < 1:
            raise ValueError(f"Thread count must be at least 1, got {threads}")
        return threads
    return os.cpu_count() or 1


def _classify_chunk(
    classifier: LanguageClassifier,
    chunk: Sequence[Tuple[int, str]],
) -> List[Tuple[int, Optional[str]]]:
    return [(idx, classifier.detect_language_of(text)) for idx, text in chunk]


def detect_languages(
    cells: Sequence[Optional[str]],
    classifier: LanguageClassifier,
    workers: Optional[int] = None,
    chunk_size: int = CLASSIFY_CHUNK_SIZE,
) -> List[Optional[str]]:
    """Detect the language of every present, non-empty cell.

    Cells are scattered in chunks over a thread pool and gathered back by row
    index, so the result order never depends on worker scheduling. Null and
    empty cells are never sent to the classifier and get None.

    Args:
        cells: Text per row, None for null
        classifier: Shared read-only language classifier
        workers: Pool size (default: CPU count)
        chunk_size: Rows per submitted task

    Returns:
        Detected language code per row, None where undetermined or skipped
    """
    detections: List[Optional[str]] = [None] * len(cells)
    pending = [(idx, text) for idx, text in enumerate(cells) if text]
    if not pending:
        return detections

    with ThreadPoolExecutor(max_workers=resolve_workers(workers)) as pool:
        futures = [
            pool.submit(_classify_chunk, classifier, chunk)
            for _, chunk in batched(pending, chunk_size)
        ]
        for future in as_completed(futures):
            for idx, lang in future.result():
                detections[idx] = lang
    return detections


def decision_reason(cell: Optional[str], detection: Optional[str], target_code: str) -> str:
    """Classify why a row is kept or dropped.

    Returns:
        One of "null", "empty", "match", "undetermined", "mismatch"
    """
    if cell is None:
        return "null"
    if cell == "":
        return "empty"
    if detection is None:
        return "undetermined"
    return "match" if detection == target_code else "mismatch"


def build_mask(
    cells: Sequence[Optional[str]],
    detections: Sequence[Optional[str]],
    target_code: str,
    keep_empty: bool,
) -> List[bool]:
    """Apply the keep/drop policy to per-row detections.

    Args:
        cells: Text per row, None for null
        detections: Detected language per row, aligned with cells
        target_code: Language code to keep
        keep_empty: Keep null and empty cells regardless of detection

    Returns:
        Boolean keep mask aligned with row order
    """
    if len(cells) != len(detections):
        raise ValueError(f"Got {len(detections)} detections for {len(cells)} rows")

    mask = []
    for cell, detection in zip(cells, detections):
        reason = decision_reason(cell, detection, target_code)
        if reason in ("null", "empty"):
            mask.append(keep_empty)
        else:
            mask.append(reason == "match")
    return mask


def compute_mask(
    cells: Sequence[Optional[str]],
    target_code: str,
    keep_empty: bool,
    classifier: LanguageClassifier,
    workers: Optional[int] = None,
) -> List[bool]:
    """Detect languages in parallel and build the keep mask."""
    detections = detect_languages(cells, classifier, workers)
    return build_mask(cells, detections, target_code, keep_empty)
