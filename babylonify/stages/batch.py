"""Directory mode - filter every Parquet file in a directory."""

from typing import List

from ..errors import EmptyInputError
from ..models.language import Language, LanguageClassifier
from ..utils.io_utils import ensure_output_dir, list_table_files
from .base import FilterStats, output_path_for
from .language_stage import process_file


def process_directory(
    input_dir: str,
    output_dir: str,
    args,
    language: Language,
    classifier: LanguageClassifier,
) -> List[FilterStats]:
    """Filter each Parquet file of input_dir into output_dir.

    Files are processed one at a time in sorted order. The first failure
    aborts the run; files written before it are left in place.

    Args:
        input_dir: Directory scanned (non-recursively) for Parquet files
        output_dir: Directory receiving outputs under the same file names
        args: Argument namespace with processing configuration
        language: Resolved target language
        classifier: Shared language classifier

    Returns:
        Per-file stats in processing order

    Raises:
        PathError: If output_dir is not a directory or input_dir is unreadable
        EmptyInputError: If input_dir holds no Parquet files
    """
    ensure_output_dir(output_dir)

    files = list_table_files(input_dir)
    if not files:
        raise EmptyInputError(f"No Parquet files found in input directory '{input_dir}'")

    print(f"[batch] Found {len(files):,} Parquet files in {input_dir}")
    results = []
    for input_path in files:
        output_path = output_path_for(input_path, output_dir)
        results.append(process_file(input_path, output_path, args, language, classifier))

    rows_in = sum(stats.rows_in for stats in results)
    rows_out = sum(stats.rows_out for stats in results)
    print(f"[batch] Done: {len(results):,} files, {rows_in:,} rows -> {rows_out:,} rows kept")
    return results
