"""Command-line interface for the babylonify language filter."""

import sys
import argparse
from typing import List, Optional

from . import __version__
from .config import DEFAULT_LANG, DEFAULT_TEXT_COLUMN, AUDIT_LOG_FILENAME
from .errors import BabylonifyError, UnknownLanguageError
from .models.language import LanguageClassifier, load_language_detector, resolve_language
from .stages import process_directory, process_file
from .utils.logging import reset_log


def positive_int(value: str) -> int:
    """argparse type for a strictly positive integer."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    ap = argparse.ArgumentParser(
        prog="babylonify",
        description="Filter Parquet rows by detected language (+ optional cleaning).",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Input source: exactly one of file or directory
    source = ap.add_mutually_exclusive_group(required=True)
    source.add_argument("-i", "--input", default=None,
                        help="Input Parquet file path")
    source.add_argument("--input-dir", default=None,
                        help="Input directory with Parquet files")

    ap.add_argument("-o", "--output", required=True,
                    help="Output Parquet file path (or directory when --input-dir is used)")

    # Filtering configuration
    ap.add_argument("-c", "--column", default=DEFAULT_TEXT_COLUMN,
                    help=f"Text column name (default: {DEFAULT_TEXT_COLUMN})")
    ap.add_argument("-l", "--lang", default=DEFAULT_LANG,
                    help="Target language (ISO 639-1 or name: uk, en, ru, Ukrainian, etc.)")
    ap.add_argument("--keep-empty", action="store_true",
                    help="Keep rows with empty or null text")
    ap.add_argument("--clean", action="store_true",
                    help="Clean text (remove everything except letters and punctuation)")

    # Processing configuration
    ap.add_argument("--threads", type=positive_int, default=None,
                    help="Number of language detection worker threads (default: CPU count)")
    ap.add_argument("--log-dir", default=None,
                    help=f"Write sampled keep/drop decisions to <log-dir>/{AUDIT_LOG_FILENAME}")

    return ap


def process_arguments(args, parser: argparse.ArgumentParser, classifier: LanguageClassifier):
    """Resolve and validate arguments that need the classifier.

    Args:
        args: Parsed argument namespace
        parser: Parser used to report usage errors
        classifier: Classifier whose supported languages bound --lang
    """
    try:
        args.language = resolve_language(args.lang, classifier.supported_languages())
    except UnknownLanguageError as exc:
        parser.error(str(exc))


def run_pipeline(args, classifier: LanguageClassifier):
    """Reset the audit log, then run single-file or directory filtering.

    Args:
        args: Parsed and processed argument namespace
        classifier: Shared language classifier

    Returns:
        List of per-file FilterStats
    """
    reset_log(args.log_dir, AUDIT_LOG_FILENAME)
    if args.input_dir is not None:
        return process_directory(args.input_dir, args.output, args, args.language, classifier)
    return [process_file(args.input, args.output, args, args.language, classifier)]


def main(argv: Optional[List[str]] = None, classifier: Optional[LanguageClassifier] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    if classifier is None:
        classifier = load_language_detector()
    process_arguments(args, parser, classifier)
    try:
        run_pipeline(args, classifier)
    except BabylonifyError as exc:
        print(f"[babylonify][ERROR] {exc}", file=sys.stderr)
        return 1
    return 0
