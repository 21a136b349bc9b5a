"""Processing stages for the babylonify language filter."""

from .base import FilterStats
from .masking import compute_mask, detect_languages, build_mask
from .dataset_filter import apply_mask, validate_text_column
from .language_stage import process_file
from .batch import process_directory

__all__ = [
    "FilterStats",
    "compute_mask",
    "detect_languages",
    "build_mask",
    "apply_mask",
    "validate_text_column",
    "process_file",
    "process_directory",
]
