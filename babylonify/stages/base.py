"""Base utilities for processing stages."""

import os
from typing import NamedTuple

from ..models.language import Language


class FilterStats(NamedTuple):
    """Outcome of filtering one table file."""

    input_path: str
    output_path: str
    rows_in: int
    rows_out: int
    language: Language
    cleaned: bool


def output_path_for(input_path: str, output_dir: str) -> str:
    """Get the output path for an input file processed in directory mode.

    Args:
        input_path: Path of the input table
        output_dir: Directory receiving filtered tables

    Returns:
        Path with the input's file name under output_dir
    """
    return os.path.join(output_dir, os.path.basename(input_path))
