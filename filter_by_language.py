#!/usr/bin/env python3
"""
Filter Parquet rows by detected language, with optional text cleaning.

Example:
  python filter_by_language.py --input data.parquet --output data_uk.parquet --lang uk --clean
  python filter_by_language.py --input-dir shards/ --output shards_uk/ --lang uk --keep-empty
"""

import sys

from babylonify.cli import main

if __name__ == "__main__":
    sys.exit(main())
