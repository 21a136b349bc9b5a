"""
Babylonify - filter Parquet datasets by the detected language of a text column.

For each row of the text column the pipeline runs:
  clean (optional) → detect language → mask → filter

Rows whose text is confidently detected as the target language are kept;
null/empty cells are kept only when requested.
"""

__version__ = "0.1.0"
