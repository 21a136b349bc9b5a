"""Dataset filtering - apply a row mask and substitute cleaned text."""

from typing import List, Optional, Sequence

import pyarrow as pa

from ..errors import ColumnError


def is_text_type(arrow_type: pa.DataType) -> bool:
    """Check whether an Arrow type holds UTF-8 strings."""
    return pa.types.is_string(arrow_type) or pa.types.is_large_string(arrow_type)


def validate_text_column(table: pa.Table, column: str):
    """Ensure the text column exists and holds strings.

    Raises:
        ColumnError: If the column is missing, duplicated or not a string column
    """
    if column not in table.column_names:
        raise ColumnError(f"Column '{column}' not found")
    if table.column_names.count(column) > 1:
        raise ColumnError(f"Column '{column}' appears more than once")
    arrow_type = table.schema.field(column).type
    if not is_text_type(arrow_type):
        raise ColumnError(f"Target column '{column}' is not String (found {arrow_type})")


def text_cells(table: pa.Table, column: str) -> List[Optional[str]]:
    """Extract a text column as Python strings with None for nulls."""
    return table.column(column).to_pylist()


def apply_mask(
    table: pa.Table,
    mask: Sequence[bool],
    text_column: str,
    normalized_texts: Optional[Sequence[Optional[str]]] = None,
) -> pa.Table:
    """Select the rows where mask is True, optionally replacing their text.

    The selection is stable and applies to every column, including pandas
    index columns; the schema and its metadata are kept as they are. When
    normalized_texts is given, the surviving rows of the text column take
    those values (None stays None) with the column's original type.

    Args:
        table: Input table
        mask: Keep flag per row
        text_column: Name of the text column
        normalized_texts: Cleaned text per input row, or None to keep the original

    Returns:
        Filtered table

    Raises:
        ColumnError: If the text column is missing or not a string column
    """
    validate_text_column(table, text_column)
    if len(mask) != table.num_rows:
        raise ValueError(f"Mask length {len(mask)} does not match table height {table.num_rows}")

    filtered = table.filter(pa.array(mask, type=pa.bool_()))

    if normalized_texts is not None:
        if len(normalized_texts) != table.num_rows:
            raise ValueError(
                f"Got {len(normalized_texts)} normalized values for {table.num_rows} rows"
            )
        kept_texts = [text for text, flag in zip(normalized_texts, mask) if flag]
        idx = filtered.schema.get_field_index(text_column)
        field = filtered.schema.field(idx)
        filtered = filtered.set_column(idx, field, pa.array(kept_texts, type=field.type))

    return filtered
