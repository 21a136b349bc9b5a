import pyarrow as pa
import pytest

from babylonify.errors import ColumnError
from babylonify.stages.dataset_filter import apply_mask, text_cells, validate_text_column


@pytest.fixture
def table() -> pa.Table:
    schema = pa.schema(
        [
            pa.field("id", pa.int32()),
            pa.field("transcription", pa.string()),
            pa.field("score", pa.float64()),
            pa.field("tags", pa.list_(pa.string())),
        ],
        metadata={b"source": b"unit-test"},
    )
    return pa.table(
        {
            "id": list(range(6)),
            "transcription": ["a", None, "c", "", "e", "f"],
            "score": [0.5, 1.5, 2.5, 3.5, 4.5, 5.5],
            "tags": [["x"], [], None, ["y", "z"], ["w"], ["v"]],
        },
        schema=schema,
    )


@pytest.mark.parametrize("mask", [
    [True] * 6,
    [False] * 6,
    [True, False, True, False, True, False],
    [False, True, True, True, False, True],
])
def test_apply_mask_height_and_order(table, mask) -> None:
    filtered = apply_mask(table, mask, "transcription")
    assert filtered.num_rows == sum(mask)
    expected_ids = [i for i, keep in enumerate(mask) if keep]
    assert filtered.column("id").to_pylist() == expected_ids
    for column in ("score", "tags"):
        values = table.column(column).to_pylist()
        assert filtered.column(column).to_pylist() == [values[i] for i in expected_ids]


def test_apply_mask_keeps_schema_and_metadata(table) -> None:
    mask = [True, False, True, True, False, True]
    for normalized in (None, ["A", None, "C", "", "E", "F"]):
        filtered = apply_mask(table, mask, "transcription", normalized_texts=normalized)
        assert filtered.schema.equals(table.schema, check_metadata=True)


def test_apply_mask_substitutes_normalized_text_and_keeps_nulls(table) -> None:
    mask = [True, True, True, False, False, True]
    normalized = ["A", None, "C", "", "E", "F"]
    filtered = apply_mask(table, mask, "transcription", normalized_texts=normalized)
    assert text_cells(filtered, "transcription") == ["A", None, "C", "F"]
    assert filtered.column("id").to_pylist() == [0, 1, 2, 5]


def test_apply_mask_substitution_keeps_large_string_type() -> None:
    table = pa.table({"transcription": pa.array(["x y 1", None], type=pa.large_string())})
    filtered = apply_mask(table, [True, True], "transcription", normalized_texts=["x y", None])
    assert filtered.schema.field("transcription").type == pa.large_string()
    assert text_cells(filtered, "transcription") == ["x y", None]


def test_apply_mask_without_normalization_keeps_original_text(table) -> None:
    filtered = apply_mask(table, [True, True, False, True, False, False], "transcription")
    assert text_cells(filtered, "transcription") == ["a", None, ""]


def test_apply_mask_rejects_wrong_mask_length(table) -> None:
    with pytest.raises(ValueError):
        apply_mask(table, [True, False], "transcription")


def test_validate_text_column_missing(table) -> None:
    with pytest.raises(ColumnError, match="Column 'text' not found"):
        validate_text_column(table, "text")


def test_validate_text_column_wrong_type(table) -> None:
    with pytest.raises(ColumnError, match="'id' is not String"):
        validate_text_column(table, "id")
    with pytest.raises(ColumnError, match="'tags' is not String"):
        validate_text_column(table, "tags")
