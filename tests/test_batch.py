import argparse
import os

import pytest

from babylonify.errors import ColumnError, EmptyInputError, PathError
from babylonify.stages import process_directory
from babylonify.stages.dataset_filter import text_cells
from babylonify.utils.io_utils import list_table_files, read_table


def make_args(**overrides) -> argparse.Namespace:
    values = dict(column="transcription", keep_empty=False, clean=False, threads=2, log_dir=None)
    values.update(overrides)
    return argparse.Namespace(**values)


def test_list_table_files_filters_and_sorts(tmp_path, make_parquet) -> None:
    make_parquet(tmp_path / "b.parquet")
    make_parquet(tmp_path / "A.PARQUET")
    (tmp_path / "notes.txt").write_text("skip me", encoding="utf-8")
    (tmp_path / "nested.parquet").mkdir()
    results = list_table_files(str(tmp_path))
    assert [os.path.basename(p) for p in results] == ["A.PARQUET", "b.parquet"]


def test_list_table_files_missing_directory(tmp_path) -> None:
    with pytest.raises(PathError, match="Failed to read input directory"):
        list_table_files(str(tmp_path / "missing"))


def test_process_directory_filters_each_file(tmp_path, make_parquet, classifier, ukrainian, capsys) -> None:
    in_dir = tmp_path / "in"
    in_dir.mkdir()
    make_parquet(in_dir / "part-1.parquet")
    make_parquet(in_dir / "part-0.Parquet", ["hello", "привіт", None])
    out_dir = tmp_path / "out" / "nested"

    results = process_directory(str(in_dir), str(out_dir), make_args(), ukrainian, classifier)

    assert [r.output_path for r in results] == [
        str(out_dir / "part-0.Parquet"),
        str(out_dir / "part-1.parquet"),
    ]
    assert [(r.rows_in, r.rows_out) for r in results] == [(3, 1), (5, 2)]
    assert text_cells(read_table(str(out_dir / "part-0.Parquet")), "transcription") == ["привіт"]

    printed = capsys.readouterr().out
    assert f"{in_dir / 'part-1.parquet'} -> {out_dir / 'part-1.parquet'}" in printed
    assert "2 files, 8 rows -> 3 rows kept" in printed


def test_empty_directory_raises_and_writes_nothing(tmp_path, classifier, ukrainian) -> None:
    in_dir = tmp_path / "in"
    in_dir.mkdir()
    (in_dir / "readme.md").write_text("no tables", encoding="utf-8")
    out_dir = tmp_path / "out"

    with pytest.raises(EmptyInputError, match="No Parquet files found"):
        process_directory(str(in_dir), str(out_dir), make_args(), ukrainian, classifier)
    assert out_dir.is_dir()
    assert list(out_dir.iterdir()) == []


def test_output_must_be_a_directory(tmp_path, make_parquet, classifier, ukrainian) -> None:
    in_dir = tmp_path / "in"
    in_dir.mkdir()
    make_parquet(in_dir / "a.parquet")
    out_file = tmp_path / "out.parquet"
    out_file.write_bytes(b"")

    with pytest.raises(PathError, match="must be a directory"):
        process_directory(str(in_dir), str(out_file), make_args(), ukrainian, classifier)


def test_first_failure_aborts_batch_and_keeps_written_files(tmp_path, make_parquet, classifier, ukrainian) -> None:
    in_dir = tmp_path / "in"
    in_dir.mkdir()
    make_parquet(in_dir / "a.parquet")
    make_parquet(in_dir / "b.parquet", ["привіт"], column="text")
    make_parquet(in_dir / "c.parquet")
    out_dir = tmp_path / "out"

    with pytest.raises(ColumnError):
        process_directory(str(in_dir), str(out_dir), make_args(), ukrainian, classifier)

    assert sorted(p.name for p in out_dir.iterdir()) == ["a.parquet"]
