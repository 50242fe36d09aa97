import pytest

from ductfan.csvreader import read_csv


def test_reads_rows_and_cells(tmp_path):
    path = tmp_path / "polar.csv"
    path.write_text("alpha,cl,cd\n0,0.2,0.01\n5,0.75,0.012\n", encoding="utf-8")
    assert read_csv(path) == [
        ["alpha", "cl", "cd"],
        ["0", "0.2", "0.01"],
        ["5", "0.75", "0.012"],
    ]


def test_last_line_without_newline_is_read(tmp_path):
    path = tmp_path / "a.csv"
    path.write_text("a,b\nc,d", encoding="utf-8")
    assert read_csv(path) == [["a", "b"], ["c", "d"]]


def test_empty_fields_kept_except_trailing(tmp_path):
    path = tmp_path / "a.csv"
    path.write_text("a,,b\nx,y,\n", encoding="utf-8")
    assert read_csv(path) == [["a", "", "b"], ["x", "y"]]


def test_empty_line_gives_empty_row(tmp_path):
    path = tmp_path / "a.csv"
    path.write_text("a\n\nb\n", encoding="utf-8")
    assert read_csv(path) == [["a"], [], ["b"]]


def test_empty_file_gives_no_rows(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    assert read_csv(path) == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_csv(tmp_path / "missing.csv")