import csv

import pytest

from yt_export.constants import CSV_HEADER
from yt_export.exceptions import ErrorKind, ExportError
from yt_export.exporter import write_to_csv
from yt_export.models import VideoItem
from tests.conftest import make_item


def _read_rows(path):
    with open(path, encoding="utf-8", newline="") as f:
        return list(csv.reader(f))


def test_writes_header_and_one_row_per_video(tmp_path):
    videos = [
        VideoItem("abc", "T1", "D1", "2020-01-01T00:00:00Z"),
        VideoItem("xyz", "T2", "D2", "2020-01-02T00:00:00Z"),
    ]
    path = write_to_csv(videos, tmp_path / "out.csv")

    assert _read_rows(path) == [
        ["Video ID", "Title", "Description", "Published At"],
        ["abc", "T1", "D1", "2020-01-01T00:00:00Z"],
        ["xyz", "T2", "D2", "2020-01-02T00:00:00Z"],
    ]


def test_missing_fields_become_empty_cells(tmp_path):
    videos = [VideoItem(video_id=None, title="only a title")]

    rows = _read_rows(write_to_csv(videos, tmp_path / "out.csv"))

    assert rows[1] == ["", "only a title", "", ""]


def test_accepts_raw_search_items(tmp_path, search_page_2):
    rows = _read_rows(write_to_csv(search_page_2["items"], tmp_path / "out.csv"))

    assert rows[1] == ["Pq9Xr2Zt7Yk", "Python vs Rust: ownership explained", "", "2024-04-30T16:45:12Z"]


def test_quotes_commas_newlines_and_unicode(tmp_path):
    video = VideoItem("q1", 'Docker "the easy way"', "line one,\nline two", "2024-01-01T00:00:00Z")
    unicode_video = VideoItem("u1", "Caffè ☕ e Rust 🦀", "", "")

    rows = _read_rows(write_to_csv([video, unicode_video], tmp_path / "out.csv"))

    assert rows[1] == ["q1", 'Docker "the easy way"', "line one,\nline two", "2024-01-01T00:00:00Z"]
    assert rows[2][1] == "Caffè ☕ e Rust 🦀"


def test_truncates_existing_file(tmp_path):
    path = tmp_path / "out.csv"
    path.write_text("stale,content\n" * 10, encoding="utf-8")

    write_to_csv([VideoItem("abc")], path)

    assert _read_rows(path) == [CSV_HEADER, ["abc", "", "", ""]]


def test_unwritable_path_raises_export_error(tmp_path):
    missing_dir = tmp_path / "does" / "not" / "exist" / "out.csv"

    with pytest.raises(ExportError) as excinfo:
        write_to_csv([make_item("abc")], missing_dir)

    assert excinfo.value.kind is ErrorKind.FILESYSTEM
    assert excinfo.value.path == missing_dir
    assert isinstance(excinfo.value.__cause__, OSError)


def test_rows_written_before_a_failure_stay_on_disk(tmp_path):
    path = tmp_path / "out.csv"

    def videos():
        yield VideoItem("first", "T1")
        raise OSError("disk full")

    with pytest.raises(ExportError, match="disk full"):
        write_to_csv(videos(), path)

    assert _read_rows(path) == [CSV_HEADER, ["first", "T1", "", ""]]
