"""
Unit tests for CSV record reading and rating-file discovery.
"""

import os
import tempfile

import pytest

from menureport.errors import InputError, RecordError
from menureport.utils.storage import RatingStore, person_name, read_records


def write(path, text):
    with open(path, "w", newline="", encoding="utf-8") as f:
        f.write(text)
    return str(path)


def test_person_name_capitalizes_each_word():
    assert person_name("bob.csv") == "Bob"
    assert person_name("mary-ann.csv") == "Mary-Ann"
    assert person_name("jean luc.csv") == "Jean Luc"


def test_person_name_leaves_other_letters_alone():
    assert person_name("mcDonald.csv") == "McDonald"


def test_read_records_skips_header_and_blank_lines(tmp_path):
    path = write(tmp_path / "menu.csv", "Number,Name\n1,Soup\n\n2,\"Rice, fried\"\n")

    records = list(read_records(path, 2))

    assert records == [(2, ["1", "Soup"]), (4, ["2", "Rice, fried"])]


def test_read_records_header_not_validated(tmp_path):
    path = write(tmp_path / "menu.csv", "just one header field\n1,Soup\n")

    assert [r for _, r in read_records(path, 2)] == [["1", "Soup"]]


def test_read_records_empty_file(tmp_path):
    path = write(tmp_path / "menu.csv", "")
    assert list(read_records(path, 2)) == []


def test_read_records_wrong_field_count(tmp_path):
    path = write(tmp_path / "menu.csv", "Number,Name\n1,Soup\n2,Rice,extra\n")

    with pytest.raises(RecordError) as exc_info:
        list(read_records(path, 2))

    assert exc_info.value.line == 3
    assert "expected 2 fields, got 3" in str(exc_info.value)


def test_read_records_bad_quoting(tmp_path):
    path = write(tmp_path / "menu.csv", "Number,Name\n1,\"Soup\"x\n")

    with pytest.raises(RecordError):
        list(read_records(path, 2))


def test_read_records_bare_quote_in_unquoted_field(tmp_path):
    path = write(tmp_path / "menu.csv", 'Number,Name\n1,Soup\n2,So"up\n')

    with pytest.raises(RecordError, match="bare") as exc_info:
        list(read_records(path, 2))

    assert exc_info.value.line == 3


def test_read_records_escaped_and_multiline_quotes(tmp_path):
    path = write(
        tmp_path / "menu.csv",
        'Number,Name\n1,"So""up"\n2,"Rice\nfried"\n3,Noodles\n'
    )

    records = [r for _, r in read_records(path, 2)]

    assert records == [["1", 'So"up'], ["2", "Rice\nfried"], ["3", "Noodles"]]


def test_read_records_header_quotes_not_checked(tmp_path):
    path = write(tmp_path / "menu.csv", 'Number,Na"me\n1,Soup\n')

    assert [r for _, r in read_records(path, 2)] == [["1", "Soup"]]


def test_read_records_missing_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(InputError):
            list(read_records(os.path.join(tmpdir, "missing.csv"), 2))


def test_discover_lists_csv_files_in_name_order(tmp_path):
    ratings_dir = tmp_path / "ratings"
    ratings_dir.mkdir()
    write(ratings_dir / "steve.csv", "")
    write(ratings_dir / "andrew.csv", "")
    write(ratings_dir / "notes.txt", "")
    (ratings_dir / "archive.csv").mkdir()

    series = RatingStore(str(ratings_dir)).discover()

    assert series == [
        ("Andrew", os.path.join(str(ratings_dir), "andrew.csv")),
        ("Steve", os.path.join(str(ratings_dir), "steve.csv")),
    ]


def test_discover_missing_directory(tmp_path):
    with pytest.raises(InputError):
        RatingStore(str(tmp_path / "nope")).discover()
