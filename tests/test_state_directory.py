"""Tests for state reference table loading."""

import pytest

from acf_report_csv.cleaners import StateDirectory, StateEntry
from acf_report_csv.exceptions import MalformedReferenceTable, MissingInputFile


def test_load_maps_every_name_to_its_id(state_csv):
    directory = StateDirectory.load(state_csv)

    assert dict(directory) == {
        "Alabama": "1",
        "Alaska": "2",
        "Texas": "48",
        "Virginia": "51",
        "West Virginia": "54",
    }
    assert directory.lookup("Texas") == StateEntry(name="Texas", id="48")
    assert directory.lookup("Puerto Rico") is None


def test_entries_keep_table_order(directory):
    assert [e.name for e in directory.entries()] == [
        "Alabama",
        "Alaska",
        "Texas",
        "Virginia",
        "West Virginia",
    ]


def test_header_is_skipped_without_validation():
    directory = StateDirectory.from_lines(["whatever header, with, commas", "1,Alabama"])

    assert list(directory) == ["Alabama"]


def test_blank_lines_and_crlf_are_tolerated():
    directory = StateDirectory.from_lines(["StateId,State\r\n", "1,Alabama\r\n", "\n", "2,Alaska"])

    assert directory["Alaska"] == "2"
    assert len(directory) == 2


def test_ids_are_opaque_strings():
    directory = StateDirectory.from_lines(["StateId,State", "AL01,Alabama"])

    assert directory["Alabama"] == "AL01"


def test_duplicate_name_is_rejected():
    with pytest.raises(MalformedReferenceTable) as excinfo:
        StateDirectory.from_lines(["StateId,State", "1,Alabama", "99,Alabama"])

    assert excinfo.value.line_number == 3
    assert "duplicate" in str(excinfo.value)


@pytest.mark.parametrize("row", ["1", "1,Alabama,extra", ",Alabama", "1,"])
def test_bad_rows_are_rejected(row):
    with pytest.raises(MalformedReferenceTable) as excinfo:
        StateDirectory.from_lines(["StateId,State", row])

    assert excinfo.value.line_number == 2


def test_bom_is_ignored(tmp_path):
    path = tmp_path / "State.csv"
    path.write_bytes("StateId,State\n1,Alabama\n".encode("utf-8-sig"))

    assert StateDirectory.load(path)["Alabama"] == "1"


def test_missing_table(tmp_path):
    with pytest.raises(MissingInputFile):
        StateDirectory.load(tmp_path / "State.csv")


def test_directory_is_read_only(directory):
    with pytest.raises(TypeError):
        directory["Ohio"] = "39"
