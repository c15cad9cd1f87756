"""Tests for yearly and multi-year row flattening."""

import pytest

from acf_report_csv.exceptions import RowShapeMismatch
from acf_report_csv.processors import route
from acf_report_csv.transformers import OutputRecord, flatten, flatten_range, flatten_yearly

YEARLY_PAGE = """Table 1. Caseworker visits, FY 2015
State Yes No Total Missing
Alabama 12 8 20 0
Alaska 1,204 96 1,300 0
Footnote: counts exclude tribal agencies
"""


def test_yearly_scenario(directory):
    records = list(flatten_yearly("Alabama 12 8 20 0", 2015, directory))

    assert records == [OutputRecord("1", 2015, "12", "8", "20", "0")]


def test_yearly_page_in_line_order(directory):
    records = list(flatten_yearly(YEARLY_PAGE, 2015, directory))

    assert [r.as_row() for r in records] == [
        ("1", "2015", "12", "8", "20", "0"),
        ("2", "2015", "1204", "96", "1300", "0"),
    ]


def test_yearly_keeps_zero_totals(directory):
    records = list(flatten_yearly("Texas 0 0 0 0", 2015, directory))

    assert records == [OutputRecord("48", 2015, "0", "0", "0", "0")]


def test_yearly_is_deterministic(directory):
    first = list(flatten_yearly(YEARLY_PAGE, 2015, directory))
    second = list(flatten_yearly(YEARLY_PAGE, 2015, directory))

    assert first == second


@pytest.mark.parametrize("line", ["Alabama 12 8 20", "Alabama 12 8 20 0 7", "Alabama"])
def test_yearly_wrong_shape(line, directory):
    with pytest.raises(RowShapeMismatch) as excinfo:
        list(flatten_yearly("header\n" + line, 2015, directory, source="visits2015.pdf"))

    error = excinfo.value
    assert error.source == "visits2015.pdf"
    assert error.line_number == 2
    assert error.state_name == "Alabama"
    assert error.expected == 4


def test_yearly_is_lazy(directory):
    records = flatten_yearly("Alabama 1 2 3 0\nAlaska 1 2", 2015, directory)

    assert next(records).state_id == "1"
    with pytest.raises(RowShapeMismatch):
        next(records)


def test_range_skips_zero_totals(directory):
    line = "Alabama 10 5 15 0 12 8 20 0 0 0 0 0 0 0 0 0 0 0 0 20"

    records = list(flatten_range(line, 2012, 2016, directory))

    assert records == [
        OutputRecord("1", 2012, "10", "5", "15", "0"),
        OutputRecord("1", 2013, "12", "8", "20", "0"),
    ]


def test_range_emits_every_year_with_data(directory):
    line = "Texas 1 2 3 0 4 5 9 1 6 7 13 2"

    records = list(flatten_range(line, 2012, 2014, directory))

    assert [r.year for r in records] == [2012, 2013, 2014]
    assert [r.as_row()[2:] for r in records] == [
        ("1", "2", "3", "0"),
        ("4", "5", "9", "1"),
        ("6", "7", "13", "2"),
    ]


def test_range_sentinel_is_the_literal_zero(directory):
    # Only a Total of exactly "0" marks missing data
    line = "Texas 0 0 00 0 1 1 0 0"

    records = list(flatten_range(line, 2012, 2013, directory))

    assert [r.year for r in records] == [2012]


def test_range_single_year(directory):
    records = list(flatten_range("Alaska 3 4 7 0", 2014, 2014, directory))

    assert records == [OutputRecord("2", 2014, "3", "4", "7", "0")]


def test_range_exact_fit_and_off_by_one(directory):
    exact = "Alabama " + " ".join(["1"] * 12)
    assert len(list(flatten_range(exact, 2012, 2014, directory))) == 3

    for tokens in (11, 13):
        line = "Alabama " + " ".join(["1"] * tokens)
        with pytest.raises(RowShapeMismatch) as excinfo:
            list(flatten_range(line, 2012, 2014, directory))
        assert excinfo.value.expected == 12
        assert excinfo.value.actual == tokens


def test_flatten_dispatches_on_report_kind(directory):
    page = "Alabama 1 2 3 0 4 5 9 0"

    combined = list(flatten(page, route("genderRatio2012_2013.pdf"), directory))
    assert [r.year for r in combined] == [2012, 2013]

    with pytest.raises(RowShapeMismatch):
        list(flatten(page, route("genderRatio2012.pdf"), directory))

    yearly = list(flatten("Alabama 1 2 3 0", route("genderRatio2012.pdf"), directory))
    assert yearly == [OutputRecord("1", 2012, "1", "2", "3", "0")]
