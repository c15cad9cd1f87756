"""Tests for report file routing."""

import pytest

from acf_report_csv.exceptions import UnrecognizedFileName
from acf_report_csv.processors import ReportDescriptor, ReportKind, route


def test_combined_scenario():
    descriptor = route("genderRatio2012_2014.pdf")

    assert descriptor == ReportDescriptor(ReportKind.COMBINED, "genderRatio", 2012, 2014)
    assert descriptor.years == (2012, 2013, 2014)
    assert descriptor.output_file_name == "genderRatio.csv"


def test_yearly_scenario():
    descriptor = route("complianceYesNo2013.pdf")

    assert descriptor.kind is ReportKind.YEARLY
    assert descriptor.output_base_name == "complianceYesNo"
    assert descriptor.year == 2013
    assert descriptor.years == (2013,)


def test_unrecognized_scenario():
    with pytest.raises(UnrecognizedFileName) as excinfo:
        route("report.txt")

    assert excinfo.value.file_name == "report.txt"


@pytest.mark.parametrize(
    "name",
    [
        "complianceYesNo13.pdf",
        "complianceYesNo2013.pdf.bak",
        "2013.pdf",
        "complianceYesNo2013_14.pdf",
        "complianceYesNo2013_2014_2015.pdf",
        "compliance2013YesNo.pdf",
        "complianceYesNo2013.csv",
    ],
)
def test_names_must_match_whole_pattern(name):
    with pytest.raises(UnrecognizedFileName):
        route(name)


def test_reversed_range_is_rejected():
    with pytest.raises(UnrecognizedFileName):
        route("genderRatio2016_2012.pdf")


def test_path_and_suffix_case():
    descriptor = route("/data/acf data/Combined/genderRatio2012_2016.PDF")

    assert descriptor.kind is ReportKind.COMBINED
    assert descriptor.end_year == 2016


def test_year_is_only_defined_for_yearly_reports():
    with pytest.raises(AttributeError):
        route("genderRatio2012_2014.pdf").year


@pytest.mark.parametrize(
    "name, expected",
    [
        ("genderRatio2012.pdf", True),
        ("GenderRatio2012_2014.pdf", True),
        ("childGENDER2015.pdf", True),
        ("complianceYesNo2013.pdf", False),
    ],
)
def test_gender_marker(name, expected):
    assert route(name).is_gender_report() is expected
