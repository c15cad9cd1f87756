"""Tests for PDF text extraction."""

import fitz
import pytest

from acf_report_csv.exceptions import MissingInputFile, ReportConversionError, UnreadableReport
from acf_report_csv.processors import extract_text, words_to_lines


def word(x0, y0, text, height=10.0, width=20.0):
    return (x0, y0, x0 + width, y0 + height, text, 0, 0, 0)


def test_words_are_grouped_by_row_and_ordered_by_x():
    words = [
        word(120, 100, "20"),
        word(0, 100.8, "Alabama", width=60),
        word(70, 99.5, "12"),
        word(0, 130, "Alaska", width=60),
        word(70, 130, "3"),
    ]

    assert words_to_lines(words) == ["Alabama 12 20", "Alaska 3"]


def test_no_words():
    assert words_to_lines([]) == []


def test_extract_text_reads_rows_across_pages(tmp_path):
    path = tmp_path / "complianceYesNo2013.pdf"
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), "Table 1. Compliance by state")
    page.insert_text((72, 100), "Alabama 1,212 8 1,220 0")
    page = doc.new_page()
    page.insert_text((72, 72), "Texas 5 6 11 0")
    doc.save(str(path))
    doc.close()

    lines = extract_text(path).splitlines()

    assert "Alabama 1,212 8 1,220 0" in lines
    assert lines.index("Alabama 1,212 8 1,220 0") < lines.index("Texas 5 6 11 0")


def test_missing_pdf(tmp_path):
    with pytest.raises(MissingInputFile):
        extract_text(tmp_path / "nope2013.pdf")


def test_corrupt_pdf_is_a_conversion_error(tmp_path):
    path = tmp_path / "complianceYesNo2013.pdf"
    path.write_bytes(b"%PDF-1.4")

    with pytest.raises(UnreadableReport) as excinfo:
        extract_text(path)

    assert isinstance(excinfo.value, ReportConversionError)
    assert excinfo.value.file_name == "complianceYesNo2013.pdf"
    assert "complianceYesNo2013.pdf" in str(excinfo.value)
