"""PDF text extraction and report file routing."""

from acf_report_csv.processors.pdf_processor import extract_text, words_to_lines
from acf_report_csv.processors.report_router import (
    ReportDescriptor,
    ReportKind,
    route,
)

__all__ = [
    "extract_text",
    "words_to_lines",
    "ReportDescriptor",
    "ReportKind",
    "route",
]
