"""Shared utilities and helper functions."""

from acf_report_csv.utils.csv_writer import BINARY_HEADER, GENDER_HEADER, CsvOutputManager
from acf_report_csv.utils.logging_setup import setup_logging

__all__ = [
    "BINARY_HEADER",
    "GENDER_HEADER",
    "CsvOutputManager",
    "setup_logging",
]
