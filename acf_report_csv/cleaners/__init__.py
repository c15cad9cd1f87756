"""State reference data and data-row recognition."""

from acf_report_csv.cleaners.state_directory import StateDirectory, StateEntry
from acf_report_csv.cleaners.row_classifier import (
    ClassifiedRow,
    classify,
    iter_data_rows,
    match_state,
    strip_thousands_separators,
)

__all__ = [
    "StateDirectory",
    "StateEntry",
    "ClassifiedRow",
    "classify",
    "iter_data_rows",
    "match_state",
    "strip_thousands_separators",
]
