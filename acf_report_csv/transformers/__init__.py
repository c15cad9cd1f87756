"""Row flattening into normalized (state, year) records."""

from acf_report_csv.transformers.flatteners import (
    MISSING_DATA_SENTINEL,
    RECORD_WIDTH,
    TOTAL_INDEX,
    OutputRecord,
    flatten,
    flatten_range,
    flatten_yearly,
)

__all__ = [
    "MISSING_DATA_SENTINEL",
    "RECORD_WIDTH",
    "TOTAL_INDEX",
    "OutputRecord",
    "flatten",
    "flatten_range",
    "flatten_yearly",
]
