"""
Flattening of report rows into one record per state and year.

Every report carries the same four values per state and year: two category counts
(Yes/No or Male/Female), a Total and a Missing count. Yearly reports hold one group of
four per row. Combined reports hold one group per year of their range, packed
left to right in ascending year order.

Combined reports zero-fill years they do not cover. A group whose Total is the literal
"0" therefore means "no report filed" and produces no record, so a placeholder never
overwrites real data from another report covering the same year.
"""

import logging
from typing import Iterator, NamedTuple, Optional, Tuple

from acf_report_csv.cleaners.row_classifier import iter_data_rows
from acf_report_csv.cleaners.state_directory import StateDirectory
from acf_report_csv.exceptions import RowShapeMismatch
from acf_report_csv.processors.report_router import ReportDescriptor, ReportKind

logger = logging.getLogger(__name__)

# Values per (state, year): category 1, category 2, total, missing
RECORD_WIDTH = 4
TOTAL_INDEX = 2
MISSING_DATA_SENTINEL = "0"


class OutputRecord(NamedTuple):
    """One normalized output row. Column meaning is decided by the output file's header."""

    state_id: str
    year: int
    col1: str
    col2: str
    col3: str
    col4: str

    def as_row(self) -> Tuple[str, ...]:
        """Return the record as CSV field strings."""
        return (self.state_id, str(self.year), self.col1, self.col2, self.col3, self.col4)


def _check_shape(tokens, expected: int, source: str, line_number: int, state_name: str) -> None:
    if len(tokens) != expected:
        raise RowShapeMismatch(source, line_number, state_name, expected, len(tokens))


def flatten_yearly(
    page: str,
    year: int,
    directory: StateDirectory,
    source: Optional[str] = None,
) -> Iterator[OutputRecord]:
    """
    Turn every data row of a single-year report into one record.

    Args:
        page: Extracted report text.
        year: The report's year, taken from its file name.
        directory: Loaded state directory.
        source: Report name used in error messages.

    Yields:
        One OutputRecord per data row, in line order.

    Raises:
        RowShapeMismatch: If a data row does not carry exactly four values.

    Example:
        >>> directory = StateDirectory.from_lines(["StateId,State", "1,Alabama"])
        >>> list(flatten_yearly("Alabama 12 8 20 0", 2015, directory))
        [OutputRecord(state_id='1', year=2015, col1='12', col2='8', col3='20', col4='0')]
    """
    source = source or "<page>"
    for line_number, row in iter_data_rows(page, directory):
        _check_shape(row.tokens, RECORD_WIDTH, source, line_number, row.entry.name)
        yield OutputRecord(row.entry.id, year, *row.tokens)


def flatten_range(
    page: str,
    start_year: int,
    end_year: int,
    directory: StateDirectory,
    source: Optional[str] = None,
) -> Iterator[OutputRecord]:
    """
    Expand every data row of a combined report into one record per reported year.

    Args:
        page: Extracted report text.
        start_year: First year of the report's range.
        end_year: Last year of the report's range (inclusive).
        directory: Loaded state directory.
        source: Report name used in error messages.

    Yields:
        Records in line order, ascending year within a line. Year groups whose
        Total is "0" are skipped.

    Raises:
        RowShapeMismatch: If a data row does not carry exactly four values per year.
    """
    source = source or "<page>"
    n_years = end_year - start_year + 1
    expected = RECORD_WIDTH * n_years

    for line_number, row in iter_data_rows(page, directory):
        _check_shape(row.tokens, expected, source, line_number, row.entry.name)

        for offset in range(n_years):
            group = row.tokens[offset * RECORD_WIDTH:(offset + 1) * RECORD_WIDTH]
            year = start_year + offset
            if group[TOTAL_INDEX] == MISSING_DATA_SENTINEL:
                logger.debug("%s: no %d data for %s, skipped", source, year, row.entry.name)
                continue
            yield OutputRecord(row.entry.id, year, *group)


def flatten(
    page: str,
    descriptor: ReportDescriptor,
    directory: StateDirectory,
    source: Optional[str] = None,
) -> Iterator[OutputRecord]:
    """Flatten a page with the flattener matching the report kind."""
    if descriptor.kind is ReportKind.COMBINED:
        return flatten_range(page, descriptor.start_year, descriptor.end_year, directory, source)
    return flatten_yearly(page, descriptor.year, directory, source)
