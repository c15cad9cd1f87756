"""
Report file routing.

Input PDFs come in two shapes, told apart only by their file names:

- yearly reports ``<label><YYYY>.pdf`` hold one year of data;
- combined reports ``<label><YYYY>_<YYYY>.pdf`` pack a contiguous range of years
  into every state row.

The label (the non-numeric prefix) names the output CSV file.
"""

import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from acf_report_csv.exceptions import UnrecognizedFileName

# Both patterns are applied with fullmatch; combined is tried first
COMBINED_NAME_RE = re.compile(r"(?P<label>\D+?)(?P<start>\d{4})_(?P<end>\d{4})\.pdf", re.I)
YEARLY_NAME_RE = re.compile(r"(?P<label>\D+?)(?P<year>\d{4})\.pdf", re.I)


class ReportKind(Enum):
    """Report layout, decided by file name."""

    YEARLY = "yearly"
    COMBINED = "combined"


@dataclass(frozen=True)
class ReportDescriptor:
    """
    Metadata derived from a report file name.

    Yearly reports have ``start_year == end_year``.
    """

    kind: ReportKind
    output_base_name: str
    start_year: int
    end_year: int

    @property
    def year(self) -> int:
        """The single year of a yearly report."""
        if self.kind is not ReportKind.YEARLY:
            raise AttributeError("combined reports span several years; use 'years'")
        return self.start_year

    @property
    def years(self) -> Tuple[int, ...]:
        """Every year covered, ascending."""
        return tuple(range(self.start_year, self.end_year + 1))

    @property
    def output_file_name(self) -> str:
        return f"{self.output_base_name}.csv"

    def is_gender_report(self, marker: str = "gender") -> bool:
        """True if the label contains ``marker`` (case-insensitive)."""
        return marker.lower() in self.output_base_name.lower()


def route(file_name: str) -> ReportDescriptor:
    """
    Classify a report file by its name.

    Only the base name is inspected, so full paths are accepted.

    Args:
        file_name: File name or path of the report PDF.

    Returns:
        ReportDescriptor for the file.

    Raises:
        UnrecognizedFileName: If the name matches neither pattern, or a combined
            name has its start year after its end year.

    Example:
        >>> route("genderRatio2012_2014.pdf")
        ReportDescriptor(kind=<ReportKind.COMBINED: 'combined'>, output_base_name='genderRatio', start_year=2012, end_year=2014)
        >>> route("complianceYesNo2013.pdf").year
        2013
    """
    base = os.path.basename(file_name)

    m = COMBINED_NAME_RE.fullmatch(base)
    if m:
        start, end = int(m.group("start")), int(m.group("end"))
        if start > end:
            raise UnrecognizedFileName(base, f"year range {start}_{end} is reversed")
        return ReportDescriptor(ReportKind.COMBINED, m.group("label"), start, end)

    m = YEARLY_NAME_RE.fullmatch(base)
    if m:
        year = int(m.group("year"))
        return ReportDescriptor(ReportKind.YEARLY, m.group("label"), year, year)

    raise UnrecognizedFileName(base)

