"""
Output CSV management.

This module provides the CsvOutputManager, the single writer for every output CSV of
a run. Each report label maps to one output file; several input reports (for example
overlapping combined reports) may feed the same file, and all their rows end up in it.

Header rule: the first write of a run to an output file starts it fresh with the
header row, unless a template with the same name was copied into the output directory
for this run, in which case the template (and its header) is kept and appended to.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Union

import pandas as pd

from acf_report_csv.config.settings import DEFAULT_BINARY_HEADER, DEFAULT_GENDER_HEADER
from acf_report_csv.exceptions import MissingOutputDirectory
from acf_report_csv.processors.report_router import ReportDescriptor
from acf_report_csv.transformers.flatteners import OutputRecord

logger = logging.getLogger(__name__)

GENDER_HEADER = DEFAULT_GENDER_HEADER
BINARY_HEADER = DEFAULT_BINARY_HEADER


class CsvOutputManager:
    """
    Writer for the output CSV files of one conversion run.

    Attributes:
        output_dir: Directory receiving the CSV files.
        written: Number of records written per output file name.

    Example:
        >>> sink = CsvOutputManager("./output")
        >>> sink.write(route("genderRatio2012_2014.pdf"), records)
        12
    """

    def __init__(
        self,
        output_dir: Union[str, Path],
        gender_header: Optional[List[str]] = None,
        binary_header: Optional[List[str]] = None,
        gender_marker: str = "gender",
        templates: Iterable[str] = (),
    ):
        """
        Initialize CsvOutputManager.

        Args:
            output_dir: Directory receiving the CSV files.
            gender_header: Header for labels containing ``gender_marker``.
            binary_header: Header for every other label.
            gender_marker: Case-insensitive substring selecting the gender header.
            templates: Names of template files already copied into ``output_dir``.
        """
        self.output_dir = Path(output_dir)
        self.gender_header = list(gender_header or GENDER_HEADER)
        self.binary_header = list(binary_header or BINARY_HEADER)
        self.gender_marker = gender_marker
        self.templates: Set[str] = set(templates)
        self.written: Dict[str, int] = {}

    def header_for(self, descriptor: ReportDescriptor) -> List[str]:
        """Return the CSV header for a report's output file."""
        if descriptor.is_gender_report(self.gender_marker):
            return list(self.gender_header)
        return list(self.binary_header)

    def path_for(self, descriptor: ReportDescriptor) -> Path:
        return self.output_dir / descriptor.output_file_name

    def _start(self, path: Path, header: List[str]) -> None:
        """Prepare an output file for its first write of the run."""
        if path.name in self.templates and path.exists() and path.stat().st_size > 0:
            with open(path, "rb") as f:
                f.seek(-1, 2)
                ends_with_newline = f.read(1) == b"\n"
            if not ends_with_newline:
                with open(path, "a", encoding="utf-8", newline="") as f:
                    f.write("\n")
            logger.debug("Appending to template %s", path.name)
        else:
            pd.DataFrame(columns=header).to_csv(
                path, mode="w", header=True, index=False, lineterminator="\n", encoding="utf-8"
            )
            logger.debug("Started %s", path.name)
        self.written[path.name] = 0

    def write(self, descriptor: ReportDescriptor, records: Iterable[OutputRecord]) -> int:
        """
        Append records to the report's output file.

        Records are materialized before anything is written, so a flattening error
        leaves the output file untouched.

        Args:
            descriptor: Routed report the records come from.
            records: Records to write.

        Returns:
            Number of records written.

        Raises:
            MissingOutputDirectory: If the output directory does not exist.
        """
        rows = [record.as_row() for record in records]

        if not self.output_dir.is_dir():
            raise MissingOutputDirectory(f"Output directory not found: {self.output_dir}")

        path = self.path_for(descriptor)
        header = self.header_for(descriptor)
        if path.name not in self.written:
            self._start(path, header)

        df = pd.DataFrame(rows, columns=header, dtype=str)
        df.to_csv(path, mode="a", header=False, index=False, lineterminator="\n", encoding="utf-8")

        self.written[path.name] += len(rows)
        return len(rows)
