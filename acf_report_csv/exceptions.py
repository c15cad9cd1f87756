"""Error types raised by the conversion pipeline.

All errors derive from ReportConversionError so the command-line script can report
them uniformly. Filesystem precondition errors are also FileNotFoundError subclasses.
"""

from typing import List, Tuple


class ReportConversionError(Exception):
    """Base class for every pipeline error."""


class MalformedReferenceTable(ReportConversionError):
    """The state reference table has a bad row or a duplicate state name."""

    def __init__(self, source: str, line_number: int, reason: str):
        self.source = source
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{source}, line {line_number}: {reason}")


class UnrecognizedFileName(ReportConversionError):
    """An input file name matches neither the yearly nor the combined pattern."""

    def __init__(self, file_name: str, reason: str = "matches neither report naming pattern"):
        self.file_name = file_name
        super().__init__(f"{file_name}: {reason}")


class RowShapeMismatch(ReportConversionError):
    """A recognized data row does not carry the expected number of tokens."""

    def __init__(
        self,
        source: str,
        line_number: int,
        state_name: str,
        expected: int,
        actual: int,
    ):
        self.source = source
        self.line_number = line_number
        self.state_name = state_name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{source}, line {line_number} ({state_name}): "
            f"expected {expected} values, found {actual}"
        )


class MissingInputFile(ReportConversionError, FileNotFoundError):
    """A required input file (PDF or reference table) does not exist."""


class MissingOutputDirectory(ReportConversionError, FileNotFoundError):
    """The configured output directory does not exist."""


class ConversionFailed(ReportConversionError):
    """One or more input files failed while failures were being isolated per file."""

    def __init__(self, failures: List[Tuple[str, Exception]]):
        self.failures = failures
        lines = [f"{len(failures)} report(s) failed:"]
        lines.extend(f"  {name}: {error}" for name, error in failures)
        super().__init__("\n".join(lines))


class UnreadableReport(ReportConversionError):
    """A report PDF exists but its text cannot be extracted."""

    def __init__(self, file_name: str, reason: str):
        self.file_name = file_name
        super().__init__(f"{file_name}: cannot read PDF ({reason})")
