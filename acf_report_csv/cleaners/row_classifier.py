"""
Data-row recognition for extracted report text.

Extracted PDF text mixes titles, column headers, footnotes and page numbers with the
data rows. A data row is a line that begins with a known state name; everything after
the name is the row's whitespace-separated values.
"""

from typing import Iterator, NamedTuple, Optional, Tuple

from acf_report_csv.cleaners.state_directory import StateDirectory, StateEntry


class ClassifiedRow(NamedTuple):
    """A recognized data row: the matched state and the value tokens after its name."""

    entry: StateEntry
    tokens: Tuple[str, ...]


def strip_thousands_separators(line: str) -> str:
    """
    Remove every comma from a line.

    Commas only appear as thousands separators in the report numerals, never in
    state names, so stripping is unconditional.

    Example:
        >>> strip_thousands_separators("Texas 1,234 5,678")
        'Texas 1234 5678'
    """
    return line.replace(",", "")


def match_state(text: str, directory: StateDirectory) -> Optional[StateEntry]:
    """
    Find the state whose name is the longest prefix of ``text``.

    When several names are prefixes of the line the longest one wins, so a short
    name can never shadow a longer one that contains it. Ties keep reference
    table order.

    Args:
        text: Line with thousands separators already removed.
        directory: Loaded state directory.

    Returns:
        The matching StateEntry, or None if the line is not a data row.
    """
    best = None
    for entry in directory.entries():
        if text.startswith(entry.name) and (best is None or len(entry.name) > len(best.name)):
            best = entry
    return best


def classify(line: str, directory: StateDirectory) -> Optional[ClassifiedRow]:
    """
    Decide whether a line is a data row and split it into state and values.

    Args:
        line: One raw line of extracted text.
        directory: Loaded state directory.

    Returns:
        ClassifiedRow for data rows, None for headers, footnotes and blank lines.

    Example:
        >>> directory = StateDirectory.from_lines(["StateId,State", "1,Alabama"])
        >>> classify("Alabama 1,212 8 1,220 0", directory).tokens
        ('1212', '8', '1220', '0')
        >>> classify("Table 3. Placement settings", directory) is None
        True
    """
    text = strip_thousands_separators(line).rstrip()
    entry = match_state(text, directory)
    if entry is None:
        return None

    remainder = text[len(entry.name):]
    if remainder.startswith(" "):
        remainder = remainder[1:]
    tokens = tuple(remainder.split(" ")) if remainder else ()
    return ClassifiedRow(entry, tokens)


def iter_data_rows(page: str, directory: StateDirectory) -> Iterator[Tuple[int, ClassifiedRow]]:
    """
    Yield ``(line_number, row)`` for every data row of a page, in source order.

    Line numbers are 1-based so they can be quoted in error messages.
    """
    for line_number, line in enumerate(page.splitlines(), start=1):
        row = classify(line, directory)
        if row is not None:
            yield line_number, row
