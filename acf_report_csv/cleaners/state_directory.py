"""
State reference table loading.

This module provides the StateDirectory, an immutable name -> id mapping built once
from the "State.csv" reference table (one header line, then ``id,name`` rows).
Data rows in extracted report text are recognized by the state names it holds.
"""

import logging
from dataclasses import dataclass
from collections.abc import Mapping
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from acf_report_csv.exceptions import MalformedReferenceTable, MissingInputFile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StateEntry:
    """One row of the reference table."""

    name: str
    id: str


class StateDirectory(Mapping):
    """
    Read-only mapping from state name to state id.

    Insertion order follows the reference table, so iteration is deterministic.
    The directory is never mutated after construction and can be shared freely.

    Example:
        >>> directory = StateDirectory.from_lines(["StateId,State", "1,Alabama"])
        >>> directory["Alabama"]
        '1'
        >>> directory.lookup("Alabama")
        StateEntry(name='Alabama', id='1')
    """

    def __init__(self, entries: Iterable[StateEntry] = ()):
        self._entries = {}
        for entry in entries:
            self._entries[entry.name] = entry

    @classmethod
    def from_lines(cls, lines: Iterable[str], source: str = "<reference table>") -> "StateDirectory":
        """
        Build a directory from reference table lines.

        The first line is a header and is skipped without validation. Blank lines
        are ignored.

        Args:
            lines: Lines of the table, header included.
            source: Name used in error messages.

        Returns:
            The loaded StateDirectory.

        Raises:
            MalformedReferenceTable: If a row is not exactly two non-empty comma-separated
                fields, or if a state name appears twice.
        """
        entries = {}
        for line_number, line in enumerate(lines, start=1):
            if line_number == 1:
                continue
            text = line.rstrip("\r\n")
            if not text.strip():
                continue

            fields = text.split(",")
            if len(fields) != 2:
                raise MalformedReferenceTable(
                    source, line_number, f"expected 2 fields 'id,name', found {len(fields)}"
                )

            state_id, name = fields[0].strip(), fields[1].strip()
            if not state_id or not name:
                raise MalformedReferenceTable(source, line_number, "empty id or name")
            if name in entries:
                raise MalformedReferenceTable(source, line_number, f"duplicate state name {name!r}")

            entries[name] = StateEntry(name=name, id=state_id)

        return cls(entries.values())

    @classmethod
    def load(cls, path: Union[str, Path]) -> "StateDirectory":
        """
        Load the directory from a reference table file.

        Args:
            path: Path to the "State.csv" file.

        Returns:
            The loaded StateDirectory.

        Raises:
            MissingInputFile: If the file does not exist.
            MalformedReferenceTable: If the table content is invalid.
        """
        path = Path(path)
        if not path.is_file():
            raise MissingInputFile(f"State reference table not found: {path}")

        # utf-8-sig drops the BOM spreadsheet exports tend to add
        with open(path, "r", encoding="utf-8-sig") as f:
            directory = cls.from_lines(f, source=path.name)

        logger.info("Loaded %d states from %s", len(directory), path)
        return directory

    def lookup(self, name: str) -> Optional[StateEntry]:
        """Return the entry for ``name`` or None."""
        return self._entries.get(name)

    def entries(self) -> Iterator[StateEntry]:
        """Iterate over entries in reference table order."""
        return iter(self._entries.values())

    def __getitem__(self, name: str) -> str:
        return self._entries[name].id

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"StateDirectory({len(self)} states)"
