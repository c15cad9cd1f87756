"""Shared fixtures for the conversion pipeline tests."""

import sys
from pathlib import Path

import pytest

# Add package to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from acf_report_csv.cleaners import StateDirectory  # noqa: E402

STATE_TABLE = [
    "StateId,State",
    "1,Alabama",
    "2,Alaska",
    "48,Texas",
    "51,Virginia",
    "54,West Virginia",
]


@pytest.fixture
def directory():
    return StateDirectory.from_lines(STATE_TABLE)


@pytest.fixture
def state_csv(tmp_path):
    path = tmp_path / "State.csv"
    path.write_text("\n".join(STATE_TABLE) + "\n", encoding="utf-8")
    return path
