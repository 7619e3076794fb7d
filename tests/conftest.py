from pathlib import Path

import pytest

SCHOOL_WEEK_YAML = """\
Start: 8:00 AM
End: 11:00 AM
Colors:
  Invariants: "lightgray"
  French: "lightblue"
  Math: "lightgreen"
Invariants:
  - Block: Recess
    Time: 10:00 AM - 10:30 AM
Monday:
  - Block: French
    Time: 8:00 AM - 10:00 AM
  - Block: Math
    Time: 10:30 AM - 11:00 AM
Tuesday:
  - Block: Math
    Time: 8:00 AM - 9:00 AM
Wednesday:
"""


@pytest.fixture
def school_week_yaml() -> str:
    return SCHOOL_WEEK_YAML


@pytest.fixture
def school_week_path(tmp_path: Path) -> Path:
    path = tmp_path / "schedule.yaml"
    path.write_text(SCHOOL_WEEK_YAML, encoding="utf-8")
    return path
