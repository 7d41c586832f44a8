from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

FIXED_MOMENT = datetime(2024, 1, 1, 0, 0, 0)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_MOMENT
