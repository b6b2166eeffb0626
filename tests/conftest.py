"""Pytest configuration.

`envfile` is normally installed (`pip install -e .`); `src/` is also put on
`sys.path` so the tests run from a plain checkout.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))


@pytest.fixture
def fixtures() -> Path:
    return ROOT / "tests" / "fixtures"
