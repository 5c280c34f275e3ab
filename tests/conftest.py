from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def isolated_default_inflector():
    """Give every test its own process-wide inflector and string registry."""

    from inflector import inflection, strings

    previous = inflection.set_inflector(None)
    saved_strings = strings.default_strings.get_strings()
    yield
    inflection.set_inflector(previous)
    strings.default_strings.set_strings(saved_strings)
