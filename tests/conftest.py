"""
Pytest configuration and shared fixtures for hashtree tests.

This conftest.py:
1. Adds project root and tests root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Isolates tests from HASHTREE_* environment variables and config files
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from fixtures import GOLDEN_RECORDS, make_records  # noqa: E402
from hashtree.config import set_default_config  # noqa: E402
from hashtree.merkle import construct  # noqa: E402


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Clear HASHTREE_* variables and run from an empty directory."""
    for var in [
        "HASHTREE_HASH_ALG",
        "HASHTREE_RECORD_ENCODING",
        "HASHTREE_LOG_LEVEL",
        "HASHTREE_LOG_FILE",
    ]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    set_default_config(None)
    yield
    set_default_config(None)


@pytest.fixture
def golden_tree():
    """Tree over the T1..T4 reference records."""
    return construct(GOLDEN_RECORDS)


@pytest.fixture
def records_file(tmp_path):
    """Text file holding the T1..T4 reference records, one per line."""
    path = tmp_path / "records.txt"
    path.write_text("".join(r.decode() + "\n" for r in GOLDEN_RECORDS))
    return path


@pytest.fixture
def seven_records():
    """Seven distinct records (padding at two levels)."""
    return make_records(7)
