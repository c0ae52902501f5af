"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from numeral_speller.pipeline import NumeralSpeller  # noqa: E402

_ENV_VARS = ("NUMERAL_SPELLER_LANG", "NUMERAL_SPELLER_LOCALE_DIR")


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch):
    """Keep a developer's .env / shell settings out of the test results."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def speller() -> NumeralSpeller:
    with pytest.MonkeyPatch.context() as mp:
        for name in _ENV_VARS:
            mp.delenv(name, raising=False)
        return NumeralSpeller(default_lang="nl")


@pytest.fixture(scope="session")
def nl(speller):
    return speller.profile("nl")


@pytest.fixture(scope="session")
def fy(speller):
    return speller.profile("fy")
