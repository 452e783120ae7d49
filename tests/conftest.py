from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def load_fixture():
    """Return the raw bytes of a sample API response stored under tests/data."""

    def _load(name: str) -> bytes:
        return (DATA_DIR / f"{name}.json").read_bytes()

    return _load
