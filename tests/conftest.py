import json
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def ditto_payload():
    """A complete /pokemon/ditto payload, as PokeAPI returns it."""
    return json.loads((DATA_DIR / "ditto.json").read_text())
