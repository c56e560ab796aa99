import json
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def german_potato_salad_path() -> Path:
    return DATA_DIR / "german-potato-salad.json"


@pytest.fixture
def german_potato_salad(german_potato_salad_path) -> dict:
    with german_potato_salad_path.open(encoding="utf-8") as f:
        return json.load(f)
