import random
from datetime import UTC, datetime
from pathlib import Path

import pytest

from primkit.rules.loader import load_rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rng():
    """Seeded generator so random helpers are reproducible."""
    return random.Random(1234)


@pytest.fixture
def fixed_now():
    return datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def rules_path() -> Path:
    path = PROJECT_ROOT / "rules.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Rules not found at {path}")
    return path


@pytest.fixture
def rules(rules_path):
    """Rules loaded from the project's real rules.yaml."""
    return load_rules(rules_path)


@pytest.fixture
def write_rules(tmp_path):
    """Write a rules file into tmp_path and return its path."""

    def _write(content: str, name: str = "rules.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
