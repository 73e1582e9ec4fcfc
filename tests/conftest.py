from pathlib import Path

import pytest

from src.api.deps import reset_caches

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def rules_path() -> Path:
    """The real rules file shipped at the project root."""
    path = PROJECT_ROOT / "rules.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Rules not found at {path}")
    return path


@pytest.fixture(autouse=True)
def fresh_caches():
    """Settings, rules and the product store are process-wide; isolate tests."""
    reset_caches()
    yield
    reset_caches()
