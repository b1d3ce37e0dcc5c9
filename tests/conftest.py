import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from gedcom2dot.config import reset_config  # noqa: E402
from gedcom2dot.loader import iter_field_events, tokenize_file  # noqa: E402
from gedcom2dot.logging import configure_logging  # noqa: E402
from gedcom2dot.store import EntityStore, build_store  # noqa: E402
from gedcom2dot.utils import mock_file_path  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_logging():
    """CLI runs swap stderr; rebuild handlers so later tests log to a live stream."""
    yield
    reset_config()
    configure_logging()


@pytest.fixture
def sample_path() -> Path:
    return mock_file_path("family.ged")


@pytest.fixture
def sample_store(sample_path) -> EntityStore:
    return build_store(iter_field_events(tokenize_file(sample_path)))


@pytest.fixture
def make_store():
    def _make(people=(), families=()) -> EntityStore:
        store = EntityStore()
        for person in people:
            store.register_person(person)
        for family in families:
            store.register_family(family)
        return store

    return _make
