# tests/conftest.py
import sys
from pathlib import Path
import pytest

# Make "src" importable
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from catalog import Catalog, build_form
from preview import PreviewHandle
from session import ChecklistSession


class CountingAllocator:
    """Fake allocator: records every allocate/release, no image decoding."""

    def __init__(self):
        self.allocated = []
        self.released = []

    def allocate(self, photo):
        handle = PreviewHandle(key=f"fake://{len(self.allocated)}", photo=photo)
        self.allocated.append(handle)
        return handle

    def release(self, handle):
        assert handle not in self.released, f"double release of {handle.key}"
        handle.released = True
        self.released.append(handle)

    @property
    def live(self):
        return len(self.allocated) - len(self.released)


SMALL_CATALOG = [
    {
        "title": "1. Housekeeping",
        "items": [
            {"id": "1.1", "text": "Dinding & Ventilasi", "repeatable": True},
            {"id": "1.2", "text": "Jendela", "repeatable": False},
        ],
    },
    {
        "title": "2. Safety",
        "items": [
            {"id": "2.1", "text": "Penggunaan APD", "repeatable": True},
        ],
    },
]


@pytest.fixture(scope="session")
def catalog():
    # Small mixed catalog: repeatable and non-repeatable items
    return Catalog(SMALL_CATALOG)

@pytest.fixture
def tree(catalog):
    return build_form(catalog)

@pytest.fixture
def allocator():
    return CountingAllocator()

@pytest.fixture
def session(tree, allocator):
    # Fresh session per test
    s = ChecklistSession(tree, allocator=allocator)
    yield s
    s.close()
