import pytest

from rental_library.ledger import InventoryLedger
from rental_library.utils.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # The CLI's --output flag writes to os.environ; monkeypatch restores it after each test
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")


@pytest.fixture
def ledger():
    return InventoryLedger()


@pytest.fixture
def stocked_ledger():
    lib = InventoryLedger()
    lib.add_book("Dune", "Frank Herbert", 10.0, 2.0)
    lib.add_book("Emma", "Jane Austen", 7.5, 1.25)
    lib.add_book("Ulysses", "James Joyce", 12.0, 3.0)
    return lib
