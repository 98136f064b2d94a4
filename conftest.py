from datetime import date

import pytest

from library_catalog.book_registry import BookRegistry
from library_catalog.ledger import TransactionLedger
from library_catalog.library import Library
from library_catalog.user_registry import UserRegistry

TODAY = date(2024, 3, 15)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def ledger():
    return TransactionLedger(clock=lambda: TODAY)


@pytest.fixture
def lib(ledger):
    # Fresh, unseeded library per test with a fixed clock
    return Library(books=BookRegistry(), users=UserRegistry(), ledger=ledger, strict_returns=False)


@pytest.fixture
def strict_lib(ledger):
    return Library(ledger=ledger, strict_returns=True)
