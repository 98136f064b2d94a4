"""Append-only borrow history.

The ledger stores user and book ids as given. Checking that they refer to
existing records is the job of :class:`library_catalog.library.Library`.
"""

import logging
from datetime import date
from typing import Callable, List, Optional

from library_catalog.transaction import Transaction

logger = logging.getLogger(__name__)


class TransactionLedger:
    """Ordered list of transactions; the only mutation is marking a return."""

    def __init__(self, clock: Callable[[], date] = date.today) -> None:
        self._transactions: List[Transaction] = []
        self._next_id = 1
        self._clock = clock

    def record(self, user_id: int, book_id: int) -> Transaction:
        tx = Transaction(id=self._next_id, user_id=user_id, book_id=book_id, borrow_date=self._clock())
        self._transactions.append(tx)
        self._next_id += 1
        logger.debug(f"Transaction recorded: {tx}")
        return tx

    def mark_returned(self, transaction_id: int) -> bool:
        """Set today's return date on the first outstanding transaction with this id.

        Unknown or already returned ids are ignored. Returns True when a
        transaction was marked.
        """
        for tx in self._transactions:
            if tx.id == transaction_id and tx.is_outstanding:
                tx.mark_returned(self._clock())
                return True
        logger.debug(f"No outstanding transaction with ID {transaction_id}; nothing marked.")
        return False

    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        for tx in self._transactions:
            if tx.id == transaction_id:
                return tx
        return None

    def outstanding(self, book_id: Optional[int] = None) -> List[Transaction]:
        return [
            tx for tx in self._transactions
            if tx.is_outstanding and (book_id is None or tx.book_id == book_id)
        ]

    def list_all(self) -> List[Transaction]:
        return list(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)
