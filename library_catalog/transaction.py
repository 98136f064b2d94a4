from __future__ import annotations

from datetime import date
from typing import Optional


class Transaction:
    """A borrow record linking a user id to a book id.

    ``user_id`` and ``book_id`` are plain identifiers; nothing here checks that
    they exist. A transaction starts outstanding (no return date) and becomes
    returned exactly once.
    """

    def __init__(self, id: int, user_id: int, book_id: int, borrow_date: date,
                 return_date: Optional[date] = None) -> None:
        self.id = id
        self.user_id = user_id
        self.book_id = book_id
        self.borrow_date = borrow_date
        self.return_date = return_date

    @property
    def is_outstanding(self) -> bool:
        return self.return_date is None

    @property
    def status(self) -> str:
        """Human readable status: BORROWED or RETURNED."""
        return "BORROWED" if self.is_outstanding else "RETURNED"

    def mark_returned(self, when: date) -> None:
        if self.return_date is not None:
            raise ValueError(f"Transaction {self.id} was already returned on {self.return_date}.")
        self.return_date = when

    def __str__(self) -> str:
        returned = self.return_date.isoformat() if self.return_date else "Not returned yet"
        return (
            f"TxID:{self.id} | User:{self.user_id} | Book:{self.book_id} | "
            f"Borrowed:{self.borrow_date.isoformat()} | Returned:{returned}"
        )

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Transaction(id={self.id!r}, user_id={self.user_id!r}, book_id={self.book_id!r}, status={self.status!r})"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "book_id": self.book_id,
            "borrow_date": self.borrow_date.isoformat(),
            "return_date": self.return_date.isoformat() if self.return_date else None,
            "status": self.status,
        }
