import logging
from typing import Any, Dict, List, Optional

from library_catalog.book import Book
from library_catalog.book_registry import BookRegistry
from library_catalog.config import settings
from library_catalog.ledger import TransactionLedger
from library_catalog.transaction import Transaction
from library_catalog.user import User
from library_catalog.user_registry import UserRegistry

logger = logging.getLogger(__name__)


class ReturnMismatchError(ValueError):
    """Raised in strict mode when a return does not match an outstanding borrow of that book."""


class Library:
    """Manages books, users and the borrow/return ledger.

    Each instance owns its own registries and ledger; nothing is shared
    between instances and nothing outlives the process.
    """

    def __init__(
        self,
        books: Optional[BookRegistry] = None,
        users: Optional[UserRegistry] = None,
        ledger: Optional[TransactionLedger] = None,
        strict_returns: Optional[bool] = None,
    ) -> None:
        self.books = books if books is not None else BookRegistry()
        self.users = users if users is not None else UserRegistry()
        self.ledger = ledger if ledger is not None else TransactionLedger()
        self.strict_returns = settings.strict_returns if strict_returns is None else strict_returns

    # ------------------------- Books ------------------------- #
    def add_book(self, title: str, author: str, isbn: str, copies: int) -> Book:
        book = self.books.add(title, author, isbn, copies)
        logger.info(f"Book added: {book}")
        return book

    def list_books(self) -> List[Book]:
        return self.books.list_all()

    def find_book(self, book_id: int) -> Optional[Book]:
        return self.books.get_by_id(book_id)

    def search_books(self, keyword: str) -> List[Book]:
        return self.books.search(keyword)

    # ------------------------- Users ------------------------- #
    def add_user(self, username: str, role: str) -> User:
        user = self.users.add(username, role)
        logger.info(f"User added: {user}")
        return user

    def list_users(self) -> List[User]:
        return self.users.list_all()

    def find_user(self, user_id: int) -> Optional[User]:
        return self.users.get_by_id(user_id)

    # ------------------------- Circulation ------------------------- #
    def borrow_book(self, user_id: int, book_id: int) -> bool:
        """Lend one copy of a book to a user.

        Checks, in order: the book exists, it has copies left, the user
        exists. Any failed check returns False and changes nothing.
        """
        book = self.books.get_by_id(book_id)
        if book is None:
            logger.info(f"Borrow refused: book {book_id} not found")
            return False
        if book.copies <= 0:
            logger.info(f"Borrow refused: no copies left of book {book_id}")
            return False
        if self.users.get_by_id(user_id) is None:
            logger.info(f"Borrow refused: user {user_id} not found")
            return False

        self.books.set_copies(book_id, book.copies - 1)
        tx = self.ledger.record(user_id, book_id)
        logger.info(f"Book {book_id} borrowed by user {user_id} (TxID:{tx.id})")
        return True

    def return_book(self, book_id: int, transaction_id: int) -> bool:
        """Take back one copy of a book and close the given transaction.

        Only the book id is checked. The copy count goes up even when
        ``transaction_id`` is unknown, already returned, or belongs to another
        book; in that case the ledger is left as is. With ``strict_returns``
        such a mismatch raises :class:`ReturnMismatchError` before anything
        changes.
        """
        book = self.books.get_by_id(book_id)
        if book is None:
            logger.info(f"Return refused: book {book_id} not found")
            return False

        if self.strict_returns:
            self._check_return_matches(book_id, transaction_id)

        self.books.set_copies(book_id, book.copies + 1)
        if self.ledger.mark_returned(transaction_id):
            logger.info(f"Book {book_id} returned (TxID:{transaction_id})")
        else:
            logger.warning(
                f"Copies of book {book_id} incremented but TxID:{transaction_id} is not outstanding; "
                "copy count may no longer match the ledger"
            )
        return True

    def _check_return_matches(self, book_id: int, transaction_id: int) -> None:
        tx = self.ledger.get_by_id(transaction_id)
        if tx is None:
            raise ReturnMismatchError(f"Transaction {transaction_id} not found.")
        if not tx.is_outstanding:
            raise ReturnMismatchError(f"Transaction {transaction_id} was already returned.")
        if tx.book_id != book_id:
            raise ReturnMismatchError(f"Transaction {transaction_id} is for book {tx.book_id}, not {book_id}.")

    def list_transactions(self) -> List[Transaction]:
        return self.ledger.list_all()

    def get_statistics(self) -> Dict[str, Any]:
        """Get library statistics."""
        books = self.books.list_all()
        return {
            "total_titles": len(self.books),
            "available_copies": sum(book.copies for book in books),
            "unique_authors": len({book.author for book in books}),
            "total_users": len(self.users),
            "total_transactions": len(self.ledger),
            "outstanding_transactions": len(self.ledger.outstanding()),
        }
