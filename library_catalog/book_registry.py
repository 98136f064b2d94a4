import logging
from typing import Dict, List, Optional

from library_catalog.book import Book

logger = logging.getLogger(__name__)


class BookRegistry:
    """In-memory store of books keyed by sequential id."""

    def __init__(self) -> None:
        self._books: Dict[int, Book] = {}
        self._next_id = 1

    def add(self, title: str, author: str, isbn: str, copies: int) -> Book:
        """Create and store a book. Copies are stored as given, negative values included."""
        book = Book(id=self._next_id, title=title, author=author, isbn=isbn, copies=copies)
        self._books[book.id] = book
        self._next_id += 1
        logger.debug(f"Book registered: {book}")
        return book

    def get_by_id(self, book_id: int) -> Optional[Book]:
        return self._books.get(book_id)

    def list_all(self) -> List[Book]:
        return list(self._books.values())

    def search(self, keyword: str) -> List[Book]:
        """Search for books by title, author or ISBN (case-insensitive substring)."""
        return [book for book in self._books.values() if book.matches(keyword)]

    def set_copies(self, book_id: int, count: int) -> None:
        # No bounds check; callers own the arithmetic
        try:
            book = self._books[book_id]
        except KeyError:
            raise KeyError(f"Book with ID {book_id} not found.") from None
        book.copies = count

    def __len__(self) -> int:
        return len(self._books)
