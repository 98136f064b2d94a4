from __future__ import annotations


class Book:
    """Represents a single title in the catalog and its available copies."""

    def __init__(self, id: int, title: str, author: str, isbn: str, copies: int) -> None:
        self.id = id
        self.title = title
        self.author = author
        self.isbn = isbn
        self.copies = copies

    def __str__(self) -> str:
        return f"ID:{self.id} | {self.title} by {self.author} | ISBN:{self.isbn} | Copies:{self.copies}"

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Book(id={self.id!r}, title={self.title!r}, copies={self.copies!r})"

    def matches(self, keyword: str) -> bool:
        """Case-insensitive substring match against title, author or ISBN."""
        needle = keyword.lower()
        return (
            needle in self.title.lower()
            or needle in self.author.lower()
            or needle in self.isbn.lower()
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "isbn": self.isbn,
            "copies": self.copies,
        }

