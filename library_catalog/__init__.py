"""Library Catalog - Core Application Package

This package contains the in-memory catalog modules including:
- Data models (book.py, user.py, transaction.py)
- Stores (book_registry.py, user_registry.py, ledger.py)
- Borrow/return service (library.py)
- Interactive menu and CLI (main.py)
"""
