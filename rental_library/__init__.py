"""Rental Library - Core Application Package

This package contains the core application modules including:
- Inventory ledger (ledger.py)
- Data model (book.py)
- Settings (config.py)
- CLI interface (main.py)
"""

from rental_library.book import Book
from rental_library.ledger import InventoryLedger

__all__ = ["Book", "InventoryLedger"]
