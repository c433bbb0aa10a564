import logging
from typing import List, Optional, Dict, Any

from rental_library.book import Book

logger = logging.getLogger(__name__)


class InventoryLedger:
    """Keeps the rental stock in memory along with a running availability tally.

    The tally is adjusted on every mutation instead of being recomputed from
    the records, so it can drift from ``count_unrented()``: ``delete_book``
    always takes one off, whether or not anything was removed.
    """

    def __init__(self) -> None:
        self._books: List[Book] = []
        self._available_count = 0

    def __len__(self) -> int:
        return len(self._books)

    # ------------------------- Core operations ------------------------- #
    def add_book(self, title: str, author: str, price: float, rent_cost: float) -> Book:
        """Append a new, unrented book. Duplicate titles are allowed."""
        book = Book(title, author, price, rent_cost)
        self._books.append(book)
        self._available_count += 1
        logger.info(f"Book added: title={title!r}, available={self._available_count}")
        return book

    def delete_book(self, title: str) -> None:
        """Remove every unrented book with this title.

        The tally drops by one (never below zero) even when nothing matched.
        """
        before = len(self._books)
        self._books = [b for b in self._books if not (b.title == title and not b.is_rented)]
        removed = before - len(self._books)
        self._available_count = max(self._available_count - 1, 0)

        if removed != 1:
            logger.debug(f"delete_book({title!r}) removed {removed} record(s); tally decremented once")
        logger.info(f"Delete requested: title={title!r}, removed={removed}, available={self._available_count}")

    def rent_book(self, title: str) -> bool:
        """Rent the first book with this title. False if missing or already rented."""
        for book in self._books:
            if book.title == title:
                if book.rent():
                    self._available_count -= 1
                    logger.info(f"Book rented: title={title!r}, available={self._available_count}")
                    return True
                logger.debug(f"Book already rented: title={title!r}")
                return False
        logger.debug(f"No book titled {title!r} to rent")
        return False

    def return_book(self, title: str) -> bool:
        """Return the first rented book with this title."""
        for book in self._books:
            if book.title == title and book.is_rented:
                book.return_book()
                self._available_count += 1
                logger.info(f"Book returned: title={title!r}, available={self._available_count}")
                return True
        logger.debug(f"No rented book titled {title!r} to return")
        return False

    def list_inventory(self) -> List[Book]:
        """Snapshot of all books in insertion order; changes to it are not written back."""
        return [Book.from_dict(b.to_dict()) for b in self._books]

    def available_count(self) -> int:
        return self._available_count

    # ------------------------- Queries ------------------------- #
    def find_book(self, title: str) -> Optional[Book]:
        for book in self._books:
            if book.title == title:
                return Book.from_dict(book.to_dict())
        return None

    def count_unrented(self) -> int:
        """Unrented books counted from the records themselves."""
        return sum(1 for b in self._books if not b.is_rented)

    def get_statistics(self) -> Dict[str, Any]:
        unrented = self.count_unrented()
        if unrented != self._available_count:
            logger.warning(f"Availability tally {self._available_count} differs from unrented records {unrented}")
        return {
            "total_books": len(self._books),
            "available_count": self._available_count,
            "unrented_books": unrented,
            "rented_books": len(self._books) - unrented,
            "unique_authors": len({b.author for b in self._books}),
        }
