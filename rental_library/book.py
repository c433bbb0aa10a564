from __future__ import annotations


class Book:
    """Represents a single rentable book in the inventory."""

    def __init__(self, title: str, author: str, price: float, rent_cost: float, is_rented: bool = False) -> None:
        self.title = title
        self.author = author
        self.price = price
        self.rent_cost = rent_cost
        self.is_rented = is_rented

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.title} by {self.author}"

    def __repr__(self) -> str:  # pragma: no cover
        return (f"Book(title={self.title!r}, author={self.author!r}, price={self.price!r}, "
                f"rent_cost={self.rent_cost!r}, is_rented={self.is_rented!r})")

    @property
    def status(self) -> str:
        return "Rented" if self.is_rented else "Available"

    def rent(self) -> bool:
        """Mark the book as rented. Returns False if it was already out."""
        if not self.is_rented:
            self.is_rented = True
            return True
        return False

    def return_book(self) -> None:
        self.is_rented = False

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "author": self.author,
            "price": self.price,
            "rent_cost": self.rent_cost,
            "is_rented": self.is_rented,
        }

    @staticmethod
    def from_dict(data: dict) -> "Book":
        return Book(
            title=data["title"],
            author=data["author"],
            price=data["price"],
            rent_cost=data["rent_cost"],
            is_rented=bool(data.get("is_rented", False)),
        )
