import math
from typing import NamedTuple, Optional


class InvalidAmountError(ValueError):
    """Price or rent cost text that is not a usable amount."""

    def __init__(self, field: str, raw: str) -> None:
        self.field = field
        self.raw = raw
        super().__init__(f"Invalid {field}: {raw!r}")


class BookForm(NamedTuple):
    title: str
    author: str
    price: float
    rent_cost: float


class AmountValidator:
    """Parses money amounts typed by the user."""

    @staticmethod
    def parse_amount(text: Optional[str], field: str = "amount") -> float:
        raw = (text or "").strip()
        try:
            value = float(raw)
        except ValueError as e:
            raise InvalidAmountError(field, raw) from e
        # float() also accepts 'nan' and 'inf'
        if not math.isfinite(value) or value < 0:
            raise InvalidAmountError(field, raw)
        return value


class TitleValidator:

    @staticmethod
    def clean_title(text: Optional[str]) -> Optional[str]:
        if text is None:
            return None
        t = text.strip()
        return t or None


class BookFormValidator:
    """Validates the four add-book fields before anything reaches the ledger."""

    @staticmethod
    def parse_form(title: Optional[str], author: Optional[str],
                   price_text: Optional[str], rent_cost_text: Optional[str]) -> Optional[BookForm]:
        """Return a BookForm, or None when any field is blank.

        Raises InvalidAmountError if price or rent cost does not parse.
        """
        fields = [(v or "").strip() for v in (title, author, price_text, rent_cost_text)]
        if not all(fields):
            return None
        t, a, p, r = fields
        price = AmountValidator.parse_amount(p, "price")
        rent_cost = AmountValidator.parse_amount(r, "rent cost")
        return BookForm(t, a, price, rent_cost)
