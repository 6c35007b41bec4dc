"""A single recorded expense."""

from __future__ import annotations

from dataclasses import dataclass

from .date import Date
from .errors import InvalidDateError, InvalidInputError


@dataclass
class Expense:
    """An expense with a date, a description, an amount and an identifier.

    Construction rejects a negative identifier, the empty date, an empty
    description and a negative amount, checked in that order.
    """

    date: Date
    description: str
    amount: float
    expense_id: int

    def __post_init__(self) -> None:
        if self.expense_id < 0:
            raise InvalidInputError("Negatív az azonosító")
        if self.date.year < 0:
            raise InvalidDateError("Hibás dátum")
        if self.description == "":
            raise InvalidInputError("Üres leírás")
        if self.amount < 0:
            raise InvalidInputError("Negatív összeg")
        self.amount = float(self.amount)

    def __str__(self) -> str:
        return f"{self.expense_id}\t{self.date}\t{self.amount:g}\t{self.description}"