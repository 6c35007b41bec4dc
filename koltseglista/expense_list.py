"""An ordered collection of expenses with unique identifiers."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, TextIO

from .date import Date
from .errors import InvalidInputError
from .expense import Expense
from .text import includes

_HEADER = "ID\tDÁTUM\t\tÉRTÉK\tLEÍRÁS\n"
_NO_MATCH = "Nincs a keresésnek megfelelő adat"


class ExpenseList:
    """Expenses kept in insertion order."""

    def __init__(self, expenses: Optional[Iterable[Expense]] = None) -> None:
        self._items: list[Expense] = list(expenses or ())

    def find(self, expense_id: int) -> bool:
        """Tell whether an expense with this identifier is present."""
        return any(item.expense_id == expense_id for item in self._items)

    def add(self, date: Date, amount: float, description: str) -> Expense:
        """Add a new expense, giving it the next free identifier."""
        next_id = max((item.expense_id for item in self._items), default=0)
        next_id = max(next_id, 0) + 1
        if date.is_empty() or description == "" or amount == -1:
            raise InvalidInputError("Hiányos vagy hibás adatok")
        expense = Expense(date, description, amount, next_id)
        self._items.append(expense)
        return expense

    def append(self, expense: Expense) -> None:
        """Add an expense whose positive identifier is not yet in use."""
        if self.find(expense.expense_id) or expense.expense_id <= 0:
            raise InvalidInputError("Ezzel az azonosítóval már van elem")
        self._items.append(expense)

    def total(self, start: Date = Date(), end: Date = Date()) -> float:
        """Sum the amounts dated within ``start``..``end`` inclusive.

        An empty ``start`` sums every expense.
        """
        return sum(
            (
                item.amount
                for item in self._items
                if start.is_empty() or start <= item.date <= end
            ),
            0.0,
        )

    def write_total(self, start: Date, end: Date, out: TextIO) -> None:
        """Write the total for the range to ``out``."""
        out.write(f"Összeg: {self.total(start, end):g}\n")

    def listing(self, text_filter: str = "") -> str:
        """Render the expenses whose description contains ``text_filter``."""
        rows = [str(item) for item in self._items if includes(item.description, text_filter)]
        body = _HEADER + "".join(f"{row}\n" for row in rows) if rows else _NO_MATCH
        return body + "\n\n"

    def write_listing(self, text_filter: str, out: TextIO) -> None:
        """Write the filtered listing to ``out``."""
        out.write(self.listing(text_filter))

    def remove(self, expense_id: int) -> bool:
        """Remove the expense with this identifier; tell whether one was removed."""
        kept = [item for item in self._items if item.expense_id != expense_id]
        removed = len(kept) != len(self._items)
        self._items = kept
        return removed

    def edit(
        self,
        expense_id: int,
        date: Date = Date(),
        amount: float = -1,
        description: str = "",
    ) -> None:
        """Overwrite the given fields of the matching expense.

        An empty date, a negative amount or an empty description leaves
        that field unchanged.
        """
        for item in self._items:
            if item.expense_id != expense_id:
                continue
            if description != "":
                item.description = description
            if amount >= 0:
                item.amount = float(amount)
            if not date.is_empty():
                item.date = date

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Expense:
        if index < 0 or index >= len(self._items):
            raise IndexError("Nincs ilyen elem")
        return self._items[index]

    def __iter__(self) -> Iterator[Expense]:
        return iter(self._items)