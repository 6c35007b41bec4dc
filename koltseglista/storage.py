"""Reading and writing expenses as semicolon-separated lines."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .date import Date
from .errors import InvalidInputError, StorageError
from .expense import Expense
from .expense_list import ExpenseList
from .text import read_line, split, to_int, to_unsigned_float

_FIELD_COUNT = 4


def parse_line(line: str) -> Expense:
    """Parse ``id;YYYY-MM-DD;amount;description`` into an expense."""
    fields = split(line, ";")
    if len(fields) != _FIELD_COUNT:
        raise InvalidInputError(
            f"Várt adatok száma: {_FIELD_COUNT}\nÉrkezett adatok száma: {len(fields)}"
        )
    amount = to_unsigned_float(fields[2])
    expense_id = to_int(fields[0])
    return Expense(Date.parse(fields[1]), fields[3], amount, expense_id)


def format_line(expense: Expense) -> str:
    """Render an expense as one stored line, without the newline."""
    return f"{expense.expense_id};{expense.date};{expense.amount:.6f};{expense.description}"


class ExpenseFile:
    """An expense file on disk."""

    def __init__(self, path) -> None:
        self.path = path

    def read(self, out: Optional[TextIO] = None, answers: Optional[TextIO] = None) -> ExpenseList:
        """Load the expenses, reporting bad lines to ``out``.

        Reading stops at the first empty line. When some lines were bad,
        ``answers`` is asked whether to rewrite the file with only the
        good ones ("I" means yes).
        """
        out = sys.stdout if out is None else out
        answers = sys.stdin if answers is None else answers
        try:
            with open(self.path, encoding="utf-8") as handle:
                lines = []
                while (line := read_line(handle)):
                    lines.append(line)
        except OSError:
            raise StorageError("Hibás fájl") from None

        expenses = ExpenseList()
        errors = 0
        for line in lines:
            try:
                expenses.append(parse_line(line))
            except ValueError as error:
                out.write(f"sor: {line}\n[HIBA] {error}\n\n")
                errors += 1

        out.write(f"A beolvasás során kapott hibák száma:{errors}\n")
        out.write("Beolvasott:\n")
        out.write(expenses.listing(""))

        if errors:
            out.write("Szeretné a fájl megjavítását? I = igen, bármilyen más karakter = nem: ")
            answer = read_line(answers)
            while answer == "":
                answer = read_line(answers)
            if answer == "I":
                out.write("A fájl megjavításra került\n")
                self.write(expenses)
        return expenses

    def write(self, expenses) -> None:
        """Store the expenses, one line each, replacing the file."""
        try:
            with open(self.path, "w", encoding="utf-8") as handle:
                handle.writelines(f"{format_line(item)}\n" for item in expenses)
        except OSError:
            raise StorageError("Nem sikerült megnyitni a fájlt írásra") from None