"""Interactive text menu for managing the expense file."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from .date import Date
from .storage import ExpenseFile
from .text import read_line, to_int, to_unsigned_float

DEFAULT_FILE = "adatok.csv"

_MENU = (
    "************************************\n"
    "*         KÖLTSÉG  LISTÁZÓ         *\n"
    "************************************\n"
    "* 1. Költség hozzáadása            *\n"
    "* 2. Költségek listázása           *\n"
    "* 3. Összegzés                     *\n"
    "* 4. Szerkesztés                   *\n"
    "* 5. Törlés                        *\n"
    "* 6. Kilépés                       *\n"
    "************************************\n"
    "\n"
    "\nVálasszon egy menüpontot (1-6): "
)
_QUIT = "6"


class Menu:
    """Reads commands from ``stdin`` and works on the expenses of one file.

    The expenses are loaded when the menu is created and stored back by
    :meth:`close`, which the context manager calls on exit.
    """

    def __init__(
        self,
        filename=DEFAULT_FILE,
        out: Optional[TextIO] = None,
        stdin: Optional[TextIO] = None,
    ) -> None:
        self.out = sys.stdout if out is None else out
        self.stdin = sys.stdin if stdin is None else stdin
        self.file = ExpenseFile(filename)
        self.expenses = self.file.read(self.out, self.stdin)
        self._handlers = {
            "1": self._add,
            "2": self._list,
            "3": self._total,
            "4": self._edit,
            "5": self._remove,
        }

    def _ask(self, prompt: str = "") -> str:
        if prompt:
            self.out.write(prompt)
        line = read_line(self.stdin)
        return "" if line is None else line

    def _say(self, message: str) -> None:
        self.out.write(f"{message}\n")

    def run(self) -> None:
        """Show the menu and serve choices until "6" or end of input."""
        while True:
            self.out.write(_MENU)
            choice = read_line(self.stdin)
            if choice is None or choice == _QUIT:
                break
            handler = self._handlers.get(choice)
            if handler is None:
                self._say("Kérlek a felsorolt műveletekből válassz")
                continue
            try:
                handler()
            except ValueError as error:
                self._say(f"[HIBA] {error}")

    def _add(self) -> None:
        date = Date.parse(self._ask("A költség dátuma: "))
        amount_text = self._ask("A költség összege: ")
        amount = to_unsigned_float(amount_text) if amount_text != "" else -1
        description = self._ask("A költség leírása: ")
        self.expenses.add(date, amount, description)

    def _list(self) -> None:
        text_filter = self._ask(
            "Add meg, hogy mire szeretnél szűrni (Ha nem szeretnél akkor csak hagy üresen) : "
        )
        self.expenses.write_listing(text_filter, self.out)

    def _total(self) -> None:
        start_text = self._ask(
            "Dátum ahonnan szeretnéd: (Ha az összeset szeretnéd akkor hagyd üresen)"
        )
        start = Date.parse(start_text)
        end_text = self._ask("Dátum ameddig szeretnéd: ") if start_text != "" else ""
        end = Date.parse(end_text)
        if end >= start:
            self.expenses.write_total(start, end, self.out)
        else:
            self._say("[HIBA] Az első dátumnak kisebbnek kell lennie!")

    def _edit(self) -> None:
        expense_id = to_int(self._ask("A szerkeszteni kívánt elem azonoítója: "))
        if not self.expenses.find(expense_id):
            self._say("[HIBA] Nincs elem ilyen azonosítóval!")
            return
        date_text = self._ask(
            "Dátum szerkesztése (Ha nem szeretnéd szerkeszteni, hagyd üresen): "
        )
        date = Date.parse(date_text)
        amount_text = self._ask(
            "Összeg szerkesztése (Ha nem szeretnéd szerkeszteni, hagyd üresen): "
        )
        amount = to_unsigned_float(amount_text) if amount_text != "" else -1
        description = self._ask(
            "Leírás szerkesztése (Ha nem szeretnéd szerkeszteni, hagyd üresen): "
        )
        self.expenses.edit(expense_id, date, amount, description)
        if date_text or amount_text or description:
            self._say("Sikeres mentés!")
        else:
            self._say("Nem változott!")

    def _remove(self) -> None:
        expense_id = to_int(self._ask("A törölni kívánt elem azonoítója: "))
        if self.expenses.remove(expense_id):
            self._say("Sikeres törlés!")
        else:
            self._say("Sikertelen  törlés, nem található a törölni kívánt elem")

    def close(self) -> None:
        """Store the expenses back to the file."""
        self.file.write(self.expenses)

    def __enter__(self) -> "Menu":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the menu on the default file when ``-menu`` is given."""
    args = sys.argv[1:] if argv is None else list(argv)
    if "-menu" not in args:
        print("Használat: -menu kapcsolóval indítható a menü.")
        return 1
    try:
        with Menu(DEFAULT_FILE) as menu:
            menu.run()
    except RuntimeError as error:
        print(f"[FUTÁSI HIBA] {error}")
        return 1
    return 0