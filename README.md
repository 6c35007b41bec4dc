# koltseglista

A small expense ledger. Expenses are kept in a plain text file, one per line,
as `id;YYYY-MM-DD;amount;description`, and managed from an interactive
text menu. The menu and all messages are in Hungarian.

## Installing

```
pip install .
```

## Using the menu

Run the command from the directory that holds your `adatok.csv`:

```
koltseglista -menu
```

The file must already exist; if it cannot be opened the command prints
`[FUTÁSI HIBA] Hibás fájl` and exits with status 1. Without the `-menu`
option the command only prints a short usage line and exits with status 1.

When the file is loaded, reading stops at the first empty line. Every line
that cannot be read (wrong number of fields, a bad date, amount or id, or a
duplicate id) is reported, followed by the list of what was loaded. If there
were bad lines you are asked whether to rewrite the file with only the valid
ones; answering `I` does so.

The menu then lets you:

1. add an expense (date, amount, description; the id is the highest id in use plus one),
2. list expenses whose description contains a given piece of text (letter case
   of ASCII letters is ignored; leave it empty to list everything),
3. sum the expenses between two dates, both inclusive (leave the first date
   empty to sum everything),
4. edit an expense by id (leave a field empty to keep it),
5. delete an expense by id,
6. quit (end of input quits as well).

Mistyped input is reported with an `[HIBA]` message and the menu carries on.
The list is written back to the file when the menu closes, with amounts stored
to six decimal places.

## Using the library

```python
from koltseglista.date import Date
from koltseglista.expense_list import ExpenseList

expenses = ExpenseList()
expenses.add(Date.parse("2025-01-15"), 5000, "vonat jegy")
expenses.add(Date.parse("2025-02-20"), 7000, "vasarlas")

print(expenses.total(Date.parse("2025-01-01"), Date.parse("2025-01-31")))  # 5000.0
print(expenses.listing("vasar"))
```

- `koltseglista.date.Date` — an ordered, immutable date. `Date()` is the empty
  date ("no date given"); `Date.parse("")` returns it too. Other values must be
  real calendar dates, and `Date.parse` accepts only `YYYY-MM-DD`.
- `koltseglista.expense.Expense` — one expense (`date`, `description`,
  `amount`, `expense_id`); a negative id or amount, an empty date or an empty
  description is rejected.
- `koltseglista.expense_list.ExpenseList` — the ledger: `add`, `append`,
  `find`, `remove`, `edit`, `total`, `listing`, `write_total`, `write_listing`,
  plus `len()`, indexing and iteration.
- `koltseglista.storage` — `parse_line` and `format_line` for single records,
  and `ExpenseFile` with `read` and `write` for the whole file.
- `koltseglista.text` — the number and text helpers used for parsing
  (`to_int`, `to_unsigned_float`, `split`, `includes`, `read_line`).
- `koltseglista.menu.Menu` — the interactive session; it takes a file name and
  optional output and input streams, and works as a context manager that saves
  the list on exit. `koltseglista.menu.main` is the command's entry point.

Errors are raised as `InvalidDateError`, `InvalidNumberError` and
`InvalidInputError` (all `ValueError`) and `StorageError` (a `RuntimeError`)
from `koltseglista.errors`.

## Limits

The command always works on `adatok.csv` in the current directory; there is no
option to choose another file, and the file is not created if it is missing.
Amounts cannot be negative and are read only as plain digits with an optional
decimal point.

## Running the tests

```
pip install .[test]
pytest
```