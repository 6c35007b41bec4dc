import io

import pytest

from koltseglista.date import Date
from koltseglista.expense import Expense
from koltseglista.menu import Menu, main
from koltseglista.storage import ExpenseFile


def _store(path, expenses):
    ExpenseFile(path).write(expenses)


def _load(path):
    return ExpenseFile(path).read(io.StringIO(), io.StringIO())


def _run(path, commands):
    out = io.StringIO()
    with Menu(path, out, io.StringIO(commands)) as menu:
        menu.run()
    return out.getvalue()


@pytest.fixture
def empty_file(tmp_path):
    path = tmp_path / "adatok.csv"
    _store(path, [])
    return path


@pytest.fixture
def filled_file(tmp_path):
    path = tmp_path / "adatok.csv"
    _store(
        path,
        [
            Expense(Date.parse("2025-01-15"), "vonat jegy", 5000, 1),
            Expense(Date.parse("2025-02-20"), "vasarlas", 7000, 2),
            Expense(Date.parse("2025-01-25"), "Lidl", 3000, 3),
        ],
    )
    return path


def test_add_expense_is_saved(empty_file):
    _run(empty_file, "1\n2024-05-10\n3500\nEbed\n6\n")
    loaded = _load(empty_file)
    assert len(loaded) == 1
    assert loaded[0].description == "Ebed"
    assert loaded[0].amount == 3500.0
    assert loaded[0].date == Date(2024, 5, 10)


def test_add_with_invalid_date_reports_error(empty_file):
    output = _run(empty_file, "1\n2024-13-01\n6\n")
    assert "[HIBA] Nem létező dátum" in output
    assert len(_load(empty_file)) == 0


def test_add_without_description_reports_error(empty_file):
    output = _run(empty_file, "1\n2024-05-10\n100\n\n6\n")
    assert "[HIBA] Hiányos vagy hibás adatok" in output
    assert len(_load(empty_file)) == 0


def test_listing_filters_by_description(filled_file):
    output = _run(filled_file, "2\nvasarlas\n6\n")
    assert "vasarlas" in output
    assert "Lidl" not in output.split("Add meg")[1]


def test_total_over_range(filled_file):
    output = _run(filled_file, "3\n2025-01-01\n2025-01-31\n6\n")
    assert "Összeg: 8000\n" in output


def test_total_with_reversed_range(filled_file):
    output = _run(filled_file, "3\n2025-02-01\n2025-01-01\n6\n")
    assert "[HIBA] Az első dátumnak kisebbnek kell lennie!" in output


def test_edit_changes_amount(filled_file):
    output = _run(filled_file, "4\n1\n\n12000\n\n6\n")
    assert "Sikeres mentés!" in output
    loaded = _load(filled_file)
    assert loaded[0].amount == 12000.0
    assert loaded[0].description == "vonat jegy"


def test_edit_without_changes(filled_file):
    output = _run(filled_file, "4\n2\n\n\n\n6\n")
    assert "Nem változott!" in output
    assert _load(filled_file)[1].amount == 7000.0


def test_edit_unknown_id(filled_file):
    output = _run(filled_file, "4\n99\n6\n")
    assert "[HIBA] Nincs elem ilyen azonosítóval!" in output


def test_edit_with_bad_id_text(filled_file):
    output = _run(filled_file, "4\nabc\n6\n")
    assert "[HIBA] A megadott érték nem konvertálható számmá." in output


def test_remove_existing(filled_file):
    output = _run(filled_file, "5\n1\n6\n")
    assert "Sikeres törlés!" in output
    assert [item.expense_id for item in _load(filled_file)] == [2, 3]


def test_remove_missing(filled_file):
    output = _run(filled_file, "5\n42\n6\n")
    assert "Sikertelen  törlés, nem található a törölni kívánt elem" in output
    assert len(_load(filled_file)) == 3


def test_unknown_choice(empty_file):
    output = _run(empty_file, "9\n6\n")
    assert "Kérlek a felsorolt műveletekből válassz" in output


def test_end_of_input_stops_loop(empty_file):
    output = _run(empty_file, "")
    assert output.count("KÖLTSÉG  LISTÁZÓ") == 1


def test_main_reports_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["-menu"]) == 1
    assert "[FUTÁSI HIBA] Hibás fájl" in capsys.readouterr().out


def test_main_without_flag_does_not_start_menu(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert not (tmp_path / "adatok.csv").exists()