"""Calendar dates in the YYYY-MM-DD form used for expenses."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidDateError, InvalidNumberError
from .text import split, to_int

_FORMAT_ERROR = "A dátum formátuma hibás. A helyes dátum: YYYY-MM-DD"
_MISSING_ERROR = "Nem létező dátum"
_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_EMPTY_YEAR = -1


@dataclass(frozen=True, order=True)
class Date:
    """A date ordered by year, month and day.

    ``Date()`` is the empty date (year -1), meaning "no date given".
    Any other combination must be a real calendar date.
    """

    year: int = _EMPTY_YEAR
    month: int = 1
    day: int = 1

    def __post_init__(self) -> None:
        if (self.year, self.month, self.day) == (_EMPTY_YEAR, 1, 1):
            return
        if not self.is_valid():
            raise InvalidDateError(_MISSING_ERROR)

    @classmethod
    def parse(cls, text: str) -> "Date":
        """Parse ``YYYY-MM-DD``; empty text gives the empty date."""
        if text == "":
            return cls()
        parts = split(text, "-")
        if [len(part) for part in parts] != [4, 2, 2]:
            raise InvalidDateError(_FORMAT_ERROR)
        try:
            year, month, day = (to_int(part) for part in parts)
        except InvalidNumberError:
            raise InvalidDateError(_FORMAT_ERROR) from None
        if month <= 0 or day <= 0:
            raise InvalidDateError(_FORMAT_ERROR)
        if year == _EMPTY_YEAR:
            return cls()
        return cls(year, month, day)

    def is_leap_year(self) -> bool:
        """Tell whether the year is a Gregorian leap year."""
        return (self.year % 4 == 0 and self.year % 100 != 0) or self.year % 400 == 0

    def is_valid(self) -> bool:
        """Tell whether the fields name an existing calendar day."""
        if self.year < 1 or not 1 <= self.month <= 12 or self.day < 1:
            return False
        if self.month == 2 and self.is_leap_year():
            return self.day <= 29
        return self.day <= _DAYS_IN_MONTH[self.month - 1]

    def is_empty(self) -> bool:
        """Tell whether this is the empty date."""
        return self.year == _EMPTY_YEAR

    def __str__(self) -> str:
        return f"{str(self.year).rjust(4, '0')}-{self.month:02d}-{self.day:02d}"