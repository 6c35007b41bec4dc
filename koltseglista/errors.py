"""Exceptions raised by the expense tracker."""


class InvalidDateError(ValueError):
    """A date is malformed or does not exist."""


class InvalidNumberError(ValueError):
    """Text cannot be converted to a number."""


class InvalidInputError(ValueError):
    """An expense or an expense operation got unusable data."""


class StorageError(RuntimeError):
    """The expense file cannot be opened for reading or writing."""