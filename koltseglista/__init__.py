"""An expense ledger kept in a semicolon-separated file, with an interactive menu."""

__version__ = "1.0.0"
__all__ = ["errors", "text", "date", "expense", "expense_list", "storage", "menu"]