'''
    File Name: errors.py
    Version: 1.0.0
    Date: 17/10/2026
    Description: Error types raised by the expense ledger and its store.
'''


class LedgerError(Exception):
    """Base class for every error raised by the ledger core."""


class ValidationError(LedgerError):
    """Rejected user input. Never reaches the store.

    Carries a short `title` and a user-facing `message` so the screen can
    show them as-is.
    """
    title = "Invalid Input"
    message = "Please check the expense fields"

    def __init__(self, message: str = None, title: str = None):
        if message is not None:
            self.message = message
        if title is not None:
            self.title = title
        super().__init__(self.message)


class InvalidAmountError(ValidationError):
    title = "Invalid Amount"
    message = "Please enter a valid positive amount"


class MissingCategoryError(ValidationError):
    title = "Category Required"
    message = "Please enter a category"


class InvalidDateError(ValidationError):
    title = "Invalid Date"
    message = "Please enter a date as YYYY-MM-DD"


class StoreError(LedgerError):
    """Any failure coming from the record store."""
