'''
    File Name: ledger.py
    Version: 1.0.0
    Date: 17/10/2026
    Description: In-memory expense ledger with write-through persistence.
'''
import datetime
import logging
import math
import re
from typing import Any, Callable, Dict, List, Optional

import config
from models.errors import (
    InvalidAmountError,
    InvalidDateError,
    MissingCategoryError,
    StoreError,
    ValidationError,
)
from models.expense import Expense
from services.reports import FILTER_ALL, LedgerView, build_view, check_mode

logger = logging.getLogger(__name__)

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

Notifier = Callable[[str, str], None]


def _log_notice(title: str, message: str) -> None:
    logger.warning("%s: %s", title, message)


def validate_expense_input(amount: Any, category: Any, note: Any = None, date: Any = None,
                           today: Optional[datetime.date] = None) -> Dict[str, Any]:
    """Check and normalize raw form values.

    Returns a dict with `amount` (float), `category` (trimmed), `note`
    (trimmed or None) and `date` (YYYY-MM-DD, today's date when blank).
    Raises a `ValidationError` subclass describing the first problem found.
    """
    if isinstance(amount, bool):
        raise InvalidAmountError()
    if isinstance(amount, str):
        amount = amount.strip()
    try:
        value = float(amount)
    except (TypeError, ValueError):
        raise InvalidAmountError()
    if not math.isfinite(value) or value <= 0:
        raise InvalidAmountError()

    category = str(category or "").strip()
    if not category:
        raise MissingCategoryError()

    note = str(note or "").strip() or None

    if isinstance(date, datetime.date):
        date = date.isoformat()
    date = str(date or "").strip()
    if not date:
        date = (today or datetime.date.today()).isoformat()
    else:
        if not _ISO_DATE.match(date):
            raise InvalidDateError()
        try:
            datetime.datetime.strptime(date, config.DATE_FORMAT)
        except ValueError:
            raise InvalidDateError()

    return {"amount": value, "category": category, "note": note, "date": date}


class ExpenseLedger:
    """Owns the full list of expenses and the derived, filtered view.

    Every mutation writes to the store and then reloads the whole table; the
    reloaded list is the only source of truth. Nothing serializes overlapping
    mutations, so whichever reload finishes last wins.

    Failures are never raised to the caller. They are logged and passed to
    `notify(title, message)`, and the method returns False.
    """

    def __init__(self, store, notify: Optional[Notifier] = None,
                 today: Callable[[], datetime.date] = datetime.date.today,
                 table: str = config.EXPENSES_TABLE):
        self.store = store
        self.notify = notify or _log_notice
        self.table = table
        self._today = today
        self.expenses: List[Expense] = []
        self.filter_mode = FILTER_ALL
        self.view = LedgerView()
        self._subscribers: List[Callable[[LedgerView], None]] = []

    # --- Derived view ---
    def subscribe(self, callback: Callable[[LedgerView], None]) -> None:
        """Call `callback(view)` every time the view is recomputed."""
        self._subscribers.append(callback)

    def set_filter(self, mode: str) -> None:
        self.filter_mode = check_mode(mode)
        self._refresh_view()

    def _refresh_view(self) -> None:
        self.view = build_view(self.expenses, self.filter_mode, self._today())
        for callback in list(self._subscribers):
            callback(self.view)

    def get(self, expense_id: int) -> Optional[Expense]:
        """Return the loaded expense with `expense_id`, or None."""
        for e in self.expenses:
            if e.id == expense_id:
                return e
        return None

    # --- Store operations ---
    def load(self) -> bool:
        """Reload every expense from the store, newest date first."""
        try:
            rows = self.store.query_all(
                f"SELECT * FROM {self.table} ORDER BY date DESC, id DESC;"
            )
        except StoreError:
            logger.exception("Error loading expenses")
            self.notify("Error", "Failed to load expenses")
            return False
        expenses = []
        for r in rows:
            try:
                expenses.append(Expense.from_row(r))
            except (KeyError, TypeError, ValueError):
                logger.warning("Skipping malformed expense row: %s", r)
        self.expenses = expenses
        logger.debug("Loaded %d expense(s)", len(self.expenses))
        self._refresh_view()
        return True

    def add(self, amount, category, note=None, date=None) -> bool:
        values = self._validated(amount, category, note, date)
        if values is None:
            return False
        return self._write(
            "add",
            f"INSERT INTO {self.table} (amount, category, note, date) VALUES (?, ?, ?, ?);",
            (values["amount"], values["category"], values["note"], values["date"]),
        )

    def update(self, expense_id: int, amount, category, note=None, date=None) -> bool:
        """Overwrite every field of expense `expense_id`.

        An unknown id updates nothing and is not reported.
        """
        values = self._validated(amount, category, note, date)
        if values is None:
            return False
        return self._write(
            "update",
            f"UPDATE {self.table} SET amount = ?, category = ?, note = ?, date = ? WHERE id = ?;",
            (values["amount"], values["category"], values["note"], values["date"], int(expense_id)),
        )

    def delete(self, expense_id: int) -> bool:
        """Remove expense `expense_id`; an unknown id is a no-op."""
        return self._write(
            "delete",
            f"DELETE FROM {self.table} WHERE id = ?;",
            (int(expense_id),),
        )

    def _validated(self, amount, category, note, date) -> Optional[Dict[str, Any]]:
        try:
            return validate_expense_input(amount, category, note, date, today=self._today())
        except ValidationError as exc:
            logger.info("Rejected expense input: %s", exc.message)
            self.notify(exc.title, exc.message)
            return None

    def _write(self, action: str, statement: str, params) -> bool:
        try:
            affected = self.store.execute(statement, params)
        except StoreError:
            logger.exception("Error during %s expense", action)
            self.notify("Error", f"Failed to {action} expense")
            return False
        logger.debug("%s expense affected %s row(s)", action, affected)
        self.load()
        return True
