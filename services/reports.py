'''
    File Name: reports.py
    Version: 1.0.0
    Date: 17/10/2026
    Description: Time-window filters and spending totals over expenses.
'''
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, Iterable, List, Tuple

from models.expense import Expense

FILTER_ALL = "all"
FILTER_WEEK = "week"
FILTER_MONTH = "month"
FILTER_MODES = (FILTER_ALL, FILTER_WEEK, FILTER_MONTH)


@dataclass(frozen=True)
class LedgerView:
    """What the screen renders: the filtered expenses and their totals."""
    mode: str = FILTER_ALL
    expenses: Tuple[Expense, ...] = ()
    total: float = 0.0
    category_totals: Dict[str, float] = field(default_factory=dict)


def check_mode(mode: str) -> str:
    if mode not in FILTER_MODES:
        raise ValueError(f"Unknown filter mode: {mode!r}. Expected one of {FILTER_MODES}")
    return mode


def week_start(today: date) -> str:
    """Most recent Sunday at or before `today`, as YYYY-MM-DD."""
    # weekday(): Monday == 0 ... Sunday == 6
    days_since_sunday = (today.weekday() + 1) % 7
    return (today - timedelta(days=days_since_sunday)).isoformat()


def month_start(today: date) -> str:
    """First day of `today`'s month, as YYYY-MM-DD."""
    return today.replace(day=1).isoformat()


def filter_expenses(expenses: Iterable[Expense], mode: str, today: date) -> List[Expense]:
    """Return the expenses that fall in the window selected by `mode`.

    Dates are compared as strings. That is only correct because dates are
    always stored zero-padded as YYYY-MM-DD.
    """
    check_mode(mode)
    expenses = list(expenses)
    if mode == FILTER_WEEK:
        start = week_start(today)
    elif mode == FILTER_MONTH:
        start = month_start(today)
    else:
        return expenses
    return [e for e in expenses if e.date >= start]


def calculate_totals(expenses: Iterable[Expense]) -> Tuple[float, Dict[str, float]]:
    """Return (total, per-category totals).

    Categories keep the order in which they first appear; categories with no
    expenses are not listed.
    """
    total = 0.0
    by_category: Dict[str, float] = {}
    for e in expenses:
        total += e.amount
        by_category[e.category] = by_category.get(e.category, 0.0) + e.amount
    return total, by_category


def build_view(expenses: Iterable[Expense], mode: str, today: date) -> LedgerView:
    filtered = filter_expenses(expenses, mode, today)
    total, by_category = calculate_totals(filtered)
    return LedgerView(mode=mode, expenses=tuple(filtered), total=total, category_totals=by_category)
