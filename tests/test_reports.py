from datetime import date

import pytest

from models.expense import Expense
from services.reports import (
    FILTER_ALL,
    FILTER_MODES,
    FILTER_MONTH,
    FILTER_WEEK,
    build_view,
    calculate_totals,
    filter_expenses,
    month_start,
    week_start,
)

from conftest import TODAY


def _e(id, amount, category, day):
    return Expense(id=id, amount=amount, category=category, note=None, date=day)


SAMPLE = [
    _e(6, 4.0, "Food", "2024-01-16"),
    _e(5, 30.0, "Books", "2024-01-15"),
    _e(4, 2.5, "Food", "2024-01-14"),
    _e(3, 12.5, "Food", "2024-01-10"),
    _e(2, 700.0, "Rent", "2024-01-01"),
    _e(1, 9.99, "Books", "2023-12-31"),
]


@pytest.mark.parametrize("today, expected", [
    (date(2024, 1, 16), "2024-01-14"),  # Tuesday
    (date(2024, 1, 14), "2024-01-14"),  # Sunday is its own week start
    (date(2024, 1, 20), "2024-01-14"),  # Saturday
    (date(2024, 3, 2), "2024-02-25"),   # week began in the previous month
    (date(2025, 1, 1), "2024-12-29"),   # and in the previous year
])
def test_week_start_is_most_recent_sunday(today, expected):
    assert week_start(today) == expected


def test_month_start():
    assert month_start(date(2024, 1, 16)) == "2024-01-01"
    assert month_start(date(2024, 2, 29)) == "2024-02-01"


def test_all_filter_returns_everything_in_order():
    assert filter_expenses(SAMPLE, FILTER_ALL, TODAY) == SAMPLE


def test_week_and_month_windows():
    week = filter_expenses(SAMPLE, FILTER_WEEK, TODAY)
    month = filter_expenses(SAMPLE, FILTER_MONTH, TODAY)
    assert [e.id for e in week] == [6, 5, 4]
    assert [e.id for e in month] == [6, 5, 4, 3, 2]


@pytest.mark.parametrize("today", [date(2024, 1, 16), date(2024, 1, 3), date(2023, 12, 31)])
def test_windows_are_subsets_of_all(today):
    everything = {e.id for e in SAMPLE}
    for mode in FILTER_MODES:
        assert {e.id for e in filter_expenses(SAMPLE, mode, today)} <= everything


def test_week_inside_month_is_a_subset():
    week = {e.id for e in filter_expenses(SAMPLE, FILTER_WEEK, TODAY)}
    month = {e.id for e in filter_expenses(SAMPLE, FILTER_MONTH, TODAY)}
    assert week <= month


def test_week_straddling_month_boundary():
    today = date(2024, 1, 3)  # Wednesday; week started Sunday 2023-12-31
    week = {e.id for e in filter_expenses(SAMPLE, FILTER_WEEK, today)}
    month = {e.id for e in filter_expenses(SAMPLE, FILTER_MONTH, today)}
    assert 1 in week and 1 not in month


def test_unknown_mode_raises():
    with pytest.raises(ValueError):
        filter_expenses(SAMPLE, "year", TODAY)


def test_totals_of_empty_list():
    assert calculate_totals([]) == (0.0, {})


def test_category_totals_keep_first_appearance_order():
    total, by_category = calculate_totals(SAMPLE)
    assert list(by_category) == ["Food", "Books", "Rent"]
    assert by_category["Food"] == pytest.approx(19.0)
    assert by_category["Books"] == pytest.approx(39.99)
    assert total == pytest.approx(758.99)


def test_absent_categories_are_not_zero_filled():
    _, by_category = calculate_totals(filter_expenses(SAMPLE, FILTER_WEEK, TODAY))
    assert "Rent" not in by_category


@pytest.mark.parametrize("mode", FILTER_MODES)
def test_category_totals_sum_to_total(mode):
    view = build_view(SAMPLE, mode, TODAY)
    assert sum(view.category_totals.values()) == pytest.approx(view.total)
    assert view.total == pytest.approx(sum(e.amount for e in view.expenses))


def test_end_to_end_week_and_all_totals():
    records = [
        _e(2, 30.0, "Books", "2024-01-15"),
        _e(1, 12.5, "Food", "2024-01-10"),
    ]
    week = build_view(records, FILTER_WEEK, date(2024, 1, 16))
    everything = build_view(records, FILTER_ALL, date(2024, 1, 16))

    assert week.total == pytest.approx(30)
    assert [e.category for e in week.expenses] == ["Books"]
    assert week.category_totals == {"Books": 30.0}
    assert everything.total == pytest.approx(42.5)
    assert everything.mode == FILTER_ALL
