from __future__ import annotations

import re
from decimal import Decimal
from typing import Dict, Iterable, List, Tuple

from expense_tracker.core.exceptions import InvalidArgument
from expense_tracker.models.analytics import MonthlyAnalytics
from expense_tracker.models.transaction import ExpenseCategory, ExpenseInDB, IncomeInDB

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

_MONTH_KEY = re.compile(r"^(\d{4})-(\d{2})$")


def _check_month(month: int) -> None:
    if isinstance(month, bool) or not isinstance(month, int) or not 0 <= month <= 11:
        raise InvalidArgument(f"month must be an integer in [0, 11], got {month!r}")


def _in_month(record, month: int, year: int) -> bool:
    # Calendar fields of the stored date; no timezone conversion.
    return record.date.month - 1 == month and record.date.year == year


def _category_of(expense: ExpenseInDB) -> ExpenseCategory:
    try:
        return ExpenseCategory(expense.category)
    except ValueError:
        raise InvalidArgument(f"unknown expense category {expense.category!r}") from None


def month_index(value: str) -> Tuple[int, int]:
    """
    Parse a 'YYYY-MM' key (e.g. '2025-11') into a 0-based month and a year.
    """
    match = _MONTH_KEY.match(value or "")
    if not match:
        raise InvalidArgument(f"month must follow YYYY-MM format, got {value!r}")
    year, month = int(match.group(1)), int(match.group(2)) - 1
    _check_month(month)
    return month, year


def compute_monthly_analytics(
    incomes: Iterable[IncomeInDB],
    expenses: Iterable[ExpenseInDB],
    month: int,
    year: int,
) -> MonthlyAnalytics:
    """
    Summarize the incomes and expenses dated within one calendar month.

    ``month`` is 0-based (0 = January). Every category is present in the
    breakdown, unused ones with a zero total.
    """
    _check_month(month)

    monthly_incomes = [income for income in incomes if _in_month(income, month, year)]
    monthly_expenses = [expense for expense in expenses if _in_month(expense, month, year)]

    total_income = sum((Decimal(income.amount) for income in monthly_incomes), Decimal("0"))
    total_expenses = sum((Decimal(expense.amount) for expense in monthly_expenses), Decimal("0"))

    breakdown: Dict[ExpenseCategory, Decimal] = {category: Decimal("0") for category in ExpenseCategory}
    for expense in monthly_expenses:
        breakdown[_category_of(expense)] += Decimal(expense.amount)

    return MonthlyAnalytics(
        month=MONTH_NAMES[month],
        year=year,
        total_income=total_income,
        total_expenses=total_expenses,
        savings=total_income - total_expenses,
        category_breakdown=breakdown,
    )


def trailing_monthly_analytics(
    incomes: Iterable[IncomeInDB],
    expenses: Iterable[ExpenseInDB],
    month: int,
    year: int,
    count: int = 6,
) -> List[MonthlyAnalytics]:
    """
    Analytics for ``count`` consecutive months ending at (month, year), oldest first.
    """
    _check_month(month)
    if count < 1:
        raise InvalidArgument(f"count must be at least 1, got {count}")

    incomes, expenses = list(incomes), list(expenses)
    anchor = year * 12 + month
    results = []
    for offset in range(count - 1, -1, -1):
        target_year, target_month = divmod(anchor - offset, 12)
        results.append(compute_monthly_analytics(incomes, expenses, target_month, target_year))
    return results
