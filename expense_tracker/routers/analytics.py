import logging
from datetime import date
from typing import List, Optional, Tuple

from fastapi import APIRouter, Depends, Query

from expense_tracker.core.config import settings
from expense_tracker.db import TransactionStore, get_store
from expense_tracker.models.analytics import MonthlyAnalytics, SavingTip
from expense_tracker.routers.deps import get_current_user_id
from expense_tracker.utils.advisor import generate_saving_tips
from expense_tracker.utils.analyzer import compute_monthly_analytics, month_index, trailing_monthly_analytics

router = APIRouter()
logger = logging.getLogger(__name__)


def _reference_month(month: Optional[str]) -> Tuple[int, int]:
    if month:
        return month_index(month)
    today = date.today()
    return today.month - 1, today.year


@router.get("/monthly/{month}", response_model=MonthlyAnalytics)
def get_monthly_analytics(
    month: str,
    user_id: str = Depends(get_current_user_id),
    store: TransactionStore = Depends(get_store),
):
    """
    month must follow YYYY-MM format. Example: 2025-11
    """
    month_number, year = month_index(month)
    analytics = compute_monthly_analytics(
        store.list_incomes(user_id), store.list_expenses(user_id), month_number, year
    )
    logger.info(
        f"Analytics for user {user_id}, {month}: income={analytics.total_income}, "
        f"expenses={analytics.total_expenses}"
    )
    return analytics


@router.get("/trend", response_model=List[MonthlyAnalytics])
def get_trend(
    months: int = Query(settings.TREND_MONTHS, ge=1, le=36),
    until: Optional[str] = None,
    user_id: str = Depends(get_current_user_id),
    store: TransactionStore = Depends(get_store),
):
    """
    Analytics for the last ``months`` months ending at ``until`` (default: this month), oldest first.
    """
    month_number, year = _reference_month(until)
    return trailing_monthly_analytics(
        store.list_incomes(user_id), store.list_expenses(user_id), month_number, year, count=months
    )


@router.get("/tips", response_model=List[SavingTip])
def get_saving_tips(
    month: Optional[str] = None,
    user_id: str = Depends(get_current_user_id),
    store: TransactionStore = Depends(get_store),
):
    """
    Saving tips for ``month`` (YYYY-MM, default: this month), in rule order.
    """
    month_number, year = _reference_month(month)
    analytics = compute_monthly_analytics(
        store.list_incomes(user_id), store.list_expenses(user_id), month_number, year
    )
    tips = generate_saving_tips(analytics, currency_symbol=settings.CURRENCY_SYMBOL)
    logger.info(f"Generated {len(tips)} saving tips for user {user_id}, {analytics.month} {analytics.year}")
    return tips
