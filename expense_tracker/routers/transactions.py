from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query

from expense_tracker.core.config import settings
from expense_tracker.db import TransactionStore, get_store
from expense_tracker.models.transaction import Transaction
from expense_tracker.routers.deps import get_current_user_id

router = APIRouter()


@router.get("/", response_model=List[Transaction])
def list_recent_transactions(
    type: Literal["all", "income", "expense"] = "all",
    limit: Optional[int] = Query(None, ge=1),
    user_id: str = Depends(get_current_user_id),
    store: TransactionStore = Depends(get_store),
):
    """
    Incomes and expenses in one list, newest date first.
    """
    transactions: List[Transaction] = []
    if type in ("all", "income"):
        transactions.extend(Transaction.from_income(income) for income in store.list_incomes(user_id))
    if type in ("all", "expense"):
        transactions.extend(Transaction.from_expense(expense) for expense in store.list_expenses(user_id))

    transactions.sort(key=lambda t: t.date, reverse=True)
    return transactions[: limit or settings.RECENT_TRANSACTIONS_LIMIT]
