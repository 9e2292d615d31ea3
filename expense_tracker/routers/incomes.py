from typing import List

from fastapi import APIRouter, Depends, status

from expense_tracker.db import TransactionStore, get_store
from expense_tracker.models.transaction import IncomeCreate, IncomeInDB, IncomeUpdate
from expense_tracker.routers.deps import get_current_user_id

router = APIRouter()


@router.post("/", response_model=IncomeInDB, status_code=status.HTTP_201_CREATED)
def create_income(
    income: IncomeCreate,
    user_id: str = Depends(get_current_user_id),
    store: TransactionStore = Depends(get_store),
):
    return store.add_income(user_id, income)


@router.get("/", response_model=List[IncomeInDB])
def list_incomes(
    user_id: str = Depends(get_current_user_id),
    store: TransactionStore = Depends(get_store),
):
    return store.list_incomes(user_id)


@router.put("/{income_id}", response_model=IncomeInDB)
def update_income(
    income_id: str,
    income: IncomeUpdate,
    user_id: str = Depends(get_current_user_id),
    store: TransactionStore = Depends(get_store),
):
    return store.update_income(user_id, income_id, income)


@router.delete("/{income_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_income(
    income_id: str,
    user_id: str = Depends(get_current_user_id),
    store: TransactionStore = Depends(get_store),
):
    store.delete_income(user_id, income_id)
    return None
