from typing import List

from fastapi import APIRouter, Depends, status

from expense_tracker.db import TransactionStore, get_store
from expense_tracker.models.transaction import ExpenseCreate, ExpenseInDB, ExpenseUpdate
from expense_tracker.routers.deps import get_current_user_id

router = APIRouter()


@router.post("/", response_model=ExpenseInDB, status_code=status.HTTP_201_CREATED)
def create_expense(
    expense: ExpenseCreate,
    user_id: str = Depends(get_current_user_id),
    store: TransactionStore = Depends(get_store),
):
    return store.add_expense(user_id, expense)


@router.get("/", response_model=List[ExpenseInDB])
def list_expenses(
    user_id: str = Depends(get_current_user_id),
    store: TransactionStore = Depends(get_store),
):
    return store.list_expenses(user_id)


@router.put("/{expense_id}", response_model=ExpenseInDB)
def update_expense(
    expense_id: str,
    expense: ExpenseUpdate,
    user_id: str = Depends(get_current_user_id),
    store: TransactionStore = Depends(get_store),
):
    return store.update_expense(user_id, expense_id, expense)


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_expense(
    expense_id: str,
    user_id: str = Depends(get_current_user_id),
    store: TransactionStore = Depends(get_store),
):
    store.delete_expense(user_id, expense_id)
    return None
