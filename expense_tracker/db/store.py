import logging
import threading
from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Dict, List

from expense_tracker.core.exceptions import TransactionNotFound
from expense_tracker.models.transaction import (
    ExpenseCreate,
    ExpenseInDB,
    ExpenseUpdate,
    IncomeCreate,
    IncomeInDB,
    IncomeUpdate,
)

logger = logging.getLogger(__name__)


class TransactionStore(ABC):
    """
    Per-user collections of incomes and expenses.

    Listing methods return snapshots; callers may hold on to them while the
    store keeps changing.
    """

    backend: str = "abstract"

    @abstractmethod
    def add_income(self, user_id: str, income: IncomeCreate) -> IncomeInDB: ...

    @abstractmethod
    def update_income(self, user_id: str, income_id: str, income: IncomeUpdate) -> IncomeInDB: ...

    @abstractmethod
    def delete_income(self, user_id: str, income_id: str) -> None: ...

    @abstractmethod
    def list_incomes(self, user_id: str) -> List[IncomeInDB]: ...

    @abstractmethod
    def add_expense(self, user_id: str, expense: ExpenseCreate) -> ExpenseInDB: ...

    @abstractmethod
    def update_expense(self, user_id: str, expense_id: str, expense: ExpenseUpdate) -> ExpenseInDB: ...

    @abstractmethod
    def delete_expense(self, user_id: str, expense_id: str) -> None: ...

    @abstractmethod
    def list_expenses(self, user_id: str) -> List[ExpenseInDB]: ...


class InMemoryTransactionStore(TransactionStore):
    backend = "memory"

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._incomes: Dict[str, List[IncomeInDB]] = defaultdict(list)
        self._expenses: Dict[str, List[ExpenseInDB]] = defaultdict(list)

    def add_income(self, user_id: str, income: IncomeCreate) -> IncomeInDB:
        record = IncomeInDB(user_id=user_id, **income.model_dump())
        with self._lock:
            self._incomes[user_id].append(record)
        logger.info(f"Added income {record.id} for user {user_id}")
        return record

    def update_income(self, user_id: str, income_id: str, income: IncomeUpdate) -> IncomeInDB:
        with self._lock:
            records = self._incomes.get(user_id, [])
            for idx, existing in enumerate(records):
                if existing.id == income_id:
                    records[idx] = existing.model_copy(update=income.model_dump())
                    logger.info(f"Updated income {income_id} for user {user_id}")
                    return records[idx]
        raise TransactionNotFound("Income", income_id)

    def delete_income(self, user_id: str, income_id: str) -> None:
        with self._lock:
            records = self._incomes.get(user_id, [])
            remaining = [record for record in records if record.id != income_id]
            if len(remaining) == len(records):
                raise TransactionNotFound("Income", income_id)
            self._incomes[user_id] = remaining
        logger.info(f"Deleted income {income_id} for user {user_id}")

    def list_incomes(self, user_id: str) -> List[IncomeInDB]:
        with self._lock:
            return list(self._incomes.get(user_id, ()))

    def add_expense(self, user_id: str, expense: ExpenseCreate) -> ExpenseInDB:
        record = ExpenseInDB(user_id=user_id, **expense.model_dump())
        with self._lock:
            self._expenses[user_id].append(record)
        logger.info(f"Added expense {record.id} for user {user_id}")
        return record

    def update_expense(self, user_id: str, expense_id: str, expense: ExpenseUpdate) -> ExpenseInDB:
        with self._lock:
            records = self._expenses.get(user_id, [])
            for idx, existing in enumerate(records):
                if existing.id == expense_id:
                    records[idx] = existing.model_copy(update=expense.model_dump())
                    logger.info(f"Updated expense {expense_id} for user {user_id}")
                    return records[idx]
        raise TransactionNotFound("Expense", expense_id)

    def delete_expense(self, user_id: str, expense_id: str) -> None:
        with self._lock:
            records = self._expenses.get(user_id, [])
            remaining = [record for record in records if record.id != expense_id]
            if len(remaining) == len(records):
                raise TransactionNotFound("Expense", expense_id)
            self._expenses[user_id] = remaining
        logger.info(f"Deleted expense {expense_id} for user {user_id}")

    def list_expenses(self, user_id: str) -> List[ExpenseInDB]:
        with self._lock:
            return list(self._expenses.get(user_id, ()))
