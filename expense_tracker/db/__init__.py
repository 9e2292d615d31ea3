from functools import lru_cache

from expense_tracker.core.config import settings
from expense_tracker.core.exceptions import ConfigError
from expense_tracker.db.store import InMemoryTransactionStore, TransactionStore


@lru_cache(maxsize=1)
def get_store() -> TransactionStore:
    """Build the store selected by STORAGE_BACKEND. Routers receive it through Depends."""
    if settings.STORAGE_BACKEND == "memory":
        return InMemoryTransactionStore()
    if settings.STORAGE_BACKEND == "dynamo":
        from expense_tracker.db.dynamo import DynamoTransactionStore

        return DynamoTransactionStore(
            region=settings.DYNAMO_REGION,
            incomes_table=settings.DYNAMO_INCOMES_TABLE,
            expenses_table=settings.DYNAMO_EXPENSES_TABLE,
        )
    raise ConfigError(f"unknown STORAGE_BACKEND {settings.STORAGE_BACKEND!r}")


__all__ = ["InMemoryTransactionStore", "TransactionStore", "get_store"]
