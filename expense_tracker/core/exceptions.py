"""Exception classes for the expense tracker."""


class ExpenseTrackerError(Exception):
    """Base exception for the expense tracker."""
    pass


class InvalidArgument(ExpenseTrackerError, ValueError):
    """An argument is outside the domain an operation accepts."""
    pass


class TransactionNotFound(ExpenseTrackerError, LookupError):
    """No income or expense with the given id exists for the user."""

    def __init__(self, kind: str, transaction_id: str):
        super().__init__(f"{kind} {transaction_id} not found")
        self.kind = kind
        self.transaction_id = transaction_id


class StorageError(ExpenseTrackerError):
    """The storage backend failed to read or write."""
    pass


class ConfigError(ExpenseTrackerError, ValueError):
    """Configuration-related errors."""
    pass
