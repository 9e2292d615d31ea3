from .analytics import MonthlyAnalytics, SavingTip, TipKind
from .transaction import (
    EXPENSE_CATEGORIES,
    CategoryInfo,
    ExpenseCategory,
    ExpenseCreate,
    ExpenseInDB,
    ExpenseUpdate,
    IncomeCreate,
    IncomeInDB,
    IncomeUpdate,
    Transaction,
)

__all__ = [
    "EXPENSE_CATEGORIES",
    "CategoryInfo",
    "ExpenseCategory",
    "ExpenseCreate",
    "ExpenseInDB",
    "ExpenseUpdate",
    "IncomeCreate",
    "IncomeInDB",
    "IncomeUpdate",
    "MonthlyAnalytics",
    "SavingTip",
    "TipKind",
    "Transaction",
]
