from enum import Enum
from typing import Dict

from pydantic import BaseModel, ConfigDict

from expense_tracker.models.transaction import ExpenseCategory, Money


class MonthlyAnalytics(BaseModel):
    """Totals for one calendar month. Derived on every query, never stored."""

    month: str
    year: int
    total_income: Money
    total_expenses: Money
    savings: Money
    category_breakdown: Dict[ExpenseCategory, Money]


class TipKind(str, Enum):
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


class SavingTip(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    kind: TipKind
    title: str
    message: str
    icon: str
