from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Annotated, Literal, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, PlainSerializer

# Amounts stay Decimal in Python and go out as plain numbers in JSON
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
PositiveMoney = Annotated[Money, Field(gt=0)]


class ExpenseCategory(str, Enum):
    FOOD = "food"
    TRAVEL = "travel"
    SHOPPING = "shopping"
    BILLS = "bills"
    OTHER = "other"


class CategoryInfo(BaseModel):
    category: ExpenseCategory
    label: str
    icon: str


EXPENSE_CATEGORIES = {
    ExpenseCategory.FOOD: CategoryInfo(category=ExpenseCategory.FOOD, label="Food & Dining", icon="🍔"),
    ExpenseCategory.TRAVEL: CategoryInfo(category=ExpenseCategory.TRAVEL, label="Travel", icon="✈️"),
    ExpenseCategory.SHOPPING: CategoryInfo(category=ExpenseCategory.SHOPPING, label="Shopping", icon="🛍️"),
    ExpenseCategory.BILLS: CategoryInfo(category=ExpenseCategory.BILLS, label="Bills & Utilities", icon="📄"),
    ExpenseCategory.OTHER: CategoryInfo(category=ExpenseCategory.OTHER, label="Other", icon="📦"),
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class IncomeCreate(BaseModel):
    amount: PositiveMoney
    source: str = Field(min_length=1)
    date: date


class IncomeUpdate(IncomeCreate):
    """Replaces amount, source and date of an existing income."""


class IncomeInDB(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    user_id: str
    amount: PositiveMoney
    source: str = Field(min_length=1)
    date: date
    created_at: datetime = Field(default_factory=_utcnow)


class ExpenseCreate(BaseModel):
    amount: PositiveMoney
    category: ExpenseCategory
    description: str = Field(min_length=1)
    date: date


class ExpenseUpdate(ExpenseCreate):
    """Replaces amount, category, description and date of an existing expense."""


class ExpenseInDB(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    user_id: str
    amount: PositiveMoney
    category: ExpenseCategory
    description: str = Field(min_length=1)
    date: date
    created_at: datetime = Field(default_factory=_utcnow)


class Transaction(BaseModel):
    """Income or expense tagged with its kind, for combined listings."""

    type: Literal["income", "expense"]
    id: str
    amount: Money
    date: date
    created_at: datetime
    source: Optional[str] = None
    category: Optional[ExpenseCategory] = None
    description: Optional[str] = None

    @classmethod
    def from_income(cls, income: IncomeInDB) -> "Transaction":
        return cls(
            type="income",
            id=income.id,
            amount=income.amount,
            date=income.date,
            created_at=income.created_at,
            source=income.source,
        )

    @classmethod
    def from_expense(cls, expense: ExpenseInDB) -> "Transaction":
        return cls(
            type="expense",
            id=expense.id,
            amount=expense.amount,
            date=expense.date,
            created_at=expense.created_at,
            category=expense.category,
            description=expense.description,
        )
