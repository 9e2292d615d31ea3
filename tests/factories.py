from datetime import date
from decimal import Decimal

from expense_tracker.models.transaction import ExpenseCategory, ExpenseInDB, IncomeInDB


def make_income(amount, day: date, source: str = "Salary", user_id: str = "user-1") -> IncomeInDB:
    return IncomeInDB(user_id=user_id, amount=Decimal(str(amount)), source=source, date=day)


def make_expense(amount, category: str, day: date, description: str = "Spend", user_id: str = "user-1") -> ExpenseInDB:
    return ExpenseInDB(
        user_id=user_id,
        amount=Decimal(str(amount)),
        category=ExpenseCategory(category),
        description=description,
        date=day,
    )
