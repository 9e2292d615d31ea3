from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, List, Optional

from expense_tracker.models.analytics import MonthlyAnalytics, SavingTip, TipKind
from expense_tracker.models.transaction import ExpenseCategory

ZERO = Decimal("0")
HUNDRED = Decimal("100")

FOOD_LIMIT_PCT = Decimal("40")
SHOPPING_LIMIT_PCT = Decimal("30")
TARGET_SAVINGS_PCT = Decimal("20")
TARGET_SAVINGS_SHARE = Decimal("0.2")


def format_amount(value: Decimal) -> str:
    """Group thousands and keep at most three fraction digits: 1234.5 -> '1,234.5'."""
    text = f"{Decimal(value).quantize(Decimal('0.001'), rounding=ROUND_HALF_UP):,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_percent(value: Decimal) -> str:
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def category_share(analytics: MonthlyAnalytics, category: ExpenseCategory) -> Decimal:
    """Percentage of the month's expenses spent in one category, 0 when nothing was spent."""
    if analytics.total_expenses <= 0:
        return ZERO
    return analytics.category_breakdown[category] / analytics.total_expenses * HUNDRED


def savings_rate(analytics: MonthlyAnalytics) -> Decimal:
    """Savings as a percentage of income, 0 when there was no income."""
    if analytics.total_income <= 0:
        return ZERO
    return analytics.savings / analytics.total_income * HUNDRED


@dataclass(frozen=True)
class TipRule:
    """
    One advice rule: when ``applies`` holds for a month's analytics,
    ``build`` renders the tip. ``build`` receives the analytics and the
    currency symbol used in messages.
    """

    id: str
    kind: TipKind
    title: str
    icon: str
    applies: Callable[[MonthlyAnalytics], bool]
    build: Callable[[MonthlyAnalytics, str], str]

    def evaluate(self, analytics: MonthlyAnalytics, currency_symbol: str) -> Optional[SavingTip]:
        if not self.applies(analytics):
            return None
        return SavingTip(
            id=self.id,
            kind=self.kind,
            title=self.title,
            message=self.build(analytics, currency_symbol),
            icon=self.icon,
        )


def _overspending_message(analytics: MonthlyAnalytics, currency: str) -> str:
    return (
        f"Your expenses ({currency}{format_amount(analytics.total_expenses)}) exceed your income "
        f"({currency}{format_amount(analytics.total_income)}). "
        "Consider cutting back on non-essential expenses."
    )


def _food_message(analytics: MonthlyAnalytics, currency: str) -> str:
    share = format_percent(category_share(analytics, ExpenseCategory.FOOD))
    return (
        f"Food expenses are {share}% of your total spending. "
        "Try meal prepping or cooking at home more often to save money."
    )


def _shopping_message(analytics: MonthlyAnalytics, currency: str) -> str:
    share = format_percent(category_share(analytics, ExpenseCategory.SHOPPING))
    return (
        f"Shopping is {share}% of expenses. "
        "Consider waiting 24 hours before non-essential purchases."
    )


def _good_savings_message(analytics: MonthlyAnalytics, currency: str) -> str:
    return f"You're saving {format_percent(savings_rate(analytics))}% of your income. Keep up the great work!"


def _improve_savings_message(analytics: MonthlyAnalytics, currency: str) -> str:
    return (
        f"You're saving {format_percent(savings_rate(analytics))}%. "
        "Aim for 20% savings rate for financial security."
    )


def _suggested_savings_message(analytics: MonthlyAnalytics, currency: str) -> str:
    suggested = analytics.total_income * TARGET_SAVINGS_SHARE
    return f"Based on your income, aim to save {currency}{format_amount(suggested)} per month (20% rule)."


# Evaluated in order; the order of the resulting tips is part of the contract.
TIP_RULES = (
    TipRule(
        id="overspending",
        kind=TipKind.WARNING,
        title="Overspending Alert!",
        icon="⚠️",
        applies=lambda a: a.total_expenses > a.total_income and a.total_income > 0,
        build=_overspending_message,
    ),
    TipRule(
        id="food-high",
        kind=TipKind.WARNING,
        title="High Food Expenses",
        icon="🍔",
        applies=lambda a: category_share(a, ExpenseCategory.FOOD) > FOOD_LIMIT_PCT,
        build=_food_message,
    ),
    TipRule(
        id="shopping-high",
        kind=TipKind.INFO,
        title="Shopping Tip",
        icon="🛍️",
        applies=lambda a: category_share(a, ExpenseCategory.SHOPPING) > SHOPPING_LIMIT_PCT,
        build=_shopping_message,
    ),
    TipRule(
        id="good-savings",
        kind=TipKind.SUCCESS,
        title="Great Savings Rate!",
        icon="🎉",
        applies=lambda a: savings_rate(a) >= TARGET_SAVINGS_PCT,
        build=_good_savings_message,
    ),
    TipRule(
        id="improve-savings",
        kind=TipKind.INFO,
        title="Savings Goal",
        icon="💡",
        applies=lambda a: ZERO < savings_rate(a) < TARGET_SAVINGS_PCT,
        build=_improve_savings_message,
    ),
    TipRule(
        id="suggested-savings",
        kind=TipKind.INFO,
        title="Recommended Savings",
        icon="📊",
        applies=lambda a: a.total_income > 0,
        build=_suggested_savings_message,
    ),
)


def generate_saving_tips(analytics: MonthlyAnalytics, currency_symbol: str = "₹") -> List[SavingTip]:
    """
    Turn one month's analytics into saving advice, in rule order.

    Returns an empty list for a month without income and expenses.
    """
    tips = []
    for rule in TIP_RULES:
        tip = rule.evaluate(analytics, currency_symbol)
        if tip is not None:
            tips.append(tip)
    return tips
