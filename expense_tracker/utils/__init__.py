"""
expense_tracker.utils
~~~~~~~~~~~~~~~~~~~~~

Pure analytics helpers shared by the API routes: the monthly aggregator and
the saving-tip advisor. Neither touches storage; callers pass in the
transactions they want analysed.
"""

from .advisor import TIP_RULES, TipRule, generate_saving_tips
from .analyzer import MONTH_NAMES, compute_monthly_analytics, month_index, trailing_monthly_analytics

__all__ = [
    "MONTH_NAMES",
    "TIP_RULES",
    "TipRule",
    "compute_monthly_analytics",
    "generate_saving_tips",
    "month_index",
    "trailing_monthly_analytics",
]
