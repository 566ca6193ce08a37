"""Aggregation routines over validated records"""

from .auction import count_by_role, find_cheapest, find_costliest, summarize_purchases
from .pnr import build_status_report, classify_status, format_pnr, format_train_info
from .report_card import build_report_card, calculate_percentage, grade_for
from .transactions import analyze_log, category_totals, find_highest, most_frequent_contact

__all__ = [
    "summarize_purchases",
    "find_costliest",
    "find_cheapest",
    "count_by_role",
    "build_status_report",
    "classify_status",
    "format_pnr",
    "format_train_info",
    "build_report_card",
    "calculate_percentage",
    "grade_for",
    "analyze_log",
    "category_totals",
    "find_highest",
    "most_frequent_contact",
]
