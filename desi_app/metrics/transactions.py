"""UPI transaction log analysis"""

from collections.abc import Sequence
from typing import Any, Optional

from ..config.defaults import TransactionParams
from ..data.models import Transaction
from ..models.summaries import TransactionAnalysis
from ..utils.numbers import round_half_up


def find_highest(transactions: Sequence[Transaction]) -> Transaction:
    """Transaction with the largest amount; the earliest one wins ties."""
    highest = transactions[0]
    for txn in transactions[1:]:
        if txn.amount > highest.amount:
            highest = txn
    return highest


def category_totals(transactions: Sequence[Transaction]) -> dict:
    """Sum amounts per category, credits and debits alike."""
    totals: dict = {}
    for txn in transactions:
        totals[txn.category] = totals.get(txn.category, 0) + txn.amount
    return totals


def most_frequent_contact(transactions: Sequence[Transaction]) -> Any:
    """
    Counterparty that appears most often.

    Counts are kept in first-seen order and only a strictly higher count
    replaces the leader, so the earliest contact wins ties.
    """
    frequency: dict = {}
    for txn in transactions:
        frequency[txn.to] = frequency.get(txn.to, 0) + 1

    contact, best = None, 0
    for name, count in frequency.items():
        if count > best:
            contact, best = name, count
    return contact


def analyze_log(transactions: Sequence[Transaction],
                params: Optional[TransactionParams] = None) -> TransactionAnalysis:
    """
    Aggregate a non-empty list of valid transactions.

    Args:
        transactions: Transactions that passed validation, in log order
        params: Amount thresholds (defaults if None)

    Returns:
        TransactionAnalysis
    """
    params = params or TransactionParams()

    total_credit = sum(txn.amount for txn in transactions if txn.is_credit)
    total_debit = sum(txn.amount for txn in transactions if not txn.is_credit)
    count = len(transactions)

    return TransactionAnalysis(
        total_credit=total_credit,
        total_debit=total_debit,
        net_balance=total_credit - total_debit,
        transaction_count=count,
        avg_transaction=round_half_up(sum(txn.amount for txn in transactions) / count),
        highest_transaction=find_highest(transactions),
        category_breakdown=category_totals(transactions),
        frequent_contact=most_frequent_contact(transactions),
        all_above_100=all(txn.amount > params.small_amount_threshold for txn in transactions),
        has_large_transaction=any(txn.amount >= params.large_amount_threshold for txn in transactions),
    )
