"""Tests for UPI transaction log analysis"""

import pytest

from desi_app.config.defaults import TransactionParams
from desi_app.data.models import Transaction
from desi_app.metrics.transactions import (
    analyze_log,
    category_totals,
    find_highest,
    most_frequent_contact,
)


def txn(id, type, amount, to="X", category="misc"):
    return Transaction(id=id, type=type, amount=amount, to=to, category=category, date="2025-01-01")


class TestAnalyzeLog:
    """Test transaction aggregation"""

    def test_documented_example(self):
        """Test salary plus two food orders"""
        log = [
            txn("T1", "credit", 5000, "Salary", "income"),
            txn("T2", "debit", 200, "Swiggy", "food"),
            txn("T3", "debit", 100, "Swiggy", "food"),
        ]

        analysis = analyze_log(log)

        assert analysis.total_credit == 5000
        assert analysis.total_debit == 300
        assert analysis.net_balance == 4700
        assert analysis.transaction_count == 3
        assert analysis.avg_transaction == 1767
        assert analysis.highest_transaction.id == "T1"
        assert analysis.category_breakdown == {"income": 5000, "food": 300}
        assert analysis.frequent_contact == "Swiggy"
        assert analysis.all_above_100 is False
        assert analysis.has_large_transaction is True

    def test_totals_invariant(self):
        """Test credit/debit totals match per-type sums and net balance"""
        log = [
            txn("1", "debit", 450.5), txn("2", "credit", 120), txn("3", "debit", 99.5),
            txn("4", "credit", 3000), txn("5", "debit", 1),
        ]
        analysis = analyze_log(log)

        assert analysis.total_credit == sum(t.amount for t in log if t.type == "credit")
        assert analysis.total_debit == sum(t.amount for t in log if t.type == "debit")
        assert analysis.net_balance == analysis.total_credit - analysis.total_debit

    def test_threshold_flags(self):
        """Test the strict > 100 and inclusive >= 5000 boundaries"""
        analysis = analyze_log([txn("1", "debit", 101), txn("2", "credit", 4999.99)])
        assert analysis.all_above_100 is True
        assert analysis.has_large_transaction is False

        analysis = analyze_log([txn("1", "debit", 100), txn("2", "credit", 5000)])
        assert analysis.all_above_100 is False
        assert analysis.has_large_transaction is True

    def test_custom_thresholds(self):
        params = TransactionParams(small_amount_threshold=10, large_amount_threshold=50)
        analysis = analyze_log([txn("1", "debit", 11), txn("2", "credit", 50)], params)
        assert analysis.all_above_100 is True
        assert analysis.has_large_transaction is True

    def test_average_rounds_half_up(self):
        analysis = analyze_log([txn("1", "debit", 1), txn("2", "debit", 2)])
        assert analysis.avg_transaction == 2

    def test_to_dict_renders_highest_as_record(self):
        analysis = analyze_log([txn("T9", "credit", 700, "Mummy", "gift")])
        result = analysis.to_dict()

        assert result["highestTransaction"] == {
            "id": "T9", "type": "credit", "amount": 700,
            "to": "Mummy", "category": "gift", "date": "2025-01-01",
        }
        assert result["netBalance"] == 700
        assert result["frequentContact"] == "Mummy"


class TestHighest:
    """Test highest transaction selection"""

    def test_tie_keeps_first(self):
        log = [txn("a", "debit", 10), txn("b", "credit", 900), txn("c", "debit", 900)]
        assert find_highest(log).id == "b"


class TestFrequentContact:
    """Test most frequent counterparty"""

    def test_tie_keeps_earliest_contact(self):
        """Test equal counts resolve to the contact seen first"""
        log = [
            txn("1", "debit", 10, "Zomato"),
            txn("2", "debit", 10, "Ola"),
            txn("3", "debit", 10, "Ola"),
            txn("4", "debit", 10, "Zomato"),
        ]
        assert most_frequent_contact(log) == "Zomato"

    def test_clear_winner(self):
        log = [txn("1", "debit", 10, "A"), txn("2", "debit", 10, "B"), txn("3", "debit", 10, "B")]
        assert most_frequent_contact(log) == "B"


class TestCategoryTotals:
    """Test per-category totals"""

    def test_credit_and_debit_both_counted(self):
        log = [txn("1", "credit", 300, category="food"), txn("2", "debit", 200, category="food"),
               txn("3", "debit", 50, category="travel")]
        totals = category_totals(log)

        assert totals == {"food": 500, "travel": 50}
        assert list(totals) == ["food", "travel"]
