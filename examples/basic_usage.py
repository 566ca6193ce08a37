#!/usr/bin/env python3
"""
Basic Usage Example - Desi App Data-Shaping Utilities

This script runs each shaping operation on sample data and shows how to:
- Check a ShapingResult for success
- Render results in their dictionary form
- Fall back to the legacy None / "" sentinels

Run: python examples/basic_usage.py
"""

import json
from typing import Any

from desi_app.logging.config import configure_logging
from desi_app.shapers import (
    analyze_transactions,
    fix_title,
    generate_report_card,
    parse_chat_message,
    process_pnr,
    summarize_auction,
)


def print_result(title: str, result: Any) -> None:
    """Print a result's dictionary form or its rejection reason."""
    print(f"{title}:")
    if not result.success:
        print(f"   ❌ rejected: {result.error_msg}")
    elif hasattr(result.value, "to_dict"):
        print("   " + json.dumps(result.value.to_dict(), ensure_ascii=False, indent=2).replace("\n", "\n   "))
    else:
        print(f"   {result.value!r}")
    print()


def main():
    """Run every operation once."""
    configure_logging(level="WARNING")

    print("🏏 Desi App - basic usage\n")

    print_result("1. Auction summary", summarize_auction(
        {"name": "CSK", "purse": 9000},
        [{"name": "Dhoni", "role": "wk", "price": 1200}, {"name": "Jadeja", "role": "ar", "price": 1600}],
    ))

    print_result("2. PNR status", process_pnr({
        "pnr": "1234567890",
        "train": {"number": "12301", "name": "Rajdhani Express", "from": "NDLS", "to": "HWH"},
        "classBooked": "3A",
        "passengers": [
            {"name": "Rahul Kumar", "age": 28, "gender": "M", "booking": "B1", "current": "B1"},
            {"name": "Amit Singh", "age": 60, "gender": "M", "booking": "WL12", "current": "WL8"},
        ],
    }))

    print_result("3. Chat line", parse_chat_message("25/01/2025, 14:30 - Rahul: Bhai party kab hai? 😂"))

    print_result("4. Report card", generate_report_card(
        {"name": "Rahul", "marks": {"maths": 85, "science": 92, "english": 78}}
    ))

    print_result("5. Title", fix_title("  DILWALE   DULHANIA   LE   JAYENGE  "))

    print_result("6. Transactions", analyze_transactions([
        {"id": "T1", "type": "credit", "amount": 5000, "to": "Salary", "category": "income", "date": "2025-01-01"},
        {"id": "T2", "type": "debit", "amount": 200, "to": "Swiggy", "category": "food", "date": "2025-01-02"},
        {"id": "T3", "type": "debit", "amount": 100, "to": "Swiggy", "category": "food", "date": "2025-01-03"},
    ]))

    # Invalid input never raises
    rejected = generate_report_card({"name": "", "marks": {}})
    print_result("7. Rejected report card", rejected)
    print(f"   legacy sentinel: {rejected.unwrap_or(None)!r}")
    print(f"   legacy title sentinel: {fix_title('   ').unwrap_or('')!r}")

    print("\n✅ Demo completed successfully!")


if __name__ == "__main__":
    main()
