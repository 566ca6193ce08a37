"""Pytest configuration and shared fixtures."""

import pytest
from typing import Dict, Any, List


@pytest.fixture
def sample_team() -> Dict[str, Any]:
    """Sample auction team with purse in lakhs."""
    return {"name": "CSK", "purse": 9000}


@pytest.fixture
def sample_players() -> List[Dict[str, Any]]:
    """Sample players bought at auction."""
    return [
        {"name": "Dhoni", "role": "wk", "price": 1200},
        {"name": "Jadeja", "role": "ar", "price": 1600},
        {"name": "Gaikwad", "role": "bat", "price": 600},
        {"name": "Pathirana", "role": "bowl", "price": 1300},
        {"name": "Dube", "role": "bat", "price": 600},
    ]


@pytest.fixture
def sample_transactions() -> List[Dict[str, Any]]:
    """Sample UPI transaction log."""
    return [
        {"id": "T1", "type": "credit", "amount": 5000, "to": "Salary", "category": "income", "date": "2025-01-01"},
        {"id": "T2", "type": "debit", "amount": 200, "to": "Swiggy", "category": "food", "date": "2025-01-02"},
        {"id": "T3", "type": "debit", "amount": 100, "to": "Swiggy", "category": "food", "date": "2025-01-03"},
    ]


@pytest.fixture
def sample_pnr() -> Dict[str, Any]:
    """Sample PNR booking with mixed passenger statuses."""
    return {
        "pnr": "1234567890",
        "train": {"number": "12301", "name": "Rajdhani Express", "from": "NDLS", "to": "HWH"},
        "classBooked": "3A",
        "passengers": [
            {"name": "Rahul Kumar", "age": 28, "gender": "M", "booking": "B1", "current": "B1"},
            {"name": "Priya Sharma", "age": 25, "gender": "F", "booking": "WL5", "current": "B3"},
            {"name": "Amit Singh", "age": 60, "gender": "M", "booking": "WL12", "current": "WL8"},
        ],
    }


@pytest.fixture
def sample_student() -> Dict[str, Any]:
    """Sample student record."""
    return {"name": "Rahul", "marks": {"maths": 85, "science": 92, "english": 78}}
