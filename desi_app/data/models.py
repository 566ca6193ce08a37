"""
Canonical input records.

This module defines immutable data structures that represent validated caller
input. Records that are echoed back in results (players, transactions) keep a
read-only snapshot of the original mapping in ``raw`` so output copies carry
every field the caller supplied.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Team:
    """Auction team with its purse (budget)."""
    name: Any
    purse: float


@dataclass(frozen=True)
class Player:
    """Player bought at auction."""
    name: Any
    role: Any
    price: float
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def to_dict(self) -> dict[str, Any]:
        """Independent copy of the original player record."""
        if self.raw:
            return dict(self.raw)
        return {"name": self.name, "role": self.role, "price": self.price}


@dataclass(frozen=True)
class Transaction:
    """Single UPI transaction that passed validation."""
    id: Any
    type: str           # "credit" or "debit"
    amount: float       # Always positive
    to: Any             # Counterparty
    category: Any
    date: Any
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def is_credit(self) -> bool:
        return self.type == "credit"

    def to_dict(self) -> dict[str, Any]:
        """Independent copy of the original transaction record."""
        if self.raw:
            return dict(self.raw)
        return {
            "id": self.id,
            "type": self.type,
            "amount": self.amount,
            "to": self.to,
            "category": self.category,
            "date": self.date,
        }


@dataclass(frozen=True)
class TrainInfo:
    """Train details printed in the PNR header."""
    number: Any
    name: Any
    origin: Any
    destination: Any


@dataclass(frozen=True)
class Passenger:
    """Passenger booked on a PNR."""
    name: str
    age: Any
    gender: Any
    booking: Any
    current: Any


@dataclass(frozen=True)
class PnrRecord:
    """Validated PNR booking."""
    pnr: str
    train: TrainInfo
    passengers: tuple[Passenger, ...]
    class_booked: Optional[Any] = None


@dataclass(frozen=True)
class StudentRecord:
    """Student with subject marks in their original order."""
    name: str
    marks: tuple[tuple[str, float], ...]

    @property
    def subject_count(self) -> int:
        return len(self.marks)
