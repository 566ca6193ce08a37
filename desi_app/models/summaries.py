"""Derived, read-only summaries produced by the shaping routines."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..data.models import Player, Transaction


@dataclass(frozen=True)
class ChatMessage:
    """One parsed line of an exported WhatsApp chat."""
    date: str
    time: str
    sender: str
    text: str
    word_count: int
    sentiment: str  # 'funny', 'love' or 'neutral'

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "time": self.time,
            "sender": self.sender,
            "text": self.text,
            "wordCount": self.word_count,
            "sentiment": self.sentiment,
        }


@dataclass(frozen=True)
class ReportCard:
    """Marks analysis for a single student."""
    name: str
    total_marks: float
    percentage: float
    grade: str
    highest_subject: str
    lowest_subject: str
    passed_subjects: tuple[str, ...]
    failed_subjects: tuple[str, ...]
    subject_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "totalMarks": self.total_marks,
            "percentage": self.percentage,
            "grade": self.grade,
            "highestSubject": self.highest_subject,
            "lowestSubject": self.lowest_subject,
            "passedSubjects": list(self.passed_subjects),
            "failedSubjects": list(self.failed_subjects),
            "subjectCount": self.subject_count,
        }


@dataclass(frozen=True)
class AuctionSummary:
    """Spend analysis for one team's auction purchases."""
    team_name: Any
    total_spent: float
    remaining: float
    player_count: int
    costliest_player: Player
    cheapest_player: Player
    average_price: int
    by_role: dict[Any, int]
    is_over_budget: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "teamName": self.team_name,
            "totalSpent": self.total_spent,
            "remaining": self.remaining,
            "playerCount": self.player_count,
            "costliestPlayer": self.costliest_player.to_dict(),
            "cheapestPlayer": self.cheapest_player.to_dict(),
            "averagePrice": self.average_price,
            "byRole": dict(self.by_role),
            "isOverBudget": self.is_over_budget,
        }


@dataclass(frozen=True)
class TransactionAnalysis:
    """Aggregates over the valid entries of a UPI transaction log."""
    total_credit: float
    total_debit: float
    net_balance: float
    transaction_count: int
    avg_transaction: int
    highest_transaction: Transaction
    category_breakdown: dict[Any, float]
    frequent_contact: Any
    all_above_100: bool
    has_large_transaction: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalCredit": self.total_credit,
            "totalDebit": self.total_debit,
            "netBalance": self.net_balance,
            "transactionCount": self.transaction_count,
            "avgTransaction": self.avg_transaction,
            "highestTransaction": self.highest_transaction.to_dict(),
            "categoryBreakdown": dict(self.category_breakdown),
            "frequentContact": self.frequent_contact,
            "allAbove100": self.all_above_100,
            "hasLargeTransaction": self.has_large_transaction,
        }


class StatusLabel(str, Enum):
    """Current booking status of a passenger."""
    CONFIRMED = "CONFIRMED"
    WAITING = "WAITING"
    CANCELLED = "CANCELLED"
    RAC = "RAC"


@dataclass(frozen=True)
class PassengerStatus:
    """Display row for one passenger."""
    formatted_name: str
    booking_status: Any
    current_status: Any
    status_label: StatusLabel

    @property
    def is_confirmed(self) -> bool:
        return self.status_label is StatusLabel.CONFIRMED

    def to_dict(self) -> dict[str, Any]:
        return {
            "formattedName": self.formatted_name,
            "bookingStatus": self.booking_status,
            "currentStatus": self.current_status,
            "statusLabel": self.status_label.value,
            "isConfirmed": self.is_confirmed,
        }


@dataclass(frozen=True)
class PnrSummary:
    """Status counts across all passengers of a PNR."""
    total_passengers: int
    confirmed: int
    waiting: int
    cancelled: int
    rac: int
    all_confirmed: bool
    any_waiting: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalPassengers": self.total_passengers,
            "confirmed": self.confirmed,
            "waiting": self.waiting,
            "cancelled": self.cancelled,
            "rac": self.rac,
            "allConfirmed": self.all_confirmed,
            "anyWaiting": self.any_waiting,
        }


@dataclass(frozen=True)
class PnrStatusReport:
    """Complete PNR status report."""
    pnr_formatted: str
    train_info: str
    passengers: tuple[PassengerStatus, ...]
    summary: PnrSummary
    chart_prepared: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "pnrFormatted": self.pnr_formatted,
            "trainInfo": self.train_info,
            "passengers": [p.to_dict() for p in self.passengers],
            "summary": self.summary.to_dict(),
            "chartPrepared": self.chart_prepared,
        }
