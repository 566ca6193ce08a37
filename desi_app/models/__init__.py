"""
Result and summary models.

Immutable data structures returned by the shaping routines. Every public
operation returns a ShapingResult wrapping one of the summaries.
"""

from .result import ShapingResult
from .summaries import (
    AuctionSummary,
    ChatMessage,
    PassengerStatus,
    PnrStatusReport,
    PnrSummary,
    ReportCard,
    StatusLabel,
    TransactionAnalysis,
)

__all__ = [
    "ShapingResult",
    "AuctionSummary",
    "ChatMessage",
    "PassengerStatus",
    "PnrStatusReport",
    "PnrSummary",
    "ReportCard",
    "StatusLabel",
    "TransactionAnalysis",
]
