"""
Public shaping operations.

Each operation validates its raw input, runs the matching routine and wraps
the outcome in a ShapingResult. Rejected input never raises: the failure
reason travels back in the result and is logged as an ``input_rejected``
event. Callers that want the legacy sentinels use ``unwrap_or(None)`` (or
``unwrap_or("")`` for titles).
"""

from typing import Any, Optional

from .config.defaults import DefaultConfig, get_default_config
from .data.validators import RecordValidator
from .errors import DataQualityError, MalformedDataError, MissingDataError
from .logging.config import get_validation_logger, log_rejection
from .metrics.auction import summarize_purchases
from .metrics.pnr import build_status_report
from .metrics.report_card import build_report_card
from .metrics.transactions import analyze_log
from .models.result import ShapingResult
from .models.summaries import (
    AuctionSummary,
    ChatMessage,
    PnrStatusReport,
    ReportCard,
    TransactionAnalysis,
)
from .text.chat import parse_chat_line
from .text.titles import normalize_title

logger = get_validation_logger(__name__)

_config = get_default_config()
_validator = RecordValidator(_config)


def _rejected(operation: str, error: DataQualityError) -> ShapingResult:
    log_rejection(logger, operation, str(error), field=error.field)
    return ShapingResult.error(str(error), field=error.field)


def _resolve(config: Optional[DefaultConfig]) -> tuple[DefaultConfig, RecordValidator]:
    if config is None:
        return _config, _validator
    return config, RecordValidator(config)


def summarize_auction(team: Any, players: Any,
                      config: Optional[DefaultConfig] = None) -> ShapingResult[AuctionSummary]:
    """
    Summarize a team's auction spend against its purse.

    Args:
        team: Mapping like {"name": "CSK", "purse": 9000}
        players: List of mappings like {"name": "Dhoni", "role": "wk", "price": 1200}
        config: Rule configuration (defaults if None)

    Returns:
        ShapingResult carrying an AuctionSummary
    """
    _, validator = _resolve(config)
    try:
        valid_team = validator.validate_team(team)
        valid_players = validator.validate_players(players)
    except DataQualityError as e:
        return _rejected("summarize_auction", e)

    summary = summarize_purchases(valid_team, valid_players)
    logger.debug("Auction summarized",
                 team=summary.team_name,
                 player_count=summary.player_count,
                 over_budget=summary.is_over_budget)
    return ShapingResult.ok(summary)


def process_pnr(pnr_data: Any, config: Optional[DefaultConfig] = None) -> ShapingResult[PnrStatusReport]:
    """
    Build a railway PNR status report.

    Args:
        pnr_data: Mapping with pnr, train, classBooked and passengers
        config: Rule configuration (defaults if None)

    Returns:
        ShapingResult carrying a PnrStatusReport
    """
    cfg, validator = _resolve(config)
    try:
        record = validator.validate_pnr(pnr_data)
    except DataQualityError as e:
        return _rejected("process_pnr", e)

    report = build_status_report(record, cfg.pnr)
    logger.debug("PNR processed",
                 pnr=report.pnr_formatted,
                 passengers=report.summary.total_passengers,
                 chart_prepared=report.chart_prepared)
    return ShapingResult.ok(report)


def parse_chat_message(line: Any, config: Optional[DefaultConfig] = None) -> ShapingResult[ChatMessage]:
    """
    Parse one exported WhatsApp chat line.

    Args:
        line: Text like "25/01/2025, 14:30 - Rahul: Bhai party kab hai? 😂"
        config: Rule configuration (defaults if None)

    Returns:
        ShapingResult carrying a ChatMessage
    """
    cfg, _ = _resolve(config)
    try:
        message = parse_chat_line(line, cfg.sentiment)
    except DataQualityError as e:
        return _rejected("parse_chat_message", e)

    logger.debug("Chat line parsed", sender=message.sender, sentiment=message.sentiment)
    return ShapingResult.ok(message)


def generate_report_card(student: Any, config: Optional[DefaultConfig] = None) -> ShapingResult[ReportCard]:
    """
    Generate a report card from a student's marks.

    Args:
        student: Mapping like {"name": "Rahul", "marks": {"maths": 85}}
        config: Rule configuration (defaults if None)

    Returns:
        ShapingResult carrying a ReportCard
    """
    cfg, validator = _resolve(config)
    try:
        record = validator.validate_student(student)
    except DataQualityError as e:
        return _rejected("generate_report_card", e)

    card = build_report_card(record, cfg.grades)
    logger.debug("Report card generated", student=card.name, grade=card.grade)
    return ShapingResult.ok(card)


def fix_title(title: Any, config: Optional[DefaultConfig] = None) -> ShapingResult[str]:
    """
    Normalize a messy movie title into Title Case.

    Args:
        title: Raw title text
        config: Rule configuration (defaults if None)

    Returns:
        ShapingResult carrying the cleaned title
    """
    cfg, _ = _resolve(config)
    try:
        if not isinstance(title, str):
            raise MalformedDataError(f"title must be a string, got {type(title).__name__}",
                                     expected_format="string", field="title")
        if not title.strip():
            raise MissingDataError("title is blank", data_type="title", field="title")
    except DataQualityError as e:
        return _rejected("fix_title", e)

    return ShapingResult.ok(normalize_title(title, cfg.titles))


def analyze_transactions(transactions: Any,
                         config: Optional[DefaultConfig] = None) -> ShapingResult[TransactionAnalysis]:
    """
    Analyze a UPI transaction log.

    Records with a non-positive amount or an unknown type are skipped.

    Args:
        transactions: List of transaction mappings
        config: Rule configuration (defaults if None)

    Returns:
        ShapingResult carrying a TransactionAnalysis
    """
    cfg, validator = _resolve(config)
    try:
        valid, dropped = validator.filter_transactions(transactions)
    except DataQualityError as e:
        return _rejected("analyze_transactions", e)

    if dropped:
        logger.debug("Skipped invalid transactions", dropped=dropped, kept=len(valid))

    analysis = analyze_log(valid, cfg.transactions)
    logger.debug("Transactions analyzed",
                 count=analysis.transaction_count,
                 net_balance=analysis.net_balance)
    return ShapingResult.ok(analysis)
