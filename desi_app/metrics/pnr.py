"""Railway PNR status formatting and analytics"""

import math
from collections.abc import Sequence
from typing import Any, Optional

from ..config.defaults import PnrParams
from ..data.models import Passenger, PnrRecord, TrainInfo
from ..models.summaries import PassengerStatus, PnrStatusReport, PnrSummary, StatusLabel


def _display(value: Any) -> str:
    """Render a field the way the booking printout shows it."""
    if value is None:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
    return str(value)


def format_pnr(pnr: str) -> str:
    """Format a ten digit PNR as 3-3-4 groups, e.g. 123-456-7890."""
    return f"{pnr[:3]}-{pnr[3:6]}-{pnr[6:]}"


def format_train_info(train: TrainInfo, class_booked: object = None,
                      placeholder: str = "N/A") -> str:
    """One-line train header."""
    travel_class = placeholder if class_booked is None else class_booked
    return (f"Train: {_display(train.number)} - {_display(train.name)} | "
            f"{_display(train.origin)} → {_display(train.destination)} | "
            f"Class: {_display(travel_class)}")


def classify_status(current: object, params: Optional[PnrParams] = None) -> StatusLabel:
    """
    Classify a passenger's current status code.

    Rules are checked in order: exact "CAN", then "RAC", "WL" and berth
    prefixes. Any other code, including an empty one, counts as confirmed.
    """
    params = params or PnrParams()
    code = current.upper() if isinstance(current, str) else ""

    if code == "CAN":
        return StatusLabel.CANCELLED
    if code.startswith("RAC"):
        return StatusLabel.RAC
    if code.startswith("WL"):
        return StatusLabel.WAITING
    if code.startswith(params.berth_prefixes):
        return StatusLabel.CONFIRMED
    # CNF and other booking codes
    return StatusLabel.CONFIRMED


def format_passenger_name(passenger: Passenger, width: int = 20) -> str:
    """Name padded to a fixed width followed by (age/gender)."""
    return f"{passenger.name.ljust(width)}({_display(passenger.age)}/{_display(passenger.gender)})"


def build_passenger_status(passenger: Passenger, params: Optional[PnrParams] = None) -> PassengerStatus:
    params = params or PnrParams()
    return PassengerStatus(
        formatted_name=format_passenger_name(passenger, params.name_width),
        booking_status=passenger.booking,
        current_status=passenger.current,
        status_label=classify_status(passenger.current, params),
    )


def summarize_statuses(statuses: Sequence[PassengerStatus]) -> PnrSummary:
    """Count passengers per status label."""
    labels = [status.status_label for status in statuses]
    return PnrSummary(
        total_passengers=len(labels),
        confirmed=labels.count(StatusLabel.CONFIRMED),
        waiting=labels.count(StatusLabel.WAITING),
        cancelled=labels.count(StatusLabel.CANCELLED),
        rac=labels.count(StatusLabel.RAC),
        all_confirmed=all(status.is_confirmed for status in statuses),
        any_waiting=StatusLabel.WAITING in labels,
    )


def is_chart_prepared(statuses: Sequence[PassengerStatus]) -> bool:
    """True when every passenger who has not cancelled holds a confirmed berth."""
    return all(status.is_confirmed for status in statuses
               if status.status_label is not StatusLabel.CANCELLED)


def build_status_report(record: PnrRecord, params: Optional[PnrParams] = None) -> PnrStatusReport:
    """
    Build the full status report for a validated PNR.

    Args:
        record: Validated PNR booking
        params: Formatting rules (defaults if None)

    Returns:
        PnrStatusReport
    """
    params = params or PnrParams()
    statuses = tuple(build_passenger_status(p, params) for p in record.passengers)

    return PnrStatusReport(
        pnr_formatted=format_pnr(record.pnr),
        train_info=format_train_info(record.train, record.class_booked, params.class_placeholder),
        passengers=statuses,
        summary=summarize_statuses(statuses),
        chart_prepared=is_chart_prepared(statuses),
    )
