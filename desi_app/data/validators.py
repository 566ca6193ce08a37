"""
Record validation framework for caller-supplied data.

This module turns untrusted plain mappings into typed records. Each check
raises a data quality error on the first violation, so a record is either
fully converted or rejected outright.
"""

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional

from ..config.defaults import DefaultConfig, get_default_config
from ..errors import (
    InsufficientDataError,
    MalformedDataError,
    MissingDataError,
    OutOfRangeError,
)
from ..utils.numbers import is_number, is_positive_number, is_within
from .models import (
    Passenger,
    Player,
    PnrRecord,
    StudentRecord,
    Team,
    TrainInfo,
    Transaction,
)


def _require_mapping(value: Any, field: str) -> Mapping:
    if value is None:
        raise MissingDataError(f"{field} is required", data_type=field, field=field)
    if not isinstance(value, Mapping):
        raise MalformedDataError(
            f"{field} must be a mapping, got {type(value).__name__}",
            raw_data=repr(value)[:100],
            expected_format="mapping",
            field=field,
        )
    return value


def _is_hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


def _require_non_empty_list(value: Any, field: str) -> list:
    if not isinstance(value, list):
        raise MalformedDataError(
            f"{field} must be a list, got {type(value).__name__}",
            raw_data=repr(value)[:100],
            expected_format="list",
            field=field,
        )
    if not value:
        raise MissingDataError(f"{field} must not be empty", data_type=field, field=field)
    return value


class RecordValidator:
    """Validates raw records and converts them into typed models."""

    def __init__(self, config: Optional[DefaultConfig] = None):
        """
        Initialize validator with configuration.

        Args:
            config: Rule set configuration (defaults if None)
        """
        self.config = config or get_default_config()
        self._pnr_pattern = re.compile(rf"[0-9]{{{self.config.pnr.pnr_length}}}")

    # Auction

    def validate_team(self, team: Any) -> Team:
        """
        Validate an auction team.

        Raises:
            DataQualityError: If the team is not a mapping or its purse is not
                a positive number
        """
        team = _require_mapping(team, "team")
        purse = team.get("purse")

        if not is_positive_number(purse):
            raise OutOfRangeError(
                f"team.purse must be a positive number, got {purse!r}",
                value=purse,
                lower=0,
                field="team.purse",
            )

        return Team(name=team.get("name"), purse=purse)

    def validate_players(self, players: Any) -> tuple[Player, ...]:
        """
        Validate the list of players bought at auction.

        Raises:
            DataQualityError: If players is not a non-empty list of mappings
                with numeric prices
        """
        players = _require_non_empty_list(players, "players")

        validated = []
        for i, raw in enumerate(players):
            record = _require_mapping(raw, f"players[{i}]")
            price = record.get("price")
            if not is_number(price):
                raise MalformedDataError(
                    f"players[{i}].price must be a number, got {price!r}",
                    raw_data=repr(price)[:100],
                    expected_format="number",
                    field=f"players[{i}].price",
                )
            role = record.get("role")
            if not _is_hashable(role):
                raise MalformedDataError(
                    f"players[{i}].role must be a plain value, got {type(role).__name__}",
                    raw_data=repr(role)[:100],
                    expected_format="hashable",
                    field=f"players[{i}].role",
                )
            validated.append(Player(
                name=record.get("name"),
                role=role,
                price=price,
                raw=MappingProxyType(dict(record)),
            ))

        return tuple(validated)

    # Report card

    def validate_student(self, student: Any) -> StudentRecord:
        """
        Validate a student record with subject marks.

        Raises:
            DataQualityError: If the name is blank, marks are missing or any
                mark lies outside [0, max_mark]
        """
        student = _require_mapping(student, "student")

        name = student.get("name")
        if not isinstance(name, str) or not name.strip():
            raise MissingDataError("student.name must be a non-empty string",
                                   data_type="name", field="student.name")

        marks = student.get("marks")
        if not isinstance(marks, Mapping):
            raise MalformedDataError("student.marks must be a mapping of subject to mark",
                                     raw_data=repr(marks)[:100],
                                     expected_format="mapping",
                                     field="student.marks")
        if not marks:
            raise MissingDataError("student.marks must not be empty",
                                   data_type="marks", field="student.marks")

        max_mark = self.config.grades.max_mark
        for subject, mark in marks.items():
            if not is_within(mark, 0, max_mark):
                raise OutOfRangeError(
                    f"Mark for {subject!r} must be a number between 0 and {max_mark:g}, got {mark!r}",
                    value=mark,
                    lower=0,
                    upper=max_mark,
                    field=f"student.marks.{subject}",
                )

        return StudentRecord(name=name, marks=tuple(marks.items()))

    # PNR

    def validate_pnr(self, pnr_data: Any) -> PnrRecord:
        """
        Validate a railway PNR booking.

        Raises:
            DataQualityError: If the PNR number is not exactly ten digits, the
                train block is missing or there are no passengers
        """
        pnr_data = _require_mapping(pnr_data, "pnr_data")

        pnr = pnr_data.get("pnr")
        if not isinstance(pnr, str) or not self._pnr_pattern.fullmatch(pnr):
            raise MalformedDataError(
                f"pnr must be a string of exactly {self.config.pnr.pnr_length} digits",
                raw_data=repr(pnr)[:100],
                expected_format="digits",
                field="pnr",
            )

        train = _require_mapping(pnr_data.get("train"), "train")
        passengers = _require_non_empty_list(pnr_data.get("passengers"), "passengers")

        return PnrRecord(
            pnr=pnr,
            train=TrainInfo(
                number=train.get("number"),
                name=train.get("name"),
                origin=train.get("from"),
                destination=train.get("to"),
            ),
            passengers=tuple(self._validate_passenger(p, i) for i, p in enumerate(passengers)),
            class_booked=pnr_data.get("classBooked"),
        )

    def _validate_passenger(self, raw: Any, index: int) -> Passenger:
        """Validate a single passenger entry."""
        record = _require_mapping(raw, f"passengers[{index}]")

        name = record.get("name")
        if not isinstance(name, str):
            raise MalformedDataError(
                f"passengers[{index}].name must be a string",
                raw_data=repr(name)[:100],
                expected_format="string",
                field=f"passengers[{index}].name",
            )

        return Passenger(
            name=name,
            age=record.get("age"),
            gender=record.get("gender"),
            booking=record.get("booking"),
            current=record.get("current"),
        )

    # Transactions

    def is_valid_transaction(self, record: Any) -> bool:
        """
        Return True if the record has a positive amount and a known type.

        The counterparty and category are grouping keys, so records where
        either one is unhashable are rejected as well.
        """
        if not isinstance(record, Mapping):
            return False
        return (is_positive_number(record.get("amount"))
                and _is_hashable(record.get("type"))
                and record.get("type") in self.config.transactions.valid_types
                and _is_hashable(record.get("to"))
                and _is_hashable(record.get("category")))

    def filter_transactions(self, transactions: Any) -> tuple[list[Transaction], int]:
        """
        Keep the valid transactions, in their original order.

        Invalid records are dropped silently; the caller only learns how many.

        Returns:
            Tuple of (valid transactions, dropped record count)

        Raises:
            DataQualityError: If transactions is not a non-empty list or no
                record survives filtering
        """
        transactions = _require_non_empty_list(transactions, "transactions")

        valid = [
            Transaction(
                id=record.get("id"),
                type=record["type"],
                amount=record["amount"],
                to=record.get("to"),
                category=record.get("category"),
                date=record.get("date"),
                raw=MappingProxyType(dict(record)),
            )
            for record in transactions
            if self.is_valid_transaction(record)
        ]

        if not valid:
            raise InsufficientDataError(
                "No valid transactions after filtering",
                required_count=1,
                available_count=0,
                field="transactions",
            )

        return valid, len(transactions) - len(valid)
