"""Unit tests for the public shaping operations."""

import pytest
from dataclasses import replace
from unittest.mock import patch

from desi_app import shapers
from desi_app.config.defaults import TitleParams, get_default_config
from desi_app.models.result import ShapingResult
from desi_app.models.summaries import (
    AuctionSummary,
    ChatMessage,
    PnrStatusReport,
    ReportCard,
    TransactionAnalysis,
)
from desi_app.shapers import (
    analyze_transactions,
    fix_title,
    generate_report_card,
    parse_chat_message,
    process_pnr,
    summarize_auction,
)


class TestSummarizeAuction:
    """Test suite for summarize_auction."""

    def test_success(self, sample_team, sample_players) -> None:
        """Test a valid roster produces a summary."""
        result = summarize_auction(sample_team, sample_players)

        assert result.success is True
        assert isinstance(result.value, AuctionSummary)
        assert result.value.total_spent == 5300
        assert result.value.remaining == 3700
        assert result.value.average_price == 1060
        assert result.value.cheapest_player.name == "Gaikwad"

    def test_documented_output(self) -> None:
        """Test the two-player example renders the original output shape."""
        result = summarize_auction(
            {"name": "CSK", "purse": 9000},
            [{"name": "Dhoni", "role": "wk", "price": 1200}, {"name": "Jadeja", "role": "ar", "price": 1600}],
        )

        assert result.value.to_dict() == {
            "teamName": "CSK",
            "totalSpent": 2800,
            "remaining": 6200,
            "playerCount": 2,
            "costliestPlayer": {"name": "Jadeja", "role": "ar", "price": 1600},
            "cheapestPlayer": {"name": "Dhoni", "role": "wk", "price": 1200},
            "averagePrice": 1400,
            "byRole": {"wk": 1, "ar": 1},
            "isOverBudget": False,
        }

    def test_unhashable_role_is_rejected(self, sample_team) -> None:
        """Test a list role fails the auction instead of raising."""
        result = summarize_auction(sample_team, [{"name": "A", "role": ["wk"], "price": 10}])

        assert result.success is False
        assert result.error_field == "players[0].role"

    def test_output_does_not_alias_input(self, sample_team, sample_players) -> None:
        """Test returned player copies are independent of caller records."""
        rendered = summarize_auction(sample_team, sample_players).value.to_dict()
        rendered["costliestPlayer"]["name"] = "changed"

        assert sample_players[1]["name"] == "Jadeja"

    @pytest.mark.parametrize("team,players", [
        (None, [{"name": "A", "role": "bat", "price": 1}]),
        ({"name": "CSK", "purse": 0}, [{"name": "A", "role": "bat", "price": 1}]),
        ({"name": "CSK", "purse": -5}, [{"name": "A", "role": "bat", "price": 1}]),
        ({"name": "CSK"}, [{"name": "A", "role": "bat", "price": 1}]),
        ({"name": "CSK", "purse": 9000}, []),
        ({"name": "CSK", "purse": 9000}, None),
    ])
    def test_invalid_input(self, team, players) -> None:
        """Test rejected input yields a failed result, not an exception."""
        result = summarize_auction(team, players)

        assert result.success is False
        assert result.value is None
        assert result.error_msg
        assert result.unwrap_or(None) is None


class TestProcessPnr:
    """Test suite for process_pnr."""

    def test_success(self, sample_pnr) -> None:
        result = process_pnr(sample_pnr)

        assert result.success is True
        assert isinstance(result.value, PnrStatusReport)
        assert result.value.pnr_formatted == "123-456-7890"
        assert result.value.summary.confirmed == 2
        assert result.value.chart_prepared is False

    def test_invalid_pnr(self, sample_pnr) -> None:
        sample_pnr["pnr"] = "12345"
        result = process_pnr(sample_pnr)

        assert result.success is False
        assert result.error_field == "pnr"

    def test_not_a_mapping(self) -> None:
        assert process_pnr("1234567890").unwrap_or(None) is None


class TestParseChatMessage:
    """Test suite for parse_chat_message."""

    def test_success(self) -> None:
        result = parse_chat_message("25/01/2025, 14:30 - Rahul: Bhai party kab hai? 😂")

        assert result.success is True
        assert result.value == ChatMessage(
            date="25/01/2025", time="14:30", sender="Rahul",
            text="Bhai party kab hai? 😂", word_count=5, sentiment="funny",
        )

    @pytest.mark.parametrize("line", [None, 42, "", "no delimiters here", "25/01/2025, 14:30 - Rahul left"])
    def test_invalid_line(self, line) -> None:
        result = parse_chat_message(line)

        assert result.success is False
        assert result.unwrap_or(None) is None


class TestGenerateReportCard:
    """Test suite for generate_report_card."""

    def test_success(self, sample_student) -> None:
        result = generate_report_card(sample_student)

        assert result.success is True
        assert isinstance(result.value, ReportCard)
        assert result.value.to_dict() == {
            "name": "Rahul",
            "totalMarks": 255,
            "percentage": 85,
            "grade": "A",
            "highestSubject": "science",
            "lowestSubject": "english",
            "passedSubjects": ["maths", "science", "english"],
            "failedSubjects": [],
            "subjectCount": 3,
        }

    def test_mark_out_of_range(self, sample_student) -> None:
        sample_student["marks"]["maths"] = 101
        result = generate_report_card(sample_student)

        assert result.success is False
        assert result.error_field == "student.marks.maths"


class TestFixTitle:
    """Test suite for fix_title."""

    def test_success(self) -> None:
        assert fix_title("dil ka kya kare").value == "Dil ka Kya Kare"

    @pytest.mark.parametrize("title", [None, 123, "", "    ", "\n\t"])
    def test_invalid_title_returns_empty_sentinel(self, title) -> None:
        result = fix_title(title)

        assert result.success is False
        assert result.unwrap_or("") == ""

    def test_custom_config(self) -> None:
        """Test an explicit configuration is honoured."""
        config = replace(get_default_config(), titles=TitleParams(lowercase_words=frozenset({"le"})))

        assert fix_title("dilwale dulhania le jayenge", config).value == "Dilwale Dulhania le Jayenge"


class TestAnalyzeTransactions:
    """Test suite for analyze_transactions."""

    def test_success(self, sample_transactions) -> None:
        result = analyze_transactions(sample_transactions)

        assert result.success is True
        assert isinstance(result.value, TransactionAnalysis)
        assert result.value.to_dict()["highestTransaction"] == sample_transactions[0]
        assert result.value.to_dict()["highestTransaction"] is not sample_transactions[0]

    def test_invalid_records_are_skipped(self, sample_transactions) -> None:
        log = [{"id": "bad", "type": "refund", "amount": 99999}] + sample_transactions
        result = analyze_transactions(log)

        assert result.value.transaction_count == 3
        assert result.value.highest_transaction.id == "T1"

    def test_all_invalid_is_failure(self) -> None:
        """Test a log with no valid records is rejected, not summarised as empty."""
        result = analyze_transactions([
            {"id": "1", "type": "debit", "amount": 0},
            {"id": "2", "type": "transfer", "amount": 500},
            {"id": "3", "type": "credit", "amount": -20},
        ])

        assert result.success is False
        assert result.value is None

    @pytest.mark.parametrize("transactions", [None, [], "T1", {"id": "T1"}])
    def test_not_a_list(self, transactions) -> None:
        assert analyze_transactions(transactions).success is False

    def test_frequent_contact_tie(self) -> None:
        result = analyze_transactions([
            {"id": "1", "type": "debit", "amount": 150, "to": "Chaiwala", "category": "food"},
            {"id": "2", "type": "debit", "amount": 150, "to": "Auto", "category": "travel"},
        ])
        assert result.value.frequent_contact == "Chaiwala"

    @pytest.mark.parametrize("bad", [{"category": ["food"]}, {"to": {"n": 1}}])
    def test_unhashable_grouping_keys_are_skipped(self, sample_transactions, bad) -> None:
        """Test records with list or dict category/contact are dropped instead of crashing."""
        record = {"id": "U1", "type": "credit", "amount": 500, "to": "A", "category": "food"}
        record.update(bad)

        result = analyze_transactions([record] + sample_transactions)

        assert result.success is True
        assert result.value.transaction_count == 3

    def test_only_unhashable_records_is_failure(self) -> None:
        result = analyze_transactions([{"type": "credit", "amount": 500, "to": "A", "category": ["food"]}])

        assert result.success is False
        assert result.error_field == "transactions"


class TestRejectionLogging:
    """Test that rejected inputs are logged."""

    def test_rejection_logged(self) -> None:
        with patch.object(shapers, "logger") as mock_logger:
            result = fix_title(None)

        assert result.success is False
        mock_logger.bind.assert_called_once_with(
            operation="fix_title",
            reason=result.error_msg,
            field="title",
        )
        mock_logger.bind.return_value.warning.assert_called_once_with("input_rejected")

    def test_success_not_logged_as_rejection(self, sample_student) -> None:
        with patch.object(shapers, "logger") as mock_logger:
            generate_report_card(sample_student)

        mock_logger.bind.assert_not_called()
        mock_logger.debug.assert_called_once()


class TestShapingResult:
    """Test suite for the result variant."""

    def test_ok(self) -> None:
        result = ShapingResult.ok(5)
        assert result.success is True
        assert result.unwrap_or(0) == 5
        assert bool(result) is True

    def test_error(self) -> None:
        result = ShapingResult.error("bad input", field="x")
        assert result.success is False
        assert result.error_msg == "bad input"
        assert result.error_field == "x"
        assert result.unwrap_or("fallback") == "fallback"
        assert bool(result) is False

    def test_ok_with_falsy_value(self) -> None:
        """Test a successful empty value is still a success."""
        result = ShapingResult.ok("")
        assert result.success is True
        assert result.unwrap_or("x") == ""
