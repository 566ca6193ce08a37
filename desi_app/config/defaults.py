"""Default configuration and fixed rule sets for the shaping routines."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True
    include_caller: bool = False


@dataclass(frozen=True)
class GradeParams:
    """Report card grading thresholds (percentage lower bounds, best first)."""
    thresholds: tuple[tuple[float, str], ...] = (
        (90.0, "A+"),
        (80.0, "A"),
        (70.0, "B"),
        (60.0, "C"),
        (40.0, "D"),
    )
    fail_grade: str = "F"
    pass_mark: float = 40.0
    max_mark: float = 100.0
    percentage_places: int = 2


@dataclass(frozen=True)
class SentimentParams:
    """Chat sentiment markers, checked against the case-folded message."""
    funny_markers: tuple[str, ...] = ("😂", ":)", "haha")
    love_markers: tuple[str, ...] = ("❤", "love", "pyaar")


@dataclass(frozen=True)
class TitleParams:
    """Words kept lowercase unless they open the title."""
    lowercase_words: frozenset[str] = frozenset({
        "ka", "ki", "ke", "se", "aur", "ya", "the", "of", "in", "a", "an",
    })


@dataclass(frozen=True)
class PnrParams:
    """Railway PNR formatting rules."""
    pnr_length: int = 10
    berth_prefixes: tuple[str, ...] = ("B", "S", "A", "M")  # 3A, SL, 2A, 3E
    name_width: int = 20
    class_placeholder: str = "N/A"


@dataclass(frozen=True)
class TransactionParams:
    """UPI transaction log rules."""
    valid_types: tuple[str, ...] = ("credit", "debit")
    small_amount_threshold: float = 100.0
    large_amount_threshold: float = 5000.0


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    logging: LoggingParams
    grades: GradeParams
    sentiment: SentimentParams
    titles: TitleParams
    pnr: PnrParams
    transactions: TransactionParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        logging=LoggingParams(),
        grades=GradeParams(),
        sentiment=SentimentParams(),
        titles=TitleParams(),
        pnr=PnrParams(),
        transactions=TransactionParams(),
    )


DEFAULTS = get_default_config()
