"""
Error classification for input validation.

Every routine validates its input before computing anything. Violations are
raised as data quality errors inside the package and converted into failed
results at the public operation boundary.
"""

from .data_quality import (
    DataQualityError,
    MissingDataError,
    MalformedDataError,
    OutOfRangeError,
    InsufficientDataError,
)

__all__ = [
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    "OutOfRangeError",
    "InsufficientDataError",
]
