"""
Data quality error classifications for record validation.

These exceptions describe why a caller-supplied record was rejected so the
rejection reason can be reported back in a failed result.
"""

from typing import Any, Optional, Dict


class DataQualityError(Exception):
    """Base class for rejected input records."""

    def __init__(self, message: str, field: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.field = field
        self.context = context or {}
        self.recoverable = True


class MissingDataError(DataQualityError):
    """A required field or collection is absent or empty."""

    def __init__(self, message: str, data_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.data_type = data_type


class MalformedDataError(DataQualityError):
    """Data exists but has the wrong type or format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format


class OutOfRangeError(DataQualityError):
    """A numeric value falls outside its allowed bounds."""

    def __init__(self, message: str, value: Any = None,
                 lower: Optional[float] = None, upper: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.value = value
        self.lower = lower
        self.upper = upper


class InsufficientDataError(DataQualityError):
    """Not enough usable records remain to compute a result."""

    def __init__(self, message: str, required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count
