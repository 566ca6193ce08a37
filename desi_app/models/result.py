"""Success/failure result variant returned by every public operation."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")
D = TypeVar("D")


@dataclass(frozen=True)
class ShapingResult(Generic[T]):
    """Result of a shaping operation."""

    # Computed value (None when the input was rejected)
    value: Optional[T] = None

    # Processing metadata
    success: bool = True
    error_msg: Optional[str] = None
    error_field: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "ShapingResult[T]":
        """Create successful result carrying the computed value."""
        return cls(value=value, success=True)

    @classmethod
    def error(cls, error_msg: str, field: Optional[str] = None) -> "ShapingResult[T]":
        """Create failed result for rejected input."""
        return cls(success=False, error_msg=error_msg, error_field=field)

    def unwrap_or(self, default: D) -> "T | D":
        """Return the value on success, otherwise the given default."""
        if self.success:
            return self.value  # type: ignore[return-value]
        return default

    def __bool__(self) -> bool:
        return self.success
