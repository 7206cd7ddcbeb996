"""
Result type for consistent error handling across services.

Services return Result[T] instead of raising for expected failures
(bad input, too few players) so the JSON boundary and the Discord commands
can report them without try/except around every call.

Usage:
    return Result.ok(balance_result)
    return Result.fail("Minimum 4 players required.", code=INSUFFICIENT_PLAYERS)

    if result.success:
        send(result.value)
    else:
        print(f"Error ({result.error_code}): {result.error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a service call.

    Attributes:
        success: Whether the operation succeeded
        value: The payload when successful
        error: Error message when failed
        error_code: Machine readable code from services.error_codes
        details: Extra context for the failure (e.g. required minimum)
    """

    success: bool
    value: T | None = None
    error: str | None = None
    error_code: str | None = None
    details: dict | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> "Result[T]":
        """Create a successful result with an optional value."""
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: str, code: str | None = None, details: dict | None = None) -> "Result[T]":
        """Create a failed result with an error message and optional code."""
        return cls(success=False, error=error, error_code=code, details=details)

    def __bool__(self) -> bool:
        return self.success

    def unwrap(self) -> T:
        """
        Get the value of a successful result.

        Raises:
            ValueError: If the result is a failure
        """
        if not self.success:
            raise ValueError(f"Cannot unwrap failed result: {self.error}")
        return self.value  # type: ignore
