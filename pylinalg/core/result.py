"""
Generic result container for pylinalg operations.

Result is the recoverable error path: checked entry points (try_multiply,
Matrix.try_from_rows) return a Result instead of raising, so callers can
branch on success without exception handling. The raising entry points
remain the default.

Design decisions:
    - Generic over payload P for type safety
    - Tagged: exactly one of value / error is set
    - info dict for flexible metadata (kernel, shapes)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

from pylinalg.core.exceptions import PyLinalgError

P = TypeVar('P')  # Payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable tagged outcome of a pylinalg operation.

    Type Parameters:
        P: The payload type (Matrix, BenchmarkParams, ...)

    Attributes:
        value: Payload on success, None on failure
        error: The exception describing the failure, None on success
        info: Structured metadata (kernel, shapes, ...)
        timing: Execution timing breakdown, or None if not measured
        warnings: Non-fatal issues encountered during computation

    Construct with the success() / failure() classmethods rather than
    directly.

    Examples:
        >>> outcome = try_multiply(A, B)
        >>> if outcome.ok:
        ...     C = outcome.value
        ... else:
        ...     print(outcome.error.left, outcome.error.right)
    """
    value: P | None
    error: PyLinalgError | None = None
    info: dict[str, Any] = field(default_factory=dict)
    timing: dict[str, float] | None = None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.error is not None and self.value is not None:
            raise ValueError("Result cannot carry both a value and an error")

    @classmethod
    def success(
        cls,
        value: P,
        *,
        info: dict[str, Any] | None = None,
        timing: dict[str, float] | None = None,
        warnings: tuple[str, ...] = (),
    ) -> Result[P]:
        """Wrap a successful payload."""
        return cls(
            value=value,
            info=dict(info or {}),
            timing=timing,
            warnings=tuple(warnings),
        )

    @classmethod
    def failure(
        cls,
        error: PyLinalgError,
        *,
        info: dict[str, Any] | None = None,
    ) -> Result[P]:
        """Wrap a library error as a failed outcome."""
        if not isinstance(error, PyLinalgError):
            raise TypeError(
                f"error must be a PyLinalgError, got {type(error).__name__}"
            )
        return cls(value=None, error=error, info=dict(info or {}))

    @property
    def ok(self) -> bool:
        """True if the operation succeeded."""
        return self.error is None

    def unwrap(self) -> P:
        """
        Return the payload, or raise the stored error.

        Raises:
            PyLinalgError: The error recorded by a failed outcome
        """
        if self.error is not None:
            raise self.error
        return self.value

    def value_or(self, default: P) -> P:
        """Return the payload on success, otherwise default."""
        return self.value if self.error is None else default

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
