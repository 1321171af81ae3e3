"""Error types raised when a container is used against its contract."""

from __future__ import annotations

__all__ = [
    "ContractViolationError",
    "EauxError",
    "ExpectationError",
    "ImproperUnwrapError",
    "UnreachableCodeError",
]


class EauxError(Exception):
    """Base class for errors raised by Maybe and Result operations."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ExpectationError(EauxError):
    """Raised by expect/expect_failure on the wrong variant.

    The message is the one the caller passed, unchanged.
    """


class ImproperUnwrapError(EauxError):
    """Raised by unwrap/unwrap_failure on the wrong variant."""


class UnreachableCodeError(EauxError):
    """Raised when dispatch meets a value that is neither variant."""

    def __init__(self, message: str = "Reached an unreachable code path") -> None:
        super().__init__(message)


class ContractViolationError(AssertionError):
    """A caller broke a precondition (bad argument, None as a Failure error).

    This is an AssertionError on purpose: it signals a programming mistake and
    is not meant to be handled as ordinary control flow.
    """
