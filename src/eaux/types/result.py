"""Result type: Success[T] | Failure[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from eaux.assertions import safe_assert
from eaux.errors import ExpectationError, ImproperUnwrapError

if TYPE_CHECKING:
    from eaux.types.maybe import NothingType, Something

__all__ = [
    "Failure",
    "Result",
    "Success",
    "failure",
    "is_outcome",
    "is_result",
    "success",
]


class Success[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Success represents the successful outcome of an operation. There is no
    constraint on the value.

    Examples:
        >>> success(42).unwrap()
        42
        >>> success(42).map(lambda x: x * 2)
        Success(value=84)
    """

    value: T

    def and_[U, E](self, other: Result[U, E]) -> Result[U, E]:
        """Return other since this is Success."""
        safe_assert(is_result(other), "`other` must be a Result")
        return other

    def and_then[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        safe_assert(callable(f), "`f` must be callable")
        out = f(self.value)
        safe_assert(is_result(out), "`f` must return a Result")
        return out

    def expect(self, message: str) -> T:
        """Return the contained value, ignoring the message."""
        safe_assert(isinstance(message, str), "`message` must be a str")
        return self.value

    def expect_failure(self, message: str) -> NoReturn:
        """Raise an exception with the caller's message since this is Success.

        Raises:
            ExpectationError: Always, carrying message verbatim.
        """
        safe_assert(isinstance(message, str), "`message` must be a str")
        raise ExpectationError(message)

    def get_failure(self) -> NothingType:
        """Convert the error side to Maybe, returning Nothing since this is Success."""
        from eaux.types.maybe import Nothing

        return Nothing

    def get_success(self) -> Something[T]:
        """Convert to Maybe, returning Something(value)."""
        from eaux.types.maybe import Something

        return Something(self.value)

    def inspect(self, f: Callable[[T], Any]) -> Success[T]:
        """Call f with the contained value and return self unchanged."""
        safe_assert(callable(f), "`f` must be callable")
        f(self.value)
        return self

    def inspect_failure(self, f: Callable[[Any], Any]) -> Success[T]:
        """Return self without calling f."""
        safe_assert(callable(f), "`f` must be callable")
        return self

    def is_failure(self) -> bool:
        """Return False since this is Success."""
        return False

    def is_failure_and(self, predicate: Callable[[Any], bool]) -> bool:
        """Return False without calling predicate."""
        safe_assert(callable(predicate), "`predicate` must be callable")
        return False

    def is_success(self) -> TypeIs[Success[T]]:
        """Return True if the result is Success.

        This method provides type narrowing - after checking is_success(),
        the type checker knows the result is Success[T].
        """
        return True

    def is_success_and(self, predicate: Callable[[T], bool]) -> bool:
        """Return the result of applying predicate to the value."""
        safe_assert(callable(predicate), "`predicate` must be callable")
        out = predicate(self.value)
        safe_assert(isinstance(out, bool), "`predicate` must return a bool")
        return out

    def map[U](self, f: Callable[[T], U]) -> Success[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Success value.

        Returns:
            Success containing the result of applying f to the value.
        """
        safe_assert(callable(f), "`f` must be callable")
        return Success(f(self.value))

    def map_failure[F](self, f: Callable[[Any], F]) -> Success[T]:
        """Return self unchanged since this is Success."""
        safe_assert(callable(f), "`f` must be callable")
        return self

    def or_[F](self, other: Result[T, F]) -> Success[T]:
        """Return self since this is Success."""
        safe_assert(is_result(other), "`other` must be a Result")
        return self

    def unwrap(self) -> T:
        """Return the contained value.

        Since this is Success, this always succeeds.
        """
        return self.value

    def unwrap_failure(self) -> NoReturn:
        """Raise an exception since this is Success.

        Raises:
            ImproperUnwrapError: Always, since Success holds no error.
        """
        raise ImproperUnwrapError("Attempted to unwrap a `Success` value")

    def render(self, stringifier: Callable[[object], str] | None = None) -> str:
        """Render as a diagnostic block, see eaux.formatting.render."""
        from eaux.formatting import render

        return render(self, stringifier)

    def __str__(self) -> str:
        return self.render(str)


class Failure[E](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Result containing an error of type E.

    The error is never None: constructing Failure(None), directly or through
    failure() or map_failure(), raises ContractViolationError.

    Examples:
        >>> failure("bad input").is_failure()
        True
        >>> failure("bad input").unwrap_failure()
        'bad input'
    """

    error: E

    def __post_init__(self) -> None:
        safe_assert(self.error is not None, "`error` must not be None")

    def and_[U](self, other: Result[U, E]) -> Failure[E]:
        """Return self since this is Failure."""
        safe_assert(is_result(other), "`other` must be a Result")
        return self

    def and_then[T, U](self, f: Callable[[T], Result[U, E]]) -> Failure[E]:
        """Return self unchanged since this is Failure."""
        safe_assert(callable(f), "`f` must be callable")
        return self

    def expect(self, message: str) -> NoReturn:
        """Raise an exception with the caller's message.

        Raises:
            ExpectationError: Always, carrying message verbatim.
        """
        safe_assert(isinstance(message, str), "`message` must be a str")
        raise ExpectationError(message)

    def expect_failure(self, message: str) -> E:
        """Return the contained error, ignoring the message."""
        safe_assert(isinstance(message, str), "`message` must be a str")
        return self.error

    def get_failure(self) -> Something[E]:
        """Convert the error side to Maybe, returning Something(error)."""
        from eaux.types.maybe import Something

        return Something(self.error)

    def get_success(self) -> NothingType:
        """Convert to Maybe, returning Nothing since this is Failure."""
        from eaux.types.maybe import Nothing

        return Nothing

    def inspect[T](self, f: Callable[[T], Any]) -> Failure[E]:
        """Return self without calling f."""
        safe_assert(callable(f), "`f` must be callable")
        return self

    def inspect_failure(self, f: Callable[[E], Any]) -> Failure[E]:
        """Call f with the contained error and return self unchanged."""
        safe_assert(callable(f), "`f` must be callable")
        f(self.error)
        return self

    def is_failure(self) -> TypeIs[Failure[E]]:
        """Return True if the result is Failure.

        This method provides type narrowing - after checking is_failure(),
        the type checker knows the result is Failure[E].
        """
        return True

    def is_failure_and(self, predicate: Callable[[E], bool]) -> bool:
        """Return the result of applying predicate to the error."""
        safe_assert(callable(predicate), "`predicate` must be callable")
        out = predicate(self.error)
        safe_assert(isinstance(out, bool), "`predicate` must return a bool")
        return out

    def is_success(self) -> bool:
        """Return False since this is Failure."""
        return False

    def is_success_and[T](self, predicate: Callable[[T], bool]) -> bool:
        """Return False without calling predicate."""
        safe_assert(callable(predicate), "`predicate` must be callable")
        return False

    def map[T, U](self, f: Callable[[T], U]) -> Failure[E]:
        """Return self unchanged since this is Failure."""
        safe_assert(callable(f), "`f` must be callable")
        return self

    def map_failure[F](self, f: Callable[[E], F]) -> Failure[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error; must not return None.

        Returns:
            Failure containing the transformed error.
        """
        safe_assert(callable(f), "`f` must be callable")
        return Failure(f(self.error))

    def or_[T, F](self, other: Result[T, F]) -> Result[T, F]:
        """Return other since this is Failure."""
        safe_assert(is_result(other), "`other` must be a Result")
        return other

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Failure.

        Raises:
            ImproperUnwrapError: Always, since Failure has no value to unwrap.
        """
        raise ImproperUnwrapError("Attempted to unwrap a `Failure` value")

    def unwrap_failure(self) -> E:
        """Return the contained error."""
        return self.error

    def render(self, stringifier: Callable[[object], str] | None = None) -> str:
        """Render as a diagnostic block, see eaux.formatting.render."""
        from eaux.formatting import render

        return render(self, stringifier)

    def __str__(self) -> str:
        return self.render(str)


type Result[T, E] = Success[T] | Failure[E]


def success[T](value: T) -> Success[T]:
    """Create a Success containing value."""
    return Success(value)


def failure[E](error: E) -> Failure[E]:
    """Create a Failure containing error.

    Raises:
        ContractViolationError: If error is None.
    """
    return Failure(error)


def is_result(value: object) -> TypeIs[Success[Any] | Failure[Any]]:
    """Return True if value is a Success or Failure."""
    return isinstance(value, Success | Failure)


is_outcome = is_result
