"""Maybe type: Something[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from eaux.assertions import safe_assert
from eaux.errors import ExpectationError, ImproperUnwrapError

if TYPE_CHECKING:
    from eaux.types.result import Failure, Success

__all__ = [
    "Maybe",
    "Nothing",
    "NothingType",
    "Something",
    "is_maybe",
    "is_optional",
    "nothing",
    "something",
]


class Something[T](msgspec.Struct, frozen=True, gc=False):
    """Something variant of Maybe containing a value of type T.

    Something represents the presence of a value. The value may be anything,
    None included: Something(None) is still Something.

    Examples:
        >>> something(42).unwrap()
        42
        >>> something(42).map(lambda x: x * 2)
        Something(value=84)
    """

    value: T

    def and_[U](self, other: Maybe[U]) -> Maybe[U]:
        """Return other since this is Something."""
        safe_assert(is_maybe(other), "`other` must be a Maybe")
        return other

    def and_then[U](self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Apply a function that returns a Maybe to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Maybe[U].

        Returns:
            The Maybe returned by f.
        """
        safe_assert(callable(f), "`f` must be callable")
        out = f(self.value)
        safe_assert(is_maybe(out), "`f` must return a Maybe")
        return out

    def expect(self, message: str) -> T:
        """Return the contained value, ignoring the message."""
        safe_assert(isinstance(message, str), "`message` must be a str")
        return self.value

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        """Return self if the predicate holds for the value, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.
        """
        safe_assert(callable(predicate), "`predicate` must be callable")
        if predicate(self.value):
            return self
        return Nothing

    def get_success_or[E](self, error: E) -> Success[T]:  # noqa: ARG002
        """Convert to Result, returning Success(value). The error is ignored."""
        from eaux.types.result import Success

        return Success(self.value)

    def inspect(self, f: Callable[[T], Any]) -> Something[T]:
        """Call f with the contained value and return self unchanged."""
        safe_assert(callable(f), "`f` must be callable")
        f(self.value)
        return self

    def is_nothing(self) -> bool:
        """Return False since this is Something."""
        return False

    def is_nothing_or(self, predicate: Callable[[T], bool]) -> bool:
        """Return the result of applying predicate to the value."""
        safe_assert(callable(predicate), "`predicate` must be callable")
        return predicate(self.value)

    def is_something(self) -> TypeIs[Something[T]]:
        """Return True if the maybe is Something.

        This method provides type narrowing - after checking is_something(),
        the type checker knows the maybe is Something[T].
        """
        return True

    def is_something_and(self, predicate: Callable[[T], bool]) -> bool:
        """Return the result of applying predicate to the value."""
        safe_assert(callable(predicate), "`predicate` must be callable")
        return predicate(self.value)

    def map[U](self, f: Callable[[T], U]) -> Something[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the value.

        Returns:
            Something containing the result of applying f to the value.
        """
        safe_assert(callable(f), "`f` must be callable")
        return Something(f(self.value))

    def or_(self, other: Maybe[T]) -> Something[T]:
        """Return self since this is Something."""
        safe_assert(is_maybe(other), "`other` must be a Maybe")
        return self

    def unwrap(self) -> T:
        """Return the contained value.

        Since this is Something, this always succeeds.
        """
        return self.value

    def render(self, stringifier: Callable[[object], str] | None = None) -> str:
        """Render as a diagnostic block, see eaux.formatting.render."""
        from eaux.formatting import render

        return render(self, stringifier)

    def __str__(self) -> str:
        return self.render(str)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Maybe representing absence of a value.

    Use the `Nothing` constant (or nothing()) instead of instantiating
    directly. Other instances compare and hash equal to it.

    Examples:
        >>> nothing().is_nothing()
        True
        >>> nothing().or_(something(0)).unwrap()
        0
    """

    def and_[U](self, other: Maybe[U]) -> NothingType:
        """Return Nothing since self is Nothing."""
        safe_assert(is_maybe(other), "`other` must be a Maybe")
        return self

    def and_then[T, U](self, f: Callable[[T], Maybe[U]]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        safe_assert(callable(f), "`f` must be callable")
        return self

    def expect(self, message: str) -> NoReturn:
        """Raise an exception with the caller's message.

        Raises:
            ExpectationError: Always, carrying message verbatim.
        """
        safe_assert(isinstance(message, str), "`message` must be a str")
        raise ExpectationError(message)

    def filter[T](self, predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        safe_assert(callable(predicate), "`predicate` must be callable")
        return self

    def get_success_or[E](self, error: E) -> Failure[E]:
        """Convert to Result, returning Failure(error).

        Args:
            error: The error value to wrap; must not be None.
        """
        from eaux.types.result import Failure

        return Failure(error)

    def inspect[T](self, f: Callable[[T], Any]) -> NothingType:
        """Return Nothing without calling f."""
        safe_assert(callable(f), "`f` must be callable")
        return self

    def is_nothing(self) -> TypeIs[NothingType]:
        """Return True if the maybe is Nothing."""
        return True

    def is_nothing_or[T](self, predicate: Callable[[T], bool]) -> bool:
        """Return True without calling predicate."""
        safe_assert(callable(predicate), "`predicate` must be callable")
        return True

    def is_something(self) -> bool:
        """Return False since this is Nothing."""
        return False

    def is_something_and[T](self, predicate: Callable[[T], bool]) -> bool:
        """Return False without calling predicate."""
        safe_assert(callable(predicate), "`predicate` must be callable")
        return False

    def map[T, U](self, f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        safe_assert(callable(f), "`f` must be callable")
        return self

    def or_[T](self, other: Maybe[T]) -> Maybe[T]:
        """Return other since self is Nothing."""
        safe_assert(is_maybe(other), "`other` must be a Maybe")
        return other

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Nothing.

        Raises:
            ImproperUnwrapError: Always, since Nothing has no value to unwrap.
        """
        raise ImproperUnwrapError("Attempted to unwrap a `Nothing` value")

    def render(self, stringifier: Callable[[object], str] | None = None) -> str:
        """Render as a diagnostic block, see eaux.formatting.render."""
        from eaux.formatting import render

        return render(self, stringifier)

    def __str__(self) -> str:
        return self.render(str)


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Maybe[T] = Something[T] | NothingType


def something[T](value: T) -> Something[T]:
    """Create a Something containing value."""
    return Something(value)


def nothing() -> NothingType:
    """Return the Nothing instance."""
    return Nothing


def is_maybe(value: object) -> TypeIs[Something[Any] | NothingType]:
    """Return True if value is a Something or Nothing."""
    return isinstance(value, Something | NothingType)


is_optional = is_maybe
